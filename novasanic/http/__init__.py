"""
HTTP Module
Response and URL utilities
"""
from novasanic.http.response_helper import ResponseHelper
from novasanic.http.url import Url

__all__ = [
    'ResponseHelper',
    'Url',
]

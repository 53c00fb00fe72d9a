"""
Middleware Package
"""
from novasanic.middleware.base_middleware import Middleware
from novasanic.middleware.session_middleware import SessionMiddleware
from novasanic.middleware.language_middleware import LanguageMiddleware

__all__ = [
    'Middleware',
    'SessionMiddleware',
    'LanguageMiddleware',
]

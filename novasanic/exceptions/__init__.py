"""
Exceptions Package
Centralized error handling and reporting
"""
from novasanic.exceptions.custom import (
    FrameworkException,
    NotFoundException,
    ControllerLoadException,
    LanguageLoadException,
)
from novasanic.exceptions.error_handler import ErrorHandler

__all__ = [
    # Error handling
    'ErrorHandler',

    # Custom exceptions
    'FrameworkException',
    'NotFoundException',
    'ControllerLoadException',
    'LanguageLoadException',
]

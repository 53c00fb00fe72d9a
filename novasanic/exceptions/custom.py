"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class NotFoundException(FrameworkException):
    """
    Resource not found exception

    Example:
        raise NotFoundException("Page not found")
    """
    status_code = 404
    message = "Resource not found"


class ControllerLoadException(FrameworkException):
    """
    Raised when a controller file cannot be imported while scanning

    Example:
        raise ControllerLoadException("Could not load controller 'App.Controllers.Blog'")
    """
    status_code = 500
    message = "Could not load controller"


class LanguageLoadException(FrameworkException):
    """
    Raised when a language file is missing, unreadable or malformed

    Example:
        raise LanguageLoadException("Could not load language file 'En/welcome.json'")
    """
    status_code = 500
    message = "Could not load language file"

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.name = name

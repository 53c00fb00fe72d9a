"""
Framework Helper Functions
Centralized user-facing helpers for easy access throughout the application
"""
from typing import Any


# ==============================================================================
# Session Helpers
# ==============================================================================

def session(request, key: str = None, default: Any = None) -> Any:
    """
    Get session value or session manager

    Args:
        request: Current request
        key: Session key (optional)
        default: Default value if key not found

    Returns:
        Session value or session manager

    Example:
        session(request, 'user_id')
        session(request, 'cart', [])
        session(request)
    """
    sess = getattr(request.ctx, 'session', None)
    if sess is None:
        raise RuntimeError("Session not available. Make sure SessionMiddleware is registered.")

    if key is None:
        return sess

    return sess.get(key, default)


# ==============================================================================
# Language Helpers
# ==============================================================================

def lang(request, key: str, code: str = None) -> str:
    """
    Translate a key with the request's language

    Example:
        lang(request, 'welcome')  # 'Welcome' or 'Willkommen'
    """
    language = getattr(request.ctx, 'language', None)
    if language is None:
        raise RuntimeError("Language not available. Make sure LanguageMiddleware is registered.")

    return language.get(key, code)


# ==============================================================================
# String Helpers
# ==============================================================================

def snake_case(value: str) -> str:
    """
    Convert string to snake_case

    Example:
        snake_case('FrameworkApp')  # 'framework_app'
    """
    from novasanic.support import Str
    return Str.snake(value)


def studly_case(value: str) -> str:
    """
    Convert string to StudlyCase

    Example:
        studly_case('framework_app')  # 'FrameworkApp'
    """
    from novasanic.support import Str
    return Str.studly(value)

"""
Framework Package
Export commonly used helpers for easy import
"""

from novasanic.helpers import (
    # Session
    session,
    # Language
    lang,
    # String
    snake_case,
    studly_case,
)

__all__ = [
    'session',
    'lang',
    'snake_case',
    'studly_case',
]

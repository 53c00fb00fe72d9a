"""
Language Package
Localization strings with session/cookie language selection
"""
from novasanic.language.language import Language

__all__ = [
    'Language',
]

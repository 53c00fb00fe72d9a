"""
Session Stores
"""
from novasanic.session.stores.file_store import FileSessionStore
from novasanic.session.stores.cookie_store import CookieSessionStore
from novasanic.session.stores.array_store import ArraySessionStore

__all__ = [
    'FileSessionStore',
    'CookieSessionStore',
    'ArraySessionStore',
]

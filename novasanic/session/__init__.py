"""
Session Management Package
Laravel-style session management for Sanic
"""
from novasanic.session.session_manager import SessionManager
from novasanic.session.store import SessionStore
from novasanic.session.stores import FileSessionStore, CookieSessionStore, ArraySessionStore

__all__ = [
    'SessionManager',
    'SessionStore',
    'FileSessionStore',
    'CookieSessionStore',
    'ArraySessionStore',
]

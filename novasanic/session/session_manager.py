"""
Session Manager
Laravel-style session management with multiple storage drivers
"""
from typing import Any, Dict, List, Optional
from novasanic.session.store import SessionStore
from novasanic.support import Crypto


class SessionManager:
    """
    Laravel-style session manager

    Provides dictionary-like interface with additional methods:
    - get(), put(), has(), exists(), all(), pull(), forget(), flush()
    - regenerate(), save()
    """

    def __init__(self, store: SessionStore, session_id: str, lifetime: Optional[int] = None):
        """
        Initialize session manager

        Args:
            store: Session storage driver
            session_id: Session identifier
            lifetime: Session lifetime in seconds
        """
        if lifetime is None:
            from novasanic.defaults import DEFAULT_SESSION_LIFETIME
            lifetime = DEFAULT_SESSION_LIFETIME
        self.store = store
        self.session_id = session_id
        self.lifetime = lifetime
        self._data: Dict[str, Any] = {}
        self._loaded = False
        self._dirty = False
        self._old_id: Optional[str] = None

    async def start(self):
        """Load session data from storage"""
        if self._loaded:
            return

        self._data = await self.store.read(self.session_id)
        self._loaded = True

    # === Data Retrieval ===

    def get(self, key: str, default: Any = None) -> Any:
        """Get session value"""
        return self._data.get(key, default)

    def all(self) -> Dict[str, Any]:
        """Get all session data (internal keys excluded)"""
        return {k: v for k, v in self._data.items() if not k.startswith('_')}

    def has(self, key: str) -> bool:
        """Check if key exists in session"""
        return key in self._data

    def exists(self, key: str) -> bool:
        """Alias for has()"""
        return self.has(key)

    # === Data Storage ===

    def put(self, key: str, value: Any) -> None:
        """Store value in session"""
        self._data[key] = value
        self._dirty = True

    def set(self, key: str, value: Any) -> None:
        """Alias for put()"""
        self.put(key, value)

    # === Data Removal ===

    def forget(self, keys: str | List[str]) -> None:
        """Remove key(s) from session"""
        if isinstance(keys, str):
            keys = [keys]

        for key in keys:
            self._data.pop(key, None)

        self._dirty = True

    def pull(self, key: str, default: Any = None) -> Any:
        """Get and remove value from session"""
        value = self.get(key, default)
        self.forget(key)
        return value

    def flush(self) -> None:
        """Clear all session data"""
        self._data.clear()
        self._dirty = True

    # === Session Management ===

    def regenerate(self, destroy_old: bool = False) -> str:
        """
        Regenerate session ID

        Args:
            destroy_old: Whether to destroy old session on save()

        Returns:
            New session ID
        """
        from novasanic.defaults import DEFAULT_SESSION_ID_LENGTH
        if destroy_old:
            self._old_id = self.session_id

        self.session_id = Crypto.generate_token(DEFAULT_SESSION_ID_LENGTH)
        self._dirty = True
        return self.session_id

    def get_id(self) -> str:
        """Get current session ID"""
        return self.session_id

    def is_dirty(self) -> bool:
        """Check if the session changed since it was loaded or saved"""
        return self._dirty

    # === Persistence ===

    async def save(self) -> bool:
        """
        Save session data to storage

        Returns:
            True if successful
        """
        if not self._dirty:
            return True

        success = await self.store.write(self.session_id, self._data)

        if self._old_id:
            await self.store.destroy(self._old_id)
            self._old_id = None

        self._dirty = False
        return success

    # === Dictionary Interface ===

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style get"""
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """Dictionary-style set"""
        self.put(key, value)

    def __contains__(self, key: str) -> bool:
        """Dictionary-style contains"""
        return self.has(key)

    def __repr__(self) -> str:
        """String representation"""
        return f"<SessionManager id={self.session_id[:8]}... data={len(self._data)} keys>"

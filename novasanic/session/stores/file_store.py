"""
File Session Store
Stores sessions as JSON files in the filesystem
"""
import json
import time
from pathlib import Path
from typing import Any, Dict
from novasanic.session.store import SessionStore


class FileSessionStore(SessionStore):
    """File-based session storage"""

    def __init__(self, path: Path, lifetime: int = None):
        """
        Initialize file session store

        Args:
            path: Path to session storage directory
            lifetime: Seconds a written session stays valid
        """
        from novasanic.defaults import DEFAULT_SESSION_LIFETIME
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self.lifetime = lifetime or DEFAULT_SESSION_LIFETIME

    def _get_session_file(self, session_id: str) -> Path:
        """Get path to session file"""
        return self.path / f"session_{session_id}.json"

    async def read(self, session_id: str) -> Dict[str, Any]:
        """Read session from file"""
        session_file = self._get_session_file(session_id)

        if not session_file.exists():
            return {}

        try:
            with open(session_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return {}

        if data.get('_expire_at', 0) < time.time():
            await self.destroy(session_id)
            return {}

        return data.get('data', {})

    async def write(self, session_id: str, data: Dict[str, Any]) -> bool:
        """Write session to file"""
        session_file = self._get_session_file(session_id)

        session_data = {
            'data': data,
            '_created_at': time.time(),
            '_expire_at': time.time() + self.lifetime,
        }

        try:
            with open(session_file, 'w', encoding='utf-8') as f:
                json.dump(session_data, f)
        except (OSError, TypeError):
            return False

        return True

    async def destroy(self, session_id: str) -> bool:
        """Delete session file"""
        session_file = self._get_session_file(session_id)

        try:
            session_file.unlink(missing_ok=True)
        except OSError:
            return False

        return True

    async def gc(self, max_lifetime: int) -> int:
        """Remove expired session files"""
        current_time = time.time()
        deleted = 0

        for session_file in self.path.glob('session_*.json'):
            try:
                with open(session_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                expired = data.get('_expire_at', 0) < current_time
            except (json.JSONDecodeError, OSError):
                # Corrupted file, delete it
                expired = True

            if expired:
                session_file.unlink(missing_ok=True)
                deleted += 1

        return deleted

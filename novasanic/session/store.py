"""
Session Store Interface
Base class for all session storage drivers
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class SessionStore(ABC):
    """Base session store interface"""

    @abstractmethod
    async def read(self, session_id: str) -> Dict[str, Any]:
        """
        Read session data from storage

        Args:
            session_id: Session identifier

        Returns:
            Session data dictionary
        """

    @abstractmethod
    async def write(self, session_id: str, data: Dict[str, Any]) -> bool:
        """
        Write session data to storage

        Returns:
            True if successful
        """

    @abstractmethod
    async def destroy(self, session_id: str) -> bool:
        """Delete session from storage"""

    @abstractmethod
    async def gc(self, max_lifetime: int) -> int:
        """
        Garbage collection - remove expired sessions

        Returns:
            Number of sessions deleted
        """

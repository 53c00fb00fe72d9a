"""
Cookie Session Store
Stores session data signed in cookies using itsdangerous
"""
from typing import Any, Dict
from itsdangerous import BadSignature
from novasanic.session.store import SessionStore
from novasanic.support import Crypto


class CookieSessionStore(SessionStore):
    """Cookie-based session storage (signed)"""

    def __init__(self, secret_key: str):
        """
        Initialize cookie session store

        Args:
            secret_key: Secret key for signing
        """
        self.secret_key = secret_key
        self.serializer = Crypto.create_serializer(secret_key)

    async def read(self, session_id: str) -> Dict[str, Any]:
        """
        Read session from signed cookie data

        Note: session_id here is the signed cookie value
        """
        if not session_id:
            return {}

        try:
            data = self.serializer.loads(session_id)
        except BadSignature:
            return {}

        return data if isinstance(data, dict) else {}

    async def write(self, session_id: str, data: Dict[str, Any]) -> bool:
        """
        Cookie store doesn't write here - the middleware sets the cookie
        """
        return True

    def serialize(self, data: Dict[str, Any]) -> str:
        """
        Serialize session data for cookie

        Returns:
            Signed cookie value
        """
        return self.serializer.dumps(data)

    async def destroy(self, session_id: str) -> bool:
        """Actual cookie deletion happens in middleware"""
        return True

    async def gc(self, max_lifetime: int) -> int:
        """Garbage collection not needed for cookie store"""
        return 0

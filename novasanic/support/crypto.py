"""
Crypto Helpers
Token generation and signed serialization for sessions
"""
import secrets
from itsdangerous import URLSafeTimedSerializer


class Crypto:
    """Cryptographic helpers used by the session layer"""

    @staticmethod
    def create_serializer(secret_key: str) -> URLSafeTimedSerializer:
        """
        Create a signing serializer

        Args:
            secret_key: Secret key used to sign payloads

        Returns:
            URLSafeTimedSerializer instance
        """
        return URLSafeTimedSerializer(secret_key)

    @staticmethod
    def generate_token(length: int = 32) -> str:
        """
        Generate a URL-safe random token

        Args:
            length: Number of characters in the token
        """
        return secrets.token_urlsafe(length)[:length]

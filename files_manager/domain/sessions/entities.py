"""
Session Entities

Bearer session tokens handed out by /connect.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

# 32 random bytes, 256 bits of entropy.
TOKEN_BYTES = 32

DEFAULT_SESSION_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class SessionToken:
    """
    Opaque bearer token mapped to a user.

    The token is the lookup key; expiry is enforced by the backing store's
    TTL, so the entity itself carries no expiry timestamp.
    """
    token: str
    user_id: str
    created_at: datetime

    @classmethod
    def create(cls, user_id: str) -> 'SessionToken':
        """
        Factory method to create a new session token.

        Args:
            user_id: Owner of the session

        Returns:
            New SessionToken with a freshly generated token
        """
        return cls(
            token=cls._generate_token(),
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def _generate_token(length: int = TOKEN_BYTES) -> str:
        """
        Generate a cryptographically secure random token.

        Args:
            length: Token length in bytes

        Returns:
            URL-safe token string
        """
        return secrets.token_urlsafe(length)

    @property
    def short_token(self) -> str:
        """Truncated token for log lines."""
        return f"{self.token[:6]}..."

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, token: str, data: Dict[str, Any]) -> 'SessionToken':
        """Create SessionToken from its stored dictionary."""
        return cls(
            token=token,
            user_id=data["user_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
        )

"""
Session Repositories

Repository interface for session token persistence in a key-value store
with native expiration.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import SessionToken


class SessionRepository(ABC):
    """Abstract repository interface for session tokens."""

    @abstractmethod
    def add(self, session: SessionToken, ttl_seconds: int) -> bool:
        """
        Store a session if its token is not already present.

        Args:
            session: Session to store
            ttl_seconds: Expiration enforced by the store

        Returns:
            True if stored, False if the token already exists

        Raises:
            StoreUnavailableError: If the backing store is unreachable
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, token: str) -> Optional[SessionToken]:
        """
        Look up a session without refreshing its TTL.

        Args:
            token: Bearer token

        Returns:
            SessionToken if present and not expired, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, token: str) -> bool:
        """
        Remove a session.

        Args:
            token: Bearer token

        Returns:
            True if a session was removed, False if none existed
        """
        pass  # pragma: no cover

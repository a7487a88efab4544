"""
Redis Session Repository Implementation

Sessions live under ``auth:<token>`` with a native Redis expiry; nothing in
the application polls for expired sessions.
"""

import logging
from typing import Optional

from ..domain.sessions.entities import SessionToken
from ..domain.sessions.repositories import SessionRepository
from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisSessionRepository(SessionRepository):
    """Redis-based implementation of SessionRepository."""

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.key_prefix = "auth"

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}:{token}"

    def add(self, session: SessionToken, ttl_seconds: int) -> bool:
        """Store a session with SET NX EX."""
        return self.redis_repo.set_json(
            self._key(session.token),
            session.to_dict(),
            ttl=ttl_seconds,
            only_if_absent=True,
        )

    def get(self, token: str) -> Optional[SessionToken]:
        """Plain GET; the TTL is left untouched."""
        data = self.redis_repo.get_json(self._key(token))
        if data is None:
            return None
        try:
            return SessionToken.from_dict(token, data)
        except (KeyError, ValueError) as e:
            logger.warning(f"Ignoring malformed session {token[:6]}...: {e}")
            return None

    def delete(self, token: str) -> bool:
        return self.redis_repo.delete(self._key(token))

"""
Session Services

Issues, resolves and revokes bearer tokens.
"""

import logging
from typing import Optional

from ..errors import StoreUnavailableError
from .entities import DEFAULT_SESSION_TTL_SECONDS, SessionToken
from .repositories import SessionRepository

logger = logging.getLogger(__name__)

# Attempts before giving up on generating an unused token.
MAX_ISSUE_ATTEMPTS = 3


class SessionTokenService:
    """
    Domain service for session token lifecycle.

    Every operation is a single-key read or write against the repository;
    store failures propagate as StoreUnavailableError and are never mistaken
    for a missing token.
    """

    def __init__(
        self,
        session_repository: SessionRepository,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
    ):
        """
        Initialize SessionTokenService.

        Args:
            session_repository: Repository for session persistence
            ttl_seconds: Session lifetime (default: 24 hours)
        """
        if ttl_seconds <= 0:
            raise ValueError(f"Session TTL must be positive, got {ttl_seconds}")
        self.session_repo = session_repository
        self.ttl_seconds = ttl_seconds

    def issue(self, user_id: str) -> str:
        """
        Issue a new token for a user.

        Args:
            user_id: User the token authenticates

        Returns:
            The bearer token

        Raises:
            StoreUnavailableError: If the store is unreachable or no unused
                token could be generated
        """
        for _ in range(MAX_ISSUE_ATTEMPTS):
            session = SessionToken.create(user_id)
            if self.session_repo.add(session, self.ttl_seconds):
                logger.info(f"Issued session {session.short_token} for user {user_id}")
                return session.token
            logger.warning("Generated session token already in use, retrying")

        raise StoreUnavailableError("Could not store a unique session token")

    def resolve(self, token: Optional[str]) -> Optional[str]:
        """
        Resolve a token to its user ID.

        Args:
            token: Bearer token (may be None or empty)

        Returns:
            User ID, or None if the token is unknown, revoked or expired
        """
        if not token:
            return None

        session = self.session_repo.get(token)
        if session is None:
            return None
        return session.user_id

    def revoke(self, token: Optional[str]) -> bool:
        """
        Revoke a token immediately.

        Args:
            token: Bearer token

        Returns:
            True if the token was revoked, False if it did not exist
            (including a second revoke of the same token)
        """
        if not token:
            return False

        revoked = self.session_repo.delete(token)
        if revoked:
            logger.info(f"Revoked session {token[:6]}...")
        return revoked

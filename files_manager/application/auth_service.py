"""
Authentication Application Service

Credential login, logout and token-to-user resolution on top of the user
and session domain services.
"""

import logging
from typing import Optional

from ..domain.errors import InvalidCredentialsError, InvalidTokenError
from ..domain.sessions import SessionTokenService
from ..domain.users import User, UserManager
from .requests import BasicCredentials

logger = logging.getLogger(__name__)


class AuthService:
    """Application service for sessions bound to registered users."""

    def __init__(self, user_manager: UserManager, session_service: SessionTokenService):
        """
        Initialize AuthService.

        Args:
            user_manager: UserManager domain service
            session_service: SessionTokenService domain service
        """
        self.user_manager = user_manager
        self.session_service = session_service

    def connect(self, authorization_header: Optional[str]) -> str:
        """
        Log in with a basic-auth header.

        Args:
            authorization_header: Raw ``Authorization`` header value

        Returns:
            A new session token

        Raises:
            InvalidCredentialsError: If the header is malformed or the
                credentials do not match a user
        """
        credentials = BasicCredentials.from_authorization_header(authorization_header)
        if credentials is None:
            raise InvalidCredentialsError("Malformed basic authorization header")

        user = self.user_manager.authenticate(credentials.email, credentials.password)
        return self.session_service.issue(user.user_id)

    def current_user(self, token: Optional[str]) -> User:
        """
        Resolve a token to its user.

        Raises:
            InvalidTokenError: If the token is unknown, expired or its user
                no longer exists
        """
        user_id = self.session_service.resolve(token)
        if user_id is None:
            raise InvalidTokenError("Unknown or expired token")

        user = self.user_manager.get_user(user_id)
        if user is None:
            logger.warning(f"Session references missing user {user_id}")
            raise InvalidTokenError(f"Token user {user_id} not found")
        return user

    def find_user(self, token: Optional[str]) -> Optional[User]:
        """Resolve a token to its user, or None for anonymous requests."""
        try:
            return self.current_user(token)
        except InvalidTokenError:
            return None

    def disconnect(self, token: Optional[str]) -> None:
        """
        Revoke a token.

        Raises:
            InvalidTokenError: If the token does not resolve to a user or was
                revoked concurrently
        """
        user = self.current_user(token)
        if not self.session_service.revoke(token):
            raise InvalidTokenError(f"Token of user {user.user_id} already revoked")
        logger.info(f"User {user.user_id} disconnected")

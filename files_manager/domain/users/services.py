"""
User Services

Credential store: registration and credential verification.
"""

import logging
from typing import Optional

from ..errors import (
    InvalidCredentialsError,
    MissingEmailError,
    MissingPasswordError,
)
from .entities import User
from .repositories import UserRepository

logger = logging.getLogger(__name__)


class UserManager:
    """
    Domain service for user registration and authentication.

    Holds no state beyond the repository it reads and writes through.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize UserManager with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self.user_repo = user_repository

    def register(self, email: Optional[str], password: Optional[str]) -> User:
        """
        Register a new user.

        Args:
            email: Login email
            password: Clear-text password

        Returns:
            The created User

        Raises:
            MissingEmailError: If email is empty
            MissingPasswordError: If password is empty
            EmailTakenError: If the store already holds the email
        """
        if not email:
            raise MissingEmailError()
        if not password:
            raise MissingPasswordError()

        user = User.create(email, password)
        # The repository rejects duplicates atomically; no lookup beforehand.
        self.user_repo.insert(user)

        logger.info(f"Registered user {user.user_id}")
        return user

    def authenticate(self, email: Optional[str], password: Optional[str]) -> User:
        """
        Verify a login credential pair.

        Args:
            email: Login email
            password: Clear-text password

        Returns:
            The matching User

        Raises:
            InvalidCredentialsError: If the pair does not match a user
        """
        if not email or not password:
            raise InvalidCredentialsError("Empty credentials")

        user = self.user_repo.get_by_email(email)
        if user is None or not user.verify_password(password):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError("Credential mismatch")

        return user

    def get_user(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by ID.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        return self.user_repo.get(user_id)

    def count_users(self) -> int:
        return self.user_repo.count()

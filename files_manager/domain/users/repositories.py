"""
User Repositories

Repository interface for user persistence.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import User


class UserRepository(ABC):
    """Abstract repository interface for user persistence."""

    @abstractmethod
    def insert(self, user: User) -> None:
        """
        Insert a new user.

        The email uniqueness constraint is enforced here, in the write path:
        two concurrent inserts for the same email must result in exactly one
        success.

        Args:
            user: User to insert

        Raises:
            EmailTakenError: If the email is already registered
            StoreUnavailableError: If the backing store is unreachable
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by ID.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email.

        Args:
            email: Login email

        Returns:
            User if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def count(self) -> int:
        """Number of registered users."""
        pass  # pragma: no cover

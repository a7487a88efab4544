"""
User Entities

Domain entity for registered users.
"""

from dataclasses import dataclass
from typing import Any, Dict

from werkzeug.security import check_password_hash, generate_password_hash

from ..ids import generate_record_id


@dataclass(frozen=True)
class User:
    """
    Registered user.

    Immutable after registration. ``password_hash`` is a salted one-way hash
    and never leaves the persistence layer.
    """
    user_id: str
    email: str
    password_hash: str

    @classmethod
    def create(cls, email: str, password: str) -> 'User':
        """
        Factory method to create a new user with a hashed password.

        Args:
            email: Login email
            password: Clear-text password (hashed here, never stored)

        Returns:
            New User instance
        """
        return cls(
            user_id=generate_record_id(),
            email=email,
            password_hash=generate_password_hash(password),
        )

    def verify_password(self, password: str) -> bool:
        """Check a clear-text password against the stored hash."""
        return check_password_hash(self.password_hash, password)

    def to_public_dict(self) -> Dict[str, Any]:
        """API representation (no hash)."""
        return {"id": self.user_id, "email": self.email}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence."""
        return {
            "id": self.user_id,
            "email": self.email,
            "password": self.password_hash,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """Create User from its persisted dictionary."""
        return cls(
            user_id=data["id"],
            email=data["email"],
            password_hash=data["password"],
        )

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, email={self.email!r})"

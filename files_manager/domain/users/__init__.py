"""
User Domain

Registered users and credential verification.
"""

from .entities import User
from .repositories import UserRepository
from .services import UserManager

__all__ = [
    "User",
    "UserRepository",
    "UserManager",
]

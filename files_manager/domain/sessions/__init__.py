"""
Session Domain

Bearer tokens with store-enforced expiry.
"""

from .entities import DEFAULT_SESSION_TTL_SECONDS, SessionToken
from .repositories import SessionRepository
from .services import SessionTokenService

__all__ = [
    "DEFAULT_SESSION_TTL_SECONDS",
    "SessionToken",
    "SessionRepository",
    "SessionTokenService",
]

"""
Redis User Repository Implementation

Layout:
- ``user:<id>``: JSON document of the user
- ``user_email:<email>``: user ID owning the email, claimed with SET NX
- ``users:count``: number of registered users
"""

import json
import logging
from typing import Optional

from ..domain.errors import EmailTakenError, StoreUnavailableError
from ..domain.users.entities import User
from ..domain.users.repositories import UserRepository
from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)


class RedisUserRepository(UserRepository):
    """Redis-based implementation of UserRepository."""

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.key_prefix = "user"
        self.email_prefix = "user_email"
        self.count_key = "users:count"

    def _user_key(self, user_id: str) -> str:
        return f"{self.key_prefix}:{user_id}"

    def _email_key(self, email: str) -> str:
        return f"{self.email_prefix}:{email}"

    def insert(self, user: User) -> None:
        """
        Claim the email with SET NX, then write the document and counter.

        Only one of several concurrent claims on the same email succeeds.
        """
        email_key = self.redis_repo._make_key(self._email_key(user.email))

        with self.redis_repo.guard(f"claim email for {user.user_id}"):
            claimed = self.redis_repo.redis.set(email_key, user.user_id, nx=True)
        if not claimed:
            raise EmailTakenError(f"Email already registered: {user.email}")

        try:
            with self.redis_repo.guard(f"insert user {user.user_id}"):
                pipeline = self.redis_repo.redis.pipeline(transaction=True)
                pipeline.set(
                    self.redis_repo._make_key(self._user_key(user.user_id)),
                    json.dumps(user.to_dict()),
                )
                pipeline.incr(self.redis_repo._make_key(self.count_key))
                pipeline.execute()
        except StoreUnavailableError:
            logger.warning(f"Releasing email claim of {user.user_id} after failed insert")
            try:
                self.redis_repo.delete(self._email_key(user.email))
            except StoreUnavailableError:
                logger.error(f"Could not release email claim of {user.user_id}")
            raise

    def get(self, user_id: str) -> Optional[User]:
        """Retrieve a user from Redis."""
        if not user_id:
            return None
        data = self.redis_repo.get_json(self._user_key(user_id))
        if data is None:
            return None
        return self._deserialize(data, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Resolve the email claim, then load the document."""
        if not email:
            return None
        with self.redis_repo.guard("lookup email"):
            raw_id = self.redis_repo.redis.get(self.redis_repo._make_key(self._email_key(email)))
        user_id = self.redis_repo.decode(raw_id)
        if user_id is None:
            return None
        return self.get(user_id)

    def count(self) -> int:
        return self.redis_repo.get_int(self.count_key)

    @staticmethod
    def _deserialize(data: dict, user_id: str) -> Optional[User]:
        try:
            return User.from_dict(data)
        except KeyError as e:
            logger.warning(f"Error deserializing user {user_id}: {e}")
            return None

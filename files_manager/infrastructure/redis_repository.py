"""
Redis Repository Base Class

Thin wrapper around a redis-py client providing JSON storage, counters and
atomic field updates. Connection and command failures are translated into
StoreUnavailableError so callers can tell an outage from a missing key.
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import redis
from redis.exceptions import RedisError

from ..domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class RedisRepository:
    """Base Redis repository with JSON helpers and error translation."""

    # Returns the updated document, or nil when the key is missing.
    _UPDATE_FIELD_SCRIPT = """
    local data = redis.call('GET', KEYS[1])
    if not data then
        return nil
    end

    local doc = cjson.decode(data)
    doc[ARGV[1]] = cjson.decode(ARGV[2])

    local updated = cjson.encode(doc)
    redis.call('SET', KEYS[1], updated, 'KEEPTTL')
    return updated
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = ""):
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        """Create a prefixed key for Redis storage."""
        return f"{self.key_prefix}:{key}" if self.key_prefix else key

    @contextmanager
    def guard(self, operation: str) -> Iterator[None]:
        """
        Translate redis-py errors raised inside the block.

        Args:
            operation: Short description used in logs and the raised error

        Raises:
            StoreUnavailableError: If any Redis error occurs
        """
        try:
            yield
        except RedisError as e:
            logger.error(f"Redis {operation} failed: {e}")
            raise StoreUnavailableError(f"Redis {operation} failed: {e}", original_error=e) from e

    @staticmethod
    def decode(value: Any) -> Optional[str]:
        """Decode a raw Redis reply into text."""
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def loads(self, raw: Any, key: str) -> Optional[Dict[str, Any]]:
        """
        Parse a stored JSON document.

        Corrupt documents are logged and treated as absent.
        """
        if raw is None:
            return None
        try:
            return json.loads(self.decode(raw))
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding corrupt JSON at key {key}: {e}")
            return None

    def set_json(
        self,
        key: str,
        data: Dict[str, Any],
        ttl: Optional[int] = None,
        only_if_absent: bool = False,
    ) -> bool:
        """
        Atomically set JSON data with optional TTL.

        Args:
            key: Redis key
            data: Dictionary to store as JSON
            ttl: Time to live in seconds
            only_if_absent: Write only if the key does not exist (SET NX)

        Returns:
            True if written, False if ``only_if_absent`` found an existing key
        """
        with self.guard(f"SET {key}"):
            result = self.redis.set(
                self._make_key(key),
                json.dumps(data),
                ex=ttl,
                nx=only_if_absent,
            )
        return bool(result)

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Get JSON data from Redis.

        Args:
            key: Redis key

        Returns:
            Dictionary if found and valid JSON, None otherwise
        """
        with self.guard(f"GET {key}"):
            raw = self.redis.get(self._make_key(key))
        return self.loads(raw, key)

    def update_json_field(self, key: str, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """
        Atomically update a single field in a JSON document using Lua.

        Args:
            key: Redis key
            field: Field name to update
            value: New JSON-serializable value

        Returns:
            The updated document, or None if the key does not exist
        """
        with self.guard(f"update {field} of {key}"):
            raw = self.redis.eval(
                self._UPDATE_FIELD_SCRIPT,
                1,
                self._make_key(key),
                field,
                json.dumps(value),
            )
        return self.loads(raw, key)

    def delete(self, key: str) -> bool:
        """
        Delete a key from Redis.

        Returns:
            True if the key was deleted, False if it did not exist
        """
        with self.guard(f"DEL {key}"):
            return self.redis.delete(self._make_key(key)) > 0

    def incr(self, key: str) -> int:
        """Atomically increment a counter and return its new value."""
        with self.guard(f"INCR {key}"):
            return int(self.redis.incr(self._make_key(key)))

    def get_int(self, key: str) -> int:
        """Read a counter, treating a missing key as zero."""
        with self.guard(f"GET {key}"):
            raw = self.redis.get(self._make_key(key))
        return int(self.decode(raw)) if raw is not None else 0


class RedisConnectionManager:
    """Manages a Redis connection pool and the client built on it."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        max_connections: int = 20,
        socket_timeout: Optional[float] = 5.0,
    ):
        self.connection_pool = redis.ConnectionPool(
            host=host,
            port=port,
            db=db,
            password=password,
            max_connections=max_connections,
            decode_responses=False,
            retry_on_timeout=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            socket_keepalive=True,
        )
        self._client = None

    @property
    def client(self) -> redis.Redis:
        """Get Redis client instance with connection pooling."""
        if self._client is None:
            self._client = redis.Redis(connection_pool=self.connection_pool)
        return self._client

    def health_check(self) -> bool:
        """Check if Redis connection is healthy."""
        try:
            return bool(self.client.ping())
        except RedisError:
            return False

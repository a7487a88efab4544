"""
Redis Configuration

Connection settings for the two Redis roles: the session store and the
metadata store. Clients are built by the app factory and injected; nothing
here holds a module-level connection.
"""

import os
from typing import Optional

import redis

from ..infrastructure.redis_repository import RedisConnectionManager, RedisRepository

SESSION_STORE_PREFIX = "REDIS"
METADATA_STORE_PREFIX = "DB_REDIS"


class RedisConfig:
    """Redis configuration settings read from ``<PREFIX>_*`` variables."""

    def __init__(self, prefix: str = SESSION_STORE_PREFIX, default_db: int = 0):
        self.prefix = prefix
        self.host = os.getenv(f"{prefix}_HOST", "localhost")
        self.port = int(os.getenv(f"{prefix}_PORT", 6379))
        self.db = int(os.getenv(f"{prefix}_DB", default_db))
        self.password = os.getenv(f"{prefix}_PASSWORD")
        self.max_connections = int(os.getenv(f"{prefix}_MAX_CONNECTIONS", 20))
        self.key_prefix = os.getenv(f"{prefix}_KEY_PREFIX", "files_manager")

        # Redis URL format: redis://[:password@]host:port/db
        self.url = os.getenv(f"{prefix}_URL")
        if self.url:
            connection_params = redis.connection.parse_url(self.url)
            self.host = connection_params.get("host", self.host)
            self.port = connection_params.get("port", self.port)
            self.db = connection_params.get("db", self.db)
            self.password = connection_params.get("password", self.password)

    @classmethod
    def for_sessions(cls) -> "RedisConfig":
        return cls(SESSION_STORE_PREFIX, default_db=0)

    @classmethod
    def for_metadata(cls) -> "RedisConfig":
        return cls(METADATA_STORE_PREFIX, default_db=1)


def create_connection_manager(config: Optional[RedisConfig] = None) -> RedisConnectionManager:
    """
    Build a connection manager for one Redis role.

    Args:
        config: Redis configuration, uses the session store defaults if None

    Returns:
        RedisConnectionManager instance
    """
    if config is None:
        config = RedisConfig.for_sessions()

    return RedisConnectionManager(
        host=config.host,
        port=config.port,
        db=config.db,
        password=config.password,
        max_connections=config.max_connections,
    )


def create_redis_repository(manager: RedisConnectionManager, key_prefix: str = "") -> RedisRepository:
    """
    Get Redis repository with optional key prefix.

    Args:
        manager: Connection manager supplying the client
        key_prefix: Prefix for all keys in this repository

    Returns:
        RedisRepository instance
    """
    return RedisRepository(manager.client, key_prefix)

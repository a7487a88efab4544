"""Infrastructure layer for Redis, local storage and the Celery broker."""

from .celery_job_queue import CeleryJobQueue
from .local_file_storage_repository import LocalFileStorageRepository
from .redis_file_repository import RedisFileRepository
from .redis_repository import RedisConnectionManager, RedisRepository
from .redis_session_repository import RedisSessionRepository
from .redis_user_repository import RedisUserRepository

__all__ = [
    'CeleryJobQueue',
    'LocalFileStorageRepository',
    'RedisFileRepository',
    'RedisConnectionManager',
    'RedisRepository',
    'RedisSessionRepository',
    'RedisUserRepository',
]

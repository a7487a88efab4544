"""
Application Factory

Creates and configures the Flask application with all dependencies.
Tests pass a pre-built DependencyContainer to run without Redis or a broker.
"""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .api import API_TITLE, create_api_blueprint
from .application import (
    AuthService,
    DependencyContainer,
    FileContentService,
    StatusService,
    UploadService,
    UserService,
)
from .application.status_service import HealthCheck
from .config.celery_config import make_celery
from .config.redis_config import RedisConfig, create_connection_manager, create_redis_repository
from .domain.files import FileManager, FileRecordRepository, IContentStorageRepository
from .domain.jobs import JobQueue
from .domain.sessions import DEFAULT_SESSION_TTL_SECONDS, SessionRepository, SessionTokenService
from .domain.users import UserManager, UserRepository
from .infrastructure import (
    CeleryJobQueue,
    LocalFileStorageRepository,
    RedisFileRepository,
    RedisSessionRepository,
    RedisUserRepository,
)
from .infrastructure.local_file_storage_repository import DEFAULT_STORAGE_DIR

logger = logging.getLogger(__name__)


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.flask_env = os.getenv("FLASK_ENV", "development")
        self.is_production = self.flask_env == "production"
        self.session_ttl_seconds = int(os.getenv("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS))
        self.folder_path = os.getenv("FOLDER_PATH", DEFAULT_STORAGE_DIR)
        self.api_title = os.getenv("API_TITLE", API_TITLE)


def create_app(
    config: Optional[AppConfig] = None,
    container: Optional[DependencyContainer] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, uses default if None
        container: Pre-built service container; built from the
            environment if None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig()

    app = Flask(__name__)
    # Error bodies are exactly {"error": message}
    app.config["ERROR_INCLUDE_MESSAGE"] = False
    app.config["RESTX_ERROR_404_HELP"] = False

    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "PUT", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization", "X-Token"],
                "max_age": 3600,
            }
        },
    )

    if container is None:
        container = _initialize_services(app, config)
    app.container = container

    _register_blueprints(app, config)

    return app


def build_container(
    user_repository: UserRepository,
    session_repository: SessionRepository,
    file_repository: FileRecordRepository,
    storage_repository: IContentStorageRepository,
    job_queue: Optional[JobQueue] = None,
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
    session_store_check: Optional[HealthCheck] = None,
    metadata_store_check: Optional[HealthCheck] = None,
) -> DependencyContainer:
    """
    Register domain and application services on top of the given adapters.

    Args:
        user_repository: User persistence
        session_repository: Session persistence
        file_repository: File record persistence
        storage_repository: Content persistence
        job_queue: Background job producer (None disables jobs)
        session_ttl_seconds: Session lifetime
        session_store_check: Liveness probe reported by /status
        metadata_store_check: Liveness probe reported by /status

    Returns:
        Populated DependencyContainer
    """
    container = DependencyContainer()

    container.register_singleton(IContentStorageRepository, storage_repository)
    if job_queue is not None:
        container.register_singleton(JobQueue, job_queue)

    # Domain services
    user_manager = UserManager(user_repository)
    session_service = SessionTokenService(session_repository, session_ttl_seconds)
    file_manager = FileManager(file_repository)

    container.register_singleton(UserManager, user_manager)
    container.register_singleton(SessionTokenService, session_service)
    container.register_singleton(FileManager, file_manager)

    # Application services
    container.register_singleton(UserService, UserService(user_manager, job_queue))
    container.register_singleton(AuthService, AuthService(user_manager, session_service))
    container.register_singleton(
        UploadService, UploadService(file_manager, storage_repository, job_queue)
    )
    container.register_singleton(
        FileContentService, FileContentService(file_manager, storage_repository)
    )
    container.register_singleton(
        StatusService,
        StatusService(
            user_manager,
            file_manager,
            session_store_check=session_store_check,
            metadata_store_check=metadata_store_check,
        ),
    )
    return container


def _initialize_services(app: Flask, config: AppConfig) -> DependencyContainer:
    """
    Build infrastructure adapters, domain services and application services.

    Redis clients connect lazily, so a store that is down at startup shows
    up in ``/status`` and as 500 responses rather than a failed boot.

    Args:
        app: Flask application
        config: Application configuration

    Returns:
        Populated DependencyContainer
    """
    # Infrastructure
    session_config = RedisConfig.for_sessions()
    metadata_config = RedisConfig.for_metadata()
    session_manager = create_connection_manager(session_config)
    metadata_manager = create_connection_manager(metadata_config)
    app.redis_managers = (session_manager, metadata_manager)

    celery = make_celery(app)
    app.celery = celery

    session_repository = RedisSessionRepository(
        create_redis_repository(session_manager, session_config.key_prefix)
    )
    metadata_repo = create_redis_repository(metadata_manager, metadata_config.key_prefix)
    user_repository = RedisUserRepository(metadata_repo)
    file_repository = RedisFileRepository(metadata_repo)
    storage_repository = LocalFileStorageRepository(config.folder_path)
    job_queue = CeleryJobQueue(celery)

    container = build_container(
        user_repository,
        session_repository,
        file_repository,
        storage_repository,
        job_queue=job_queue,
        session_ttl_seconds=config.session_ttl_seconds,
        session_store_check=session_manager.health_check,
        metadata_store_check=metadata_manager.health_check,
    )

    logger.info(
        f"Services initialized: sessions on db {session_config.db}, "
        f"metadata on db {metadata_config.db}, content in {storage_repository.base_path}"
    )
    return container


def _register_blueprints(app: Flask, config: AppConfig) -> None:
    app.register_blueprint(create_api_blueprint(config.api_title))
    logger.info("API registered at / with Swagger UI at /docs")

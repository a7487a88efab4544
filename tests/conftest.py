"""
Shared pytest fixtures and configuration for the files manager test suite.

This module provides:
- Hypothesis configuration for property-based testing
- In-memory repositories, storage and job queue
- Domain and application services wired on top of them
- A Flask test client backed by the in-memory container
"""

import pytest
from hypothesis import HealthCheck, settings

from files_manager.app_factory import AppConfig, build_container, create_app
from files_manager.application import (
    AuthService,
    FileContentService,
    UploadService,
    UserService,
)
from files_manager.domain.files import FileManager
from files_manager.domain.sessions import SessionTokenService
from files_manager.domain.users import UserManager
from tests.fixtures.domain_fixtures import basic_auth_header
from tests.fixtures.mock_repositories import (
    MockContentStorage,
    MockFileRepository,
    MockJobQueue,
    MockSessionRepository,
    MockUserRepository,
)

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


# =============================================================================
# Mock Repository Fixtures
# =============================================================================

@pytest.fixture
def user_repository() -> MockUserRepository:
    return MockUserRepository()


@pytest.fixture
def session_repository() -> MockSessionRepository:
    return MockSessionRepository()


@pytest.fixture
def file_repository() -> MockFileRepository:
    return MockFileRepository()


@pytest.fixture
def content_storage() -> MockContentStorage:
    return MockContentStorage()


@pytest.fixture
def job_queue() -> MockJobQueue:
    return MockJobQueue()


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def user_manager(user_repository) -> UserManager:
    return UserManager(user_repository)


@pytest.fixture
def session_service(session_repository) -> SessionTokenService:
    return SessionTokenService(session_repository)


@pytest.fixture
def file_manager(file_repository) -> FileManager:
    return FileManager(file_repository)


@pytest.fixture
def user_service(user_manager, job_queue) -> UserService:
    return UserService(user_manager, job_queue)


@pytest.fixture
def auth_service(user_manager, session_service) -> AuthService:
    return AuthService(user_manager, session_service)


@pytest.fixture
def upload_service(file_manager, content_storage, job_queue) -> UploadService:
    return UploadService(file_manager, content_storage, job_queue)


@pytest.fixture
def file_content_service(file_manager, content_storage) -> FileContentService:
    return FileContentService(file_manager, content_storage)


# =============================================================================
# Flask Fixtures
# =============================================================================

@pytest.fixture
def container(user_repository, session_repository, file_repository, content_storage, job_queue):
    """Service container over the in-memory adapters, stores reported healthy."""
    return build_container(
        user_repository,
        session_repository,
        file_repository,
        content_storage,
        job_queue=job_queue,
        session_store_check=lambda: True,
        metadata_store_check=lambda: True,
    )


@pytest.fixture
def app(container):
    app = create_app(AppConfig(), container=container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register_and_connect(client):
    """
    Return a helper registering a user and returning ``(user_id, token)``.
    """
    def _register_and_connect(email: str = "bob@dylan.com", password: str = "toto1234!"):
        response = client.post("/users", json={"email": email, "password": password})
        assert response.status_code == 201
        user_id = response.get_json()["id"]

        response = client.get("/connect", headers={"Authorization": basic_auth_header(email, password)})
        assert response.status_code == 200
        return user_id, response.get_json()["token"]

    return _register_and_connect


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)

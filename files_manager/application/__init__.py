"""Application layer: request parsing and workflow orchestration."""

from .auth_service import AuthService
from .dependency_container import DependencyContainer, DependencyNotFoundError
from .file_content_service import FileContent, FileContentService
from .requests import (
    BasicCredentials,
    FileContentRequest,
    ListFilesRequest,
    RegisterUserRequest,
    UploadFileRequest,
)
from .status_service import StatusService
from .upload_service import UploadService
from .user_service import UserService

__all__ = [
    'AuthService',
    'DependencyContainer',
    'DependencyNotFoundError',
    'FileContent',
    'FileContentService',
    'BasicCredentials',
    'FileContentRequest',
    'ListFilesRequest',
    'RegisterUserRequest',
    'UploadFileRequest',
    'StatusService',
    'UploadService',
    'UserService',
]

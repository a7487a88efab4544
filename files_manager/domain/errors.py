"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Every domain exception carries a category and the HTTP status code the API
layer answers with, so the boundary never has to guess.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    MISSING_EMAIL = "missing_email"
    MISSING_PASSWORD = "missing_password"
    EMAIL_TAKEN = "email_taken"
    MISSING_NAME = "missing_name"
    INVALID_KIND = "invalid_kind"
    MISSING_DATA = "missing_data"
    INVALID_DATA = "invalid_data"
    PARENT_NOT_FOUND = "parent_not_found"
    PARENT_NOT_A_FOLDER = "parent_not_a_folder"
    FOLDER_HAS_NO_CONTENT = "folder_has_no_content"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    SYSTEM_ERROR = "system_error"


# Client-facing messages. These strings are part of the HTTP contract.
ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.MISSING_EMAIL: "Missing email",
    ErrorCategory.MISSING_PASSWORD: "Missing password",
    ErrorCategory.EMAIL_TAKEN: "Already exist",
    ErrorCategory.MISSING_NAME: "Missing name",
    ErrorCategory.INVALID_KIND: "Missing type",
    ErrorCategory.MISSING_DATA: "Missing data",
    ErrorCategory.INVALID_DATA: "Invalid data",
    ErrorCategory.PARENT_NOT_FOUND: "Parent not found",
    ErrorCategory.PARENT_NOT_A_FOLDER: "Parent is not a folder",
    ErrorCategory.FOLDER_HAS_NO_CONTENT: "A folder doesn't have content",
    ErrorCategory.UNAUTHORIZED: "Unauthorized",
    ErrorCategory.FORBIDDEN: "Forbidden",
    ErrorCategory.NOT_FOUND: "Not found",
    ErrorCategory.SYSTEM_ERROR: "Internal Server Error",
}


# ============================================================================
# Domain Exceptions
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Subclasses set ``category`` and ``http_status_code``. The constructor
    message is technical detail for logs; the client only ever sees the
    category message.
    """

    category = ErrorCategory.SYSTEM_ERROR
    http_status_code = 500

    def __init__(self, message: Optional[str] = None, original_error: Exception = None):
        """
        Initialize domain error.

        Args:
            message: Technical error message (defaults to the category message)
            original_error: Optional original exception that caused this error
        """
        super().__init__(message or ERROR_MESSAGES[self.category])
        self.original_error = original_error

    @property
    def public_message(self) -> str:
        """Message safe to return to clients."""
        return ERROR_MESSAGES.get(self.category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR])

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for API response.

        Returns:
            Dictionary with a single ``error`` entry
        """
        return {"error": self.public_message}


class ValidationError(DomainError):
    """Malformed or missing input. Never retried."""

    category = ErrorCategory.MISSING_DATA
    http_status_code = 400


class MissingEmailError(ValidationError):
    category = ErrorCategory.MISSING_EMAIL


class MissingPasswordError(ValidationError):
    category = ErrorCategory.MISSING_PASSWORD


class EmailTakenError(ValidationError):
    """Raised by the user store when the email index already holds the address."""

    category = ErrorCategory.EMAIL_TAKEN


class MissingNameError(ValidationError):
    category = ErrorCategory.MISSING_NAME


class InvalidKindError(ValidationError):
    """Type missing or not one of folder, file, image."""

    category = ErrorCategory.INVALID_KIND


class MissingDataError(ValidationError):
    category = ErrorCategory.MISSING_DATA


class InvalidDataError(ValidationError):
    """Upload payload is not valid base64."""

    category = ErrorCategory.INVALID_DATA


class ParentNotFoundError(ValidationError):
    category = ErrorCategory.PARENT_NOT_FOUND


class ParentNotAFolderError(ValidationError):
    category = ErrorCategory.PARENT_NOT_A_FOLDER


class FolderHasNoContentError(ValidationError):
    category = ErrorCategory.FOLDER_HAS_NO_CONTENT


class AuthenticationError(DomainError):
    """Bad credentials or a missing, expired or unknown token."""

    category = ErrorCategory.UNAUTHORIZED
    http_status_code = 401


class InvalidCredentialsError(AuthenticationError):
    pass


class InvalidTokenError(AuthenticationError):
    pass


class AuthorizationError(DomainError):
    """Valid identity without ownership of the target record."""

    category = ErrorCategory.FORBIDDEN
    http_status_code = 403


class ForbiddenError(AuthorizationError):
    pass


class NotFoundError(DomainError):
    """Referenced entity is absent (or not visible to the requester)."""

    category = ErrorCategory.NOT_FOUND
    http_status_code = 404


class RecordNotFoundError(NotFoundError):
    pass


class DependencyError(DomainError):
    """
    A backing service (Redis, filesystem, broker) failed.

    Surfaced as HTTP 500 and logged with context; never retried within the
    request.
    """

    category = ErrorCategory.SYSTEM_ERROR
    http_status_code = 500


class StoreUnavailableError(DependencyError):
    """Redis could not be reached or rejected the command."""
    pass


class ContentWriteError(DependencyError):
    """Content could not be written to durable storage."""
    pass


class JobQueueError(DependencyError):
    """The job broker did not accept a message."""
    pass


def create_error_response(error: DomainError) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        error: Domain error to render

    Returns:
        Tuple of (error_dict, status_code)
    """
    return error.to_dict(), error.http_status_code

"""
Files Manager REST API

Routes are served at the application root with Swagger UI at ``/docs``.
A fresh Blueprint and Api are built per application so the factory can be
called more than once in a process.
"""

import logging
import os

from flask import Blueprint
from flask_restx import Api
from werkzeug.exceptions import HTTPException

from ..domain.errors import (
    ERROR_MESSAGES,
    DomainError,
    ErrorCategory,
    create_error_response,
)
from .models import ALL_MODELS
from .namespaces import auth_ns, files_ns, status_ns, users_ns

logger = logging.getLogger(__name__)

API_TITLE = os.getenv("API_TITLE", "Files Manager API")


def handle_domain_error(error: DomainError):
    """Answer a domain error with its public message and status code."""
    if error.http_status_code >= 500:
        logger.error(f"{type(error).__name__}: {error}", exc_info=error)
    return create_error_response(error)


def handle_unexpected_error(error: Exception):
    """Answer anything else with a generic 500, keeping HTTP errors as they are."""
    if isinstance(error, HTTPException):
        return {"error": error.description}, error.code
    logger.exception(f"Unexpected error: {error}")
    return {"error": ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]}, 500


def create_api_blueprint(title: str = API_TITLE) -> Blueprint:
    """
    Build the API blueprint with all namespaces and error handlers.

    Args:
        title: Title shown in the Swagger UI

    Returns:
        Blueprint ready for ``app.register_blueprint``
    """
    blueprint = Blueprint("api", __name__)

    api = Api(
        blueprint,
        version="1.0",
        title=title,
        description="Upload, organize, share and download files",
        doc="/docs",
    )

    for model in ALL_MODELS:
        api.models[model.name] = model

    api.add_namespace(status_ns)
    api.add_namespace(users_ns)
    api.add_namespace(auth_ns)
    api.add_namespace(files_ns)

    api.errorhandler(DomainError)(handle_domain_error)
    api.errorhandler(Exception)(handle_unexpected_error)

    return blueprint

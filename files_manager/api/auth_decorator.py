"""
Token Authentication Decorators

Resolve the ``X-Token`` header to a user before a resource method runs.
The resolved user is available as ``g.current_user``.
"""

from functools import wraps

from flask import current_app, g, request

from ..application.auth_service import AuthService

TOKEN_HEADER = "X-Token"


def _get_auth_service() -> AuthService:
    return current_app.container.resolve(AuthService)


def token_required(f):
    """
    Decorator rejecting requests without a valid session token.

    Unknown, expired or revoked tokens raise InvalidTokenError, which the
    API error handler answers with 401 ``{"error": "Unauthorized"}``.

    Usage:
        @token_required
        def get(self):
            user = g.current_user
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.headers.get(TOKEN_HEADER)
        g.current_user = _get_auth_service().current_user(token)
        return f(*args, **kwargs)

    return decorated_function


def token_optional(f):
    """Decorator resolving the token when present; anonymous requests get None."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.headers.get(TOKEN_HEADER)
        g.current_user = _get_auth_service().find_user(token) if token else None
        return f(*args, **kwargs)

    return decorated_function

"""
Request Structures

One immutable structure per endpoint, built from the raw HTTP input at the
API boundary. Parsing here only normalizes shapes and types; business
validation stays in the services that own each invariant.
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..domain.files.value_objects import (
    ROOT_PARENT_ID,
    THUMBNAIL_SIZES,
    normalize_parent_id,
    parse_page,
)


def _as_text(value: Any) -> Optional[str]:
    """Coerce a JSON scalar into text, keeping missing values as None."""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


@dataclass(frozen=True)
class RegisterUserRequest:
    """Body of ``POST /users``."""
    email: Optional[str]
    password: Optional[str]

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> 'RegisterUserRequest':
        payload = payload or {}
        return cls(
            email=_as_text(payload.get("email")),
            password=_as_text(payload.get("password")),
        )


@dataclass(frozen=True)
class BasicCredentials:
    """Decoded ``Authorization: Basic`` header of ``GET /connect``."""
    email: str
    password: str

    @classmethod
    def from_authorization_header(cls, header: Optional[str]) -> Optional['BasicCredentials']:
        """
        Decode a basic-auth header into ``email:password``.

        Args:
            header: Raw Authorization header value

        Returns:
            BasicCredentials, or None if the header is missing or malformed
        """
        if not header:
            return None

        scheme, _, encoded = header.strip().partition(" ")
        if scheme.lower() != "basic" or not encoded:
            return None

        try:
            decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None

        email, separator, password = decoded.partition(":")
        if not separator:
            return None
        return cls(email=email, password=password)


@dataclass(frozen=True)
class UploadFileRequest:
    """Body of ``POST /files``."""
    name: Optional[str]
    type: Optional[str]
    parent_id: str = ROOT_PARENT_ID
    is_public: bool = False
    data: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> 'UploadFileRequest':
        payload = payload or {}
        return cls(
            name=_as_text(payload.get("name")),
            type=_as_text(payload.get("type")),
            parent_id=normalize_parent_id(payload.get("parentId")),
            is_public=_as_bool(payload.get("isPublic", False)),
            data=_as_text(payload.get("data")),
        )


@dataclass(frozen=True)
class ListFilesRequest:
    """Query of ``GET /files``."""
    parent_id: str = ROOT_PARENT_ID
    page: int = 0

    @classmethod
    def from_query(cls, args: Mapping[str, Any]) -> 'ListFilesRequest':
        return cls(
            parent_id=normalize_parent_id(args.get("parentId")),
            page=parse_page(args.get("page")),
        )


@dataclass(frozen=True)
class FileContentRequest:
    """Path and query of ``GET /files/<id>/data``."""
    file_id: str
    size: Optional[int] = None

    @classmethod
    def from_query(cls, file_id: str, args: Mapping[str, Any]) -> 'FileContentRequest':
        size = None
        raw_size = args.get("size")
        if raw_size is not None and str(raw_size).isdigit() and int(raw_size) in THUMBNAIL_SIZES:
            size = int(raw_size)
        return cls(file_id=file_id, size=size)

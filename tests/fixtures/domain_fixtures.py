"""
Domain Entity Factories

Factory functions for creating domain entities with sensible defaults.
"""

import base64
from typing import Optional

from files_manager.domain.files.entities import FileRecord
from files_manager.domain.files.value_objects import ROOT_PARENT_ID, FileKind
from files_manager.domain.users.entities import User


def create_user(email: str = "bob@dylan.com", password: str = "toto1234!") -> User:
    """Create a User with a hashed password."""
    return User.create(email, password)


def create_file_record(
    user_id: str = "user-1",
    name: str = "myText.txt",
    kind: FileKind = FileKind.FILE,
    parent_id: str = ROOT_PARENT_ID,
    is_public: bool = False,
    content_ref: Optional[str] = None,
) -> FileRecord:
    """
    Create a FileRecord with sensible defaults.

    Non-folder records get a placeholder content reference unless one is
    given.
    """
    if content_ref is None and kind is not FileKind.FOLDER:
        content_ref = f"/mock/{name}"
    return FileRecord.create(
        user_id=user_id,
        name=name,
        kind=kind,
        parent_id=parent_id,
        is_public=is_public,
        content_ref=content_ref,
    )


def create_folder(user_id: str = "user-1", name: str = "images", parent_id: str = ROOT_PARENT_ID) -> FileRecord:
    return create_file_record(user_id=user_id, name=name, kind=FileKind.FOLDER, parent_id=parent_id)


def encode(content: bytes) -> str:
    """Base64-encode content the way clients send it."""
    return base64.b64encode(content).decode("ascii")


def basic_auth_header(email: str, password: str) -> str:
    """Build a basic-auth header value."""
    return "Basic " + encode(f"{email}:{password}".encode("utf-8"))

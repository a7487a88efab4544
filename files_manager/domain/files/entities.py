"""
File Entities

Domain entity for file and folder metadata records.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..ids import generate_record_id
from .value_objects import ROOT_PARENT_ID, FileKind, public_parent_id


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata of a folder, regular file or image.

    ``parent_id`` holds ROOT_PARENT_ID or the ID of a folder owned by the
    same user. ``content_ref`` is set exactly when the kind carries content.
    """
    file_id: str
    user_id: str
    name: str
    kind: FileKind
    is_public: bool = False
    parent_id: str = ROOT_PARENT_ID
    content_ref: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        user_id: str,
        name: str,
        kind: FileKind,
        parent_id: str = ROOT_PARENT_ID,
        is_public: bool = False,
        content_ref: Optional[str] = None,
    ) -> 'FileRecord':
        """
        Factory method to create a new record with a generated ID.

        Args:
            user_id: Owner
            name: Display name
            kind: Record kind
            parent_id: Stored parent pointer (default: root)
            is_public: Initial visibility
            content_ref: Location in content storage (non-folders only)

        Returns:
            New FileRecord instance
        """
        return cls(
            file_id=generate_record_id(),
            user_id=user_id,
            name=name,
            kind=kind,
            is_public=is_public,
            parent_id=parent_id,
            content_ref=content_ref,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_folder(self) -> bool:
        return self.kind is FileKind.FOLDER

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.user_id == user_id

    def with_visibility(self, is_public: bool) -> 'FileRecord':
        """Copy of this record with a new visibility flag."""
        return replace(self, is_public=is_public)

    def to_public_dict(self) -> Dict[str, Any]:
        """
        API representation.

        Returns:
            ``{id, userId, name, type, isPublic, parentId}`` with parentId 0
            for root-level records
        """
        return {
            "id": self.file_id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.kind.value,
            "isPublic": self.is_public,
            "parentId": public_parent_id(self.parent_id),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for persistence."""
        return {
            "id": self.file_id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.kind.value,
            "isPublic": self.is_public,
            "parentId": self.parent_id,
            "localPath": self.content_ref,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileRecord':
        """Create FileRecord from its persisted dictionary."""
        return cls(
            file_id=data["id"],
            user_id=data["userId"],
            name=data["name"],
            kind=FileKind(data["type"]),
            is_public=bool(data.get("isPublic", False)),
            parent_id=data.get("parentId", ROOT_PARENT_ID),
            content_ref=data.get("localPath"),
            created_at=datetime.fromisoformat(data["createdAt"]),
        )

"""
File Metadata Services

Domain service owning the file/folder hierarchy invariants: parent
resolution, ownership checks, visibility changes and paginated listing.
"""

import logging
from typing import Any, List, Optional

from ..errors import (
    ForbiddenError,
    InvalidKindError,
    MissingDataError,
    MissingNameError,
    ParentNotAFolderError,
    ParentNotFoundError,
    RecordNotFoundError,
)
from .entities import FileRecord
from .repositories import FileRecordRepository
from .value_objects import PAGE_SIZE, ROOT_PARENT_ID, FileKind, normalize_parent_id

logger = logging.getLogger(__name__)


class FileManager:
    """
    Domain service for file metadata.

    Validation and not-found conditions are raised here, at the boundary of
    the component that owns the invariants.
    """

    def __init__(self, file_repository: FileRecordRepository, page_size: int = PAGE_SIZE):
        """
        Initialize FileManager with repository.

        Args:
            file_repository: Repository for record persistence
            page_size: Records per listing page
        """
        self.file_repo = file_repository
        self.page_size = page_size

    def resolve_parent(self, user_id: str, parent_id: Any) -> str:
        """
        Validate a parent reference for a new child of ``user_id``.

        A parent owned by another user is reported as not found so that
        foreign IDs are not disclosed.

        Args:
            user_id: Owner of the child being created
            parent_id: Public or stored parent reference

        Returns:
            Stored parent pointer

        Raises:
            ParentNotFoundError: If the parent does not exist for this user
            ParentNotAFolderError: If the parent is not a folder
        """
        stored = normalize_parent_id(parent_id)
        if stored == ROOT_PARENT_ID:
            return stored

        parent = self.file_repo.get(stored)
        if parent is None or not parent.is_owned_by(user_id):
            raise ParentNotFoundError(f"Parent {stored} not found for user {user_id}")
        if not parent.is_folder:
            raise ParentNotAFolderError(f"Parent {stored} is a {parent.kind.value}")
        return stored

    def create(self, record: FileRecord) -> FileRecord:
        """
        Validate and persist a new record.

        Args:
            record: Record to create

        Returns:
            The persisted record

        Raises:
            MissingNameError: If the name is empty
            InvalidKindError: If the kind is not a FileKind
            MissingDataError: If content presence does not match the kind
            ParentNotFoundError: If the parent does not exist for the owner
            ParentNotAFolderError: If the parent is not a folder
        """
        if not record.name:
            raise MissingNameError()
        if not isinstance(record.kind, FileKind):
            raise InvalidKindError(f"Unsupported file type: {record.kind!r}")
        if record.kind.has_content != (record.content_ref is not None):
            raise MissingDataError(
                f"Content reference mismatch for a {record.kind.value} record"
            )

        self.resolve_parent(record.user_id, record.parent_id)
        self.file_repo.insert(record)

        logger.info(
            f"Created {record.kind.value} {record.file_id} for user {record.user_id} "
            f"under parent {record.parent_id}"
        )
        return record

    def get(self, file_id: str, requester_id: str) -> FileRecord:
        """
        Retrieve a record owned by the requester.

        Args:
            file_id: Record identifier
            requester_id: Authenticated user

        Returns:
            FileRecord

        Raises:
            RecordNotFoundError: If absent or owned by someone else
        """
        record = self.file_repo.get(file_id) if file_id else None
        if record is None or not record.is_owned_by(requester_id):
            raise RecordNotFoundError(f"File {file_id} not found for user {requester_id}")
        return record

    def get_readable(self, file_id: str, requester_id: Optional[str] = None) -> FileRecord:
        """
        Retrieve a record for content download.

        Public records are readable by anyone; private ones only by their
        owner.

        Args:
            file_id: Record identifier
            requester_id: Authenticated user, or None for anonymous access

        Returns:
            FileRecord

        Raises:
            RecordNotFoundError: If absent or not readable by the requester
        """
        record = self.file_repo.get(file_id) if file_id else None
        if record is None:
            raise RecordNotFoundError(f"File {file_id} not found")
        if not record.is_public and not record.is_owned_by(requester_id):
            raise RecordNotFoundError(f"File {file_id} is private")
        return record

    def list(self, owner_id: str, parent_id: Any = ROOT_PARENT_ID, page: int = 0) -> List[FileRecord]:
        """
        List one page of an owner's records under a parent.

        Args:
            owner_id: Authenticated user
            parent_id: Public or stored parent reference
            page: Zero-indexed page

        Returns:
            At most ``page_size`` records, most recent first
        """
        page = max(page, 0)
        return self.file_repo.list_children(
            owner_id,
            normalize_parent_id(parent_id),
            offset=page * self.page_size,
            limit=self.page_size,
        )

    def set_visibility(self, file_id: str, owner_id: str, is_public: bool) -> FileRecord:
        """
        Publish or unpublish a record.

        Setting the current value is a no-op returning the record unchanged.

        Args:
            file_id: Record identifier
            owner_id: Authenticated user
            is_public: New visibility

        Returns:
            The record with the requested visibility

        Raises:
            RecordNotFoundError: If the record does not exist
            ForbiddenError: If the record is owned by another user
        """
        record = self.file_repo.get(file_id) if file_id else None
        if record is None:
            raise RecordNotFoundError(f"File {file_id} not found")
        if not record.is_owned_by(owner_id):
            raise ForbiddenError(f"User {owner_id} does not own file {file_id}")
        if record.is_public == is_public:
            return record

        updated = self.file_repo.update_visibility(file_id, is_public)
        if updated is None:
            raise RecordNotFoundError(f"File {file_id} disappeared during update")

        logger.info(f"File {file_id} is now {'public' if is_public else 'private'}")
        return updated

    def count_files(self) -> int:
        return self.file_repo.count()

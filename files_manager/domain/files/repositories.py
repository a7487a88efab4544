"""
File Record Repositories

Repository interface for file metadata persistence.
Concrete implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import FileRecord


class FileRecordRepository(ABC):
    """Abstract repository interface for file and folder records."""

    @abstractmethod
    def insert(self, record: FileRecord) -> None:
        """
        Persist a new record and index it under its (owner, parent) pair.

        Args:
            record: Record to insert

        Raises:
            StoreUnavailableError: If the backing store is unreachable
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, file_id: str) -> Optional[FileRecord]:
        """
        Retrieve a record by ID regardless of owner.

        Args:
            file_id: Record identifier

        Returns:
            FileRecord if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def list_children(
        self, user_id: str, parent_id: str, offset: int, limit: int
    ) -> List[FileRecord]:
        """
        List an owner's records under one parent, most recent first.

        Args:
            user_id: Owner
            parent_id: Stored parent pointer
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Records in reverse creation order (empty for unknown parents)
        """
        pass  # pragma: no cover

    @abstractmethod
    def update_visibility(self, file_id: str, is_public: bool) -> Optional[FileRecord]:
        """
        Atomically set the visibility flag of a record.

        Args:
            file_id: Record identifier
            is_public: New visibility

        Returns:
            The updated record, or None if it does not exist
        """
        pass  # pragma: no cover

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass  # pragma: no cover

"""
Content Storage Repository Interface

Abstract interface for persisting uploaded file content.
Content lives outside the metadata store; records only hold the opaque
reference returned by ``save_new``.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class IContentStorageRepository(ABC):
    """
    Interface for content persistence.

    Contract Guarantees:
    - save_new() never overwrites: every call yields a fresh reference
    - get() returns None for unknown references (no exceptions)
    - delete() is idempotent
    """

    @abstractmethod
    def save_new(self, content: bytes) -> str:
        """
        Write content under a newly generated, collision-free location.

        Args:
            content: Decoded file bytes

        Returns:
            Opaque content reference

        Raises:
            ContentWriteError: If the content could not be written completely
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, content_ref: str) -> Optional[BinaryIO]:
        """
        Open stored content.

        Args:
            content_ref: Reference returned by save_new (or a derived
                thumbnail reference)

        Returns:
            Binary stream if found, None otherwise
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, content_ref: str) -> bool:
        """
        Remove stored content.

        Args:
            content_ref: Content reference

        Returns:
            True if removed or already absent, False on failure
        """
        pass  # pragma: no cover

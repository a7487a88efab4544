"""
Local File Storage Repository Implementation

Concrete implementation of IContentStorageRepository on the local
filesystem. Each upload gets a fresh UUID file name opened in exclusive
create mode, so two uploads can never write to the same file.
"""

import logging
import tempfile
import uuid
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional

from ..domain.errors import ContentWriteError
from ..domain.files.storage_repository import IContentStorageRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_DIR = str(Path(tempfile.gettempdir()) / "files_manager")


class LocalFileStorageRepository(IContentStorageRepository):
    """
    Local filesystem implementation of IContentStorageRepository.

    Content references are absolute paths below ``base_path``; derived
    thumbnails are written next to the original as ``<path>_<size>`` by the
    external image worker.

    Attributes:
        base_path: Base directory for stored content
    """

    def __init__(self, base_path: str = DEFAULT_STORAGE_DIR):
        """
        Initialize the local file storage repository.

        Args:
            base_path: Base directory for content (created if missing)
        """
        self.base_path = Path(base_path).resolve()
        self._ensure_base_directory()

    def _ensure_base_directory(self) -> None:
        """
        Ensure the base storage directory exists.

        Raises:
            ContentWriteError: If the directory cannot be created
        """
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ContentWriteError(
                f"Failed to create storage directory: {self.base_path}", original_error=e
            ) from e

    def _resolve(self, content_ref: str) -> Optional[Path]:
        """Map a reference to a path inside base_path, or None if it escapes."""
        if not content_ref or not content_ref.strip():
            return None
        path = Path(content_ref)
        if not path.is_absolute():
            path = self.base_path / path
        path = path.resolve()
        if path != self.base_path and self.base_path not in path.parents:
            return None
        return path

    def save_new(self, content: bytes) -> str:
        """
        Write content to a new UUID-named file.

        A partially written file is removed before the error is raised.
        """
        self._ensure_base_directory()
        full_path = self.base_path / str(uuid.uuid4())

        try:
            with open(full_path, "xb") as f:
                f.write(content)
        except FileExistsError as e:
            raise ContentWriteError(f"Content location already taken: {full_path}", original_error=e) from e
        except OSError as e:
            logger.error(f"Failed to write content to {full_path}: {e}")
            full_path.unlink(missing_ok=True)
            raise ContentWriteError(f"Failed to save content: {e}", original_error=e) from e

        logger.debug(f"Stored {len(content)} bytes at {full_path}")
        return str(full_path)

    def get(self, content_ref: str) -> Optional[BinaryIO]:
        """Read stored content into memory; None when absent."""
        path = self._resolve(content_ref)
        if path is None or not path.is_file():
            return None
        try:
            with open(path, "rb") as f:
                return BytesIO(f.read())
        except OSError as e:
            logger.warning(f"Failed to read content {path}: {e}")
            return None

    def delete(self, content_ref: str) -> bool:
        """Remove content. Idempotent."""
        path = self._resolve(content_ref)
        if path is None:
            return True
        try:
            path.unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.warning(f"Failed to delete content {path}: {e}")
            return False

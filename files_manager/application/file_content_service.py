"""
File Content Application Service

Serves stored bytes of a file or image, or one of its thumbnails, to its
owner or to anyone when the record is public.
"""

import logging
import mimetypes
from dataclasses import dataclass
from typing import BinaryIO, Optional

from ..domain.errors import FolderHasNoContentError, RecordNotFoundError
from ..domain.files import FileManager, FileRecord, IContentStorageRepository
from .requests import FileContentRequest

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileContent:
    """Stream and headers of a content download."""
    record: FileRecord
    stream: BinaryIO
    mimetype: str


class FileContentService:
    """Application service for content downloads."""

    def __init__(self, file_manager: FileManager, storage_repository: IContentStorageRepository):
        self.file_manager = file_manager
        self.storage = storage_repository

    def read(self, request: FileContentRequest, requester_id: Optional[str] = None) -> FileContent:
        """
        Open the content of a readable record.

        Args:
            request: Parsed download request
            requester_id: Authenticated user, or None for anonymous access

        Returns:
            FileContent with a mimetype guessed from the record name

        Raises:
            RecordNotFoundError: If the record is not readable by the
                requester, or its content (or requested thumbnail) is missing
            FolderHasNoContentError: If the record is a folder
        """
        record = self.file_manager.get_readable(request.file_id, requester_id)
        if record.is_folder:
            raise FolderHasNoContentError(f"Folder {record.file_id} has no content")

        content_ref = record.content_ref
        if request.size is not None:
            content_ref = f"{content_ref}_{request.size}"

        stream = self.storage.get(content_ref) if content_ref else None
        if stream is None:
            logger.warning(f"Content of {record.file_id} missing at {content_ref}")
            raise RecordNotFoundError(f"No content stored for {record.file_id}")

        mimetype, _ = mimetypes.guess_type(record.name)
        return FileContent(record=record, stream=stream, mimetype=mimetype or DEFAULT_MIMETYPE)

"""
Upload Application Service

Orchestrates the upload workflow: validate, resolve the parent, persist
content, persist metadata, schedule thumbnail generation.
"""

import base64
import binascii
import logging
from typing import Optional

from ..domain.errors import (
    DependencyError,
    InvalidDataError,
    JobQueueError,
    MissingDataError,
    MissingNameError,
)
from ..domain.files import FileKind, FileManager, FileRecord, IContentStorageRepository
from ..domain.jobs import JobQueue, ThumbnailJob
from .requests import UploadFileRequest

logger = logging.getLogger(__name__)


class UploadService:
    """
    Application service for file and folder uploads.

    Content is written before metadata, so a failed content write leaves no
    record behind; a failed metadata write removes the content it orphaned.
    Thumbnail scheduling is best-effort and never fails an upload.
    """

    def __init__(
        self,
        file_manager: FileManager,
        storage_repository: IContentStorageRepository,
        job_queue: Optional[JobQueue] = None,
    ):
        """
        Initialize UploadService.

        Args:
            file_manager: FileManager domain service
            storage_repository: Content persistence
            job_queue: Producer for thumbnail jobs (None disables scheduling)
        """
        self.file_manager = file_manager
        self.storage = storage_repository
        self.job_queue = job_queue

    def upload(self, user_id: str, request: UploadFileRequest) -> FileRecord:
        """
        Run the upload workflow for one request.

        Args:
            user_id: Authenticated uploader
            request: Parsed upload request

        Returns:
            The created FileRecord

        Raises:
            ValidationError: On invalid input or parent (nothing persisted)
            ContentWriteError: If content could not be stored (nothing persisted)
            StoreUnavailableError: If metadata could not be stored
        """
        kind = self._validate(request)
        parent_id = self.file_manager.resolve_parent(user_id, request.parent_id)

        content_ref = None
        if kind.has_content:
            payload = self._decode(request.data)
            content_ref = self.storage.save_new(payload)

        record = FileRecord.create(
            user_id=user_id,
            name=request.name,
            kind=kind,
            parent_id=parent_id,
            is_public=request.is_public,
            content_ref=content_ref,
        )

        try:
            self.file_manager.create(record)
        except Exception:
            if content_ref is not None:
                logger.warning(f"Metadata write failed, removing orphaned content {content_ref}")
                self.storage.delete(content_ref)
            raise

        if kind.needs_thumbnail:
            self._schedule_thumbnail(record)

        return record

    def _validate(self, request: UploadFileRequest) -> FileKind:
        """
        Check required fields in the order clients expect errors.

        Raises:
            MissingNameError, InvalidKindError, MissingDataError
        """
        if not request.name:
            raise MissingNameError()
        kind = FileKind.parse(request.type)
        if kind.has_content and not request.data:
            raise MissingDataError()
        return kind

    @staticmethod
    def _decode(data: Optional[str]) -> bytes:
        try:
            return base64.b64decode("".join((data or "").split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidDataError(f"Payload is not base64: {e}", original_error=e) from e

    def _schedule_thumbnail(self, record: FileRecord) -> None:
        if self.job_queue is None:
            logger.warning(f"No job queue configured, skipping thumbnail for {record.file_id}")
            return

        job = ThumbnailJob(user_id=record.user_id, file_id=record.file_id)
        try:
            self.job_queue.enqueue(job)
        except (JobQueueError, DependencyError) as e:
            logger.error(f"Failed to enqueue {job.describe()}: {e}")

"""
File Domain

File and folder records, their hierarchy and content storage contract.
"""

from .entities import FileRecord
from .repositories import FileRecordRepository
from .services import FileManager
from .storage_repository import IContentStorageRepository
from .value_objects import (
    PAGE_SIZE,
    PUBLIC_ROOT_PARENT_ID,
    ROOT_PARENT_ID,
    THUMBNAIL_SIZES,
    FileKind,
    normalize_parent_id,
    parse_page,
    public_parent_id,
)

__all__ = [
    "FileRecord",
    "FileRecordRepository",
    "FileManager",
    "IContentStorageRepository",
    "FileKind",
    "PAGE_SIZE",
    "PUBLIC_ROOT_PARENT_ID",
    "ROOT_PARENT_ID",
    "THUMBNAIL_SIZES",
    "normalize_parent_id",
    "parse_page",
    "public_parent_id",
]

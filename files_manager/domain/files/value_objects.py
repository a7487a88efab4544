"""
File Value Objects

File kinds and the root-folder marker.
"""

import re
from enum import Enum
from typing import Any, Dict, Union

from ..errors import InvalidKindError

# Stored parent pointer for root-level records.
ROOT_PARENT_ID = "0"

# Public (JSON) parent value for root-level records.
PUBLIC_ROOT_PARENT_ID = 0

PAGE_SIZE = 20

# Thumbnail widths the external image worker produces.
THUMBNAIL_SIZES = (500, 250, 100)

_LEADING_DIGITS = re.compile(r"^\s*(\d+)")


class FileKind(Enum):
    """Closed set of record kinds."""
    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: Any) -> 'FileKind':
        """
        Parse a wire value into a FileKind.

        Args:
            value: Raw ``type`` field from a request

        Returns:
            Matching FileKind

        Raises:
            InvalidKindError: If value is missing or not a known kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidKindError(f"Unsupported file type: {value!r}")

    @property
    def has_content(self) -> bool:
        """Whether records of this kind carry a content reference."""
        return _HAS_CONTENT[self]

    @property
    def needs_thumbnail(self) -> bool:
        """Whether uploads of this kind schedule thumbnail generation."""
        return _NEEDS_THUMBNAIL[self]


_HAS_CONTENT: Dict[FileKind, bool] = {
    FileKind.FOLDER: False,
    FileKind.FILE: True,
    FileKind.IMAGE: True,
}

_NEEDS_THUMBNAIL: Dict[FileKind, bool] = {
    FileKind.FOLDER: False,
    FileKind.FILE: False,
    FileKind.IMAGE: True,
}


def normalize_parent_id(value: Any) -> str:
    """
    Translate a public parentId into its stored form.

    ``None``, ``""``, ``0`` and ``"0"`` all denote the root folder.

    Args:
        value: parentId as received from a client

    Returns:
        ROOT_PARENT_ID or the parent record ID as a string
    """
    if value is None or value == "" or value == PUBLIC_ROOT_PARENT_ID or value == ROOT_PARENT_ID:
        return ROOT_PARENT_ID
    return str(value)


def public_parent_id(stored: str) -> Union[int, str]:
    """
    Translate a stored parent pointer into its public form.

    Args:
        stored: Parent pointer as persisted

    Returns:
        0 for root-level records, the parent ID string otherwise
    """
    if stored == ROOT_PARENT_ID:
        return PUBLIC_ROOT_PARENT_ID
    return stored


def parse_page(value: Any) -> int:
    """
    Parse a zero-indexed page number from a query string value.

    Leading digits are honoured ("2abc" is page 2); anything else is page 0.

    Args:
        value: Raw ``page`` query value

    Returns:
        Non-negative page index
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    match = _LEADING_DIGITS.match(str(value or ""))
    return int(match.group(1)) if match else 0

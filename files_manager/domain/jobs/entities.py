"""
Job Entities

Messages produced for background workers. The workers themselves live
outside this service; these classes only define what is sent.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class QueueJob(ABC):
    """
    Base class for background job messages.

    Attributes:
        task_name: Name the consuming worker registers its task under
    """
    task_name: ClassVar[str]

    @abstractmethod
    def to_payload(self) -> Dict[str, Any]:
        """Keyword arguments delivered to the worker task."""
        pass  # pragma: no cover

    def describe(self) -> str:
        """Human-readable job label for logs."""
        return self.task_name


@dataclass(frozen=True)
class ThumbnailJob(QueueJob):
    """
    Request to render thumbnails of an uploaded image.

    Attributes:
        user_id: Owner of the image
        file_id: Image record ID
    """
    task_name: ClassVar[str] = "thumbnails.generate"

    user_id: str
    file_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "fileId": self.file_id}

    def describe(self) -> str:
        return f"Image thumbnail [{self.user_id}-{self.file_id}]"


@dataclass(frozen=True)
class WelcomeEmailJob(QueueJob):
    """Request to send the welcome email to a newly registered user."""
    task_name: ClassVar[str] = "users.send_welcome_email"

    user_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"userId": self.user_id}

    def describe(self) -> str:
        return f"Welcome email [{self.user_id}]"

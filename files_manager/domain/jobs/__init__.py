"""
Job Domain

Background job messages and the queue producer contract.
"""

from .entities import QueueJob, ThumbnailJob, WelcomeEmailJob
from .queue import JobQueue

__all__ = [
    "QueueJob",
    "ThumbnailJob",
    "WelcomeEmailJob",
    "JobQueue",
]

"""
Celery Job Queue Implementation

Publishes job messages by task name with ``send_task`` so this service
never imports worker code. Routing to queues is configured in CeleryConfig.
"""

import logging

from celery import Celery

from ..domain.errors import JobQueueError
from ..domain.jobs.entities import QueueJob
from ..domain.jobs.queue import JobQueue

logger = logging.getLogger(__name__)


class CeleryJobQueue(JobQueue):
    """Celery-backed producer for background jobs."""

    def __init__(self, celery_app: Celery):
        """
        Initialize with a configured Celery application.

        Args:
            celery_app: Celery instance whose broker receives the messages
        """
        self.celery = celery_app

    def enqueue(self, job: QueueJob) -> str:
        """Send the job and return the Celery task ID."""
        try:
            result = self.celery.send_task(job.task_name, kwargs=job.to_payload())
        except Exception as e:
            raise JobQueueError(f"Broker rejected {job.describe()}: {e}", original_error=e) from e

        logger.info(f"Enqueued {job.describe()} as task {result.id}")
        return result.id

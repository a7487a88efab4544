"""
Job Queue Interface

One-way producer contract for the durable work queue. The contract ends at
"message accepted for delivery"; retries and redelivery belong to the
consumer side.
"""

from abc import ABC, abstractmethod

from .entities import QueueJob


class JobQueue(ABC):
    """Abstract producer interface for background jobs."""

    @abstractmethod
    def enqueue(self, job: QueueJob) -> str:
        """
        Hand a job to the broker without waiting for its execution.

        Args:
            job: Job message

        Returns:
            Broker-assigned message ID

        Raises:
            JobQueueError: If the broker did not accept the message
        """
        pass  # pragma: no cover

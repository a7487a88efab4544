"""
User Application Service

Registration workflow: create the account, then schedule the welcome
email without making the response wait on or fail with the broker.
"""

import logging
from typing import Optional

from ..domain.errors import DependencyError
from ..domain.jobs import JobQueue, WelcomeEmailJob
from ..domain.users import User, UserManager
from .requests import RegisterUserRequest

logger = logging.getLogger(__name__)


class UserService:
    """Application service for account registration."""

    def __init__(self, user_manager: UserManager, job_queue: Optional[JobQueue] = None):
        self.user_manager = user_manager
        self.job_queue = job_queue

    def register(self, request: RegisterUserRequest) -> User:
        """
        Register a user and schedule their welcome email.

        Args:
            request: Parsed registration request

        Returns:
            The created User

        Raises:
            MissingEmailError, MissingPasswordError, EmailTakenError
        """
        user = self.user_manager.register(request.email, request.password)

        if self.job_queue is not None:
            job = WelcomeEmailJob(user_id=user.user_id)
            try:
                self.job_queue.enqueue(job)
            except DependencyError as e:
                logger.error(f"Failed to enqueue {job.describe()}: {e}")

        return user

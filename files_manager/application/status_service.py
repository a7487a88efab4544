"""
Status Application Service

Liveness of the two stores and record counts for the operational endpoints.
"""

from typing import Callable, Dict, Optional

from ..domain.files import FileManager
from ..domain.users import UserManager

HealthCheck = Callable[[], bool]


class StatusService:
    """Reports store health and record counts."""

    def __init__(
        self,
        user_manager: UserManager,
        file_manager: FileManager,
        session_store_check: Optional[HealthCheck] = None,
        metadata_store_check: Optional[HealthCheck] = None,
    ):
        """
        Initialize StatusService.

        Args:
            user_manager: UserManager domain service
            file_manager: FileManager domain service
            session_store_check: Liveness probe of the session store
            metadata_store_check: Liveness probe of the metadata store
        """
        self.user_manager = user_manager
        self.file_manager = file_manager
        self.session_store_check = session_store_check
        self.metadata_store_check = metadata_store_check

    @staticmethod
    def _probe(check: Optional[HealthCheck]) -> bool:
        return bool(check()) if check is not None else False

    def status(self) -> Dict[str, bool]:
        return {
            "redis": self._probe(self.session_store_check),
            "db": self._probe(self.metadata_store_check),
        }

    def stats(self) -> Dict[str, int]:
        """
        Raises:
            StoreUnavailableError: If the metadata store is unreachable
        """
        return {
            "users": self.user_manager.count_users(),
            "files": self.file_manager.count_files(),
        }

"""
Redis File Record Repository Implementation

Layout:
- ``file:<id>``: JSON document of the record
- ``files:children:<user>:<parent>``: sorted set of child IDs scored by a
  global insertion sequence, giving reverse-creation-order pages with
  ZREVRANGE
- ``files:seq``: insertion sequence
- ``files:count``: number of records
"""

import json
import logging
from typing import List, Optional

from ..domain.files.entities import FileRecord
from ..domain.files.repositories import FileRecordRepository
from .redis_repository import RedisRepository

logger = logging.getLogger(__name__)

# Largest index ZREVRANGE accepts
MAX_RANGE_INDEX = 2**63 - 1


class RedisFileRepository(FileRecordRepository):
    """Redis-based implementation of FileRecordRepository."""

    def __init__(self, redis_repository: RedisRepository):
        """
        Initialize with Redis repository.

        Args:
            redis_repository: RedisRepository instance from infrastructure layer
        """
        self.redis_repo = redis_repository
        self.key_prefix = "file"
        self.children_prefix = "files:children"
        self.sequence_key = "files:seq"
        self.count_key = "files:count"

    def _record_key(self, file_id: str) -> str:
        return f"{self.key_prefix}:{file_id}"

    def _children_key(self, user_id: str, parent_id: str) -> str:
        return f"{self.children_prefix}:{user_id}:{parent_id}"

    def insert(self, record: FileRecord) -> None:
        """
        Write the record, its index entry and the counter in one MULTI/EXEC.
        """
        sequence = self.redis_repo.incr(self.sequence_key)

        with self.redis_repo.guard(f"insert file {record.file_id}"):
            pipeline = self.redis_repo.redis.pipeline(transaction=True)
            pipeline.set(
                self.redis_repo._make_key(self._record_key(record.file_id)),
                json.dumps(record.to_dict()),
            )
            pipeline.zadd(
                self.redis_repo._make_key(self._children_key(record.user_id, record.parent_id)),
                {record.file_id: sequence},
            )
            pipeline.incr(self.redis_repo._make_key(self.count_key))
            pipeline.execute()

    def get(self, file_id: str) -> Optional[FileRecord]:
        """Retrieve a record from Redis."""
        data = self.redis_repo.get_json(self._record_key(file_id))
        if data is None:
            return None
        return self._deserialize(data, file_id)

    def list_children(
        self, user_id: str, parent_id: str, offset: int, limit: int
    ) -> List[FileRecord]:
        """
        Fetch one page of child IDs with ZREVRANGE, then the documents in a
        single pipelined round trip.
        """
        if limit <= 0 or offset + limit - 1 > MAX_RANGE_INDEX:
            return []

        children_key = self.redis_repo._make_key(self._children_key(user_id, parent_id))

        with self.redis_repo.guard(f"list children of {parent_id}"):
            raw_ids = self.redis_repo.redis.zrevrange(children_key, offset, offset + limit - 1)
            if not raw_ids:
                return []

            file_ids = [self.redis_repo.decode(raw_id) for raw_id in raw_ids]
            pipeline = self.redis_repo.redis.pipeline(transaction=False)
            for file_id in file_ids:
                pipeline.get(self.redis_repo._make_key(self._record_key(file_id)))
            results = pipeline.execute()

        records = []
        for file_id, raw in zip(file_ids, results):
            data = self.redis_repo.loads(raw, self._record_key(file_id))
            if data is None:
                logger.warning(f"Index entry {file_id} under {parent_id} has no record")
                continue
            record = self._deserialize(data, file_id)
            if record is not None:
                records.append(record)
        return records

    def update_visibility(self, file_id: str, is_public: bool) -> Optional[FileRecord]:
        """Flip ``isPublic`` atomically with a Lua read-modify-write."""
        data = self.redis_repo.update_json_field(self._record_key(file_id), "isPublic", is_public)
        if data is None:
            return None
        return self._deserialize(data, file_id)

    def count(self) -> int:
        return self.redis_repo.get_int(self.count_key)

    @staticmethod
    def _deserialize(data: dict, file_id: str) -> Optional[FileRecord]:
        try:
            return FileRecord.from_dict(data)
        except (KeyError, ValueError) as e:
            logger.warning(f"Error deserializing file record {file_id}: {e}")
            return None

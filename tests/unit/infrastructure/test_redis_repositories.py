"""
Unit tests for the Redis repositories with a mocked redis-py client.
"""

import json
from unittest.mock import MagicMock, Mock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from files_manager.domain.errors import EmailTakenError, StoreUnavailableError
from files_manager.domain.sessions import SessionToken
from files_manager.infrastructure import (
    RedisFileRepository,
    RedisRepository,
    RedisSessionRepository,
    RedisUserRepository,
)
from tests.fixtures.domain_fixtures import create_file_record, create_user


@pytest.fixture
def redis_client():
    """Mock redis client; pipelines are MagicMocks recording queued commands."""
    client = Mock()
    client.pipeline.return_value = MagicMock()
    return client


@pytest.fixture
def redis_repo(redis_client):
    return RedisRepository(redis_client, key_prefix="test")


class TestRedisRepository:
    """Test the base repository helpers."""

    def test_make_key_with_prefix(self, redis_repo):
        assert redis_repo._make_key("user:1") == "test:user:1"

    def test_make_key_without_prefix(self, redis_client):
        assert RedisRepository(redis_client)._make_key("user:1") == "user:1"

    def test_set_json_with_ttl_and_nx(self, redis_repo, redis_client):
        redis_client.set.return_value = True

        assert redis_repo.set_json("auth:t", {"a": 1}, ttl=60, only_if_absent=True) is True
        redis_client.set.assert_called_once_with("test:auth:t", json.dumps({"a": 1}), ex=60, nx=True)

    def test_set_json_nx_conflict(self, redis_repo, redis_client):
        redis_client.set.return_value = None

        assert redis_repo.set_json("k", {}, only_if_absent=True) is False

    def test_get_json(self, redis_repo, redis_client):
        redis_client.get.return_value = b'{"a": 1}'

        assert redis_repo.get_json("k") == {"a": 1}

    def test_get_json_missing(self, redis_repo, redis_client):
        redis_client.get.return_value = None

        assert redis_repo.get_json("k") is None

    def test_get_json_corrupt_treated_as_absent(self, redis_repo, redis_client):
        redis_client.get.return_value = b"{not json"

        assert redis_repo.get_json("k") is None

    def test_connection_error_translated(self, redis_repo, redis_client):
        redis_client.get.side_effect = RedisConnectionError("refused")

        with pytest.raises(StoreUnavailableError) as exc_info:
            redis_repo.get_json("k")

        assert isinstance(exc_info.value.original_error, RedisConnectionError)

    def test_update_json_field_runs_script(self, redis_repo, redis_client):
        redis_client.eval.return_value = b'{"isPublic": true}'

        result = redis_repo.update_json_field("file:1", "isPublic", True)

        assert result == {"isPublic": True}
        args = redis_client.eval.call_args[0]
        assert args[1:] == (1, "test:file:1", "isPublic", "true")

    def test_update_json_field_missing_key(self, redis_repo, redis_client):
        redis_client.eval.return_value = None

        assert redis_repo.update_json_field("file:1", "isPublic", True) is None

    def test_delete(self, redis_repo, redis_client):
        redis_client.delete.return_value = 1

        assert redis_repo.delete("k") is True
        redis_client.delete.assert_called_once_with("test:k")

    def test_get_int_missing_is_zero(self, redis_repo, redis_client):
        redis_client.get.return_value = None

        assert redis_repo.get_int("users:count") == 0

    def test_get_int(self, redis_repo, redis_client):
        redis_client.get.return_value = b"12"

        assert redis_repo.get_int("users:count") == 12


class TestRedisUserRepository:
    """Test the email claim and user document layout."""

    def test_insert_claims_email_then_writes(self, redis_repo, redis_client):
        # Arrange
        user = create_user()
        redis_client.set.return_value = True
        pipeline = redis_client.pipeline.return_value

        # Act
        RedisUserRepository(redis_repo).insert(user)

        # Assert
        redis_client.set.assert_called_once_with("test:user_email:bob@dylan.com", user.user_id, nx=True)
        redis_client.pipeline.assert_called_once_with(transaction=True)
        pipeline.set.assert_called_once_with(f"test:user:{user.user_id}", json.dumps(user.to_dict()))
        pipeline.incr.assert_called_once_with("test:users:count")
        pipeline.execute.assert_called_once()

    def test_insert_taken_email(self, redis_repo, redis_client):
        redis_client.set.return_value = None

        with pytest.raises(EmailTakenError):
            RedisUserRepository(redis_repo).insert(create_user())

        redis_client.pipeline.assert_not_called()

    def test_failed_write_releases_claim(self, redis_repo, redis_client):
        redis_client.set.return_value = True
        redis_client.pipeline.return_value.execute.side_effect = RedisConnectionError("gone")
        redis_client.delete.return_value = 1

        with pytest.raises(StoreUnavailableError):
            RedisUserRepository(redis_repo).insert(create_user())

        redis_client.delete.assert_called_once_with("test:user_email:bob@dylan.com")

    def test_get_by_email(self, redis_repo, redis_client):
        user = create_user()
        redis_client.get.side_effect = [
            user.user_id.encode(),
            json.dumps(user.to_dict()).encode(),
        ]

        assert RedisUserRepository(redis_repo).get_by_email("bob@dylan.com") == user

    def test_get_by_unknown_email(self, redis_repo, redis_client):
        redis_client.get.return_value = None

        assert RedisUserRepository(redis_repo).get_by_email("ghost@example.com") is None


class TestRedisSessionRepository:
    """Test the session key layout and expiry."""

    def test_add_uses_set_nx_ex(self, redis_repo, redis_client):
        redis_client.set.return_value = True
        session = SessionToken.create("u1")

        assert RedisSessionRepository(redis_repo).add(session, 86400) is True
        redis_client.set.assert_called_once_with(
            f"test:auth:{session.token}", json.dumps(session.to_dict()), ex=86400, nx=True
        )

    def test_get(self, redis_repo, redis_client):
        session = SessionToken.create("u1")
        redis_client.get.return_value = json.dumps(session.to_dict()).encode()

        assert RedisSessionRepository(redis_repo).get(session.token) == session

    def test_get_malformed(self, redis_repo, redis_client):
        redis_client.get.return_value = b'{"unexpected": 1}'

        assert RedisSessionRepository(redis_repo).get("token") is None

    def test_delete(self, redis_repo, redis_client):
        redis_client.delete.return_value = 0

        assert RedisSessionRepository(redis_repo).delete("token") is False


class TestRedisFileRepository:
    """Test the record, child index and counter layout."""

    def test_insert_indexes_child_by_sequence(self, redis_repo, redis_client):
        # Arrange
        record = create_file_record(user_id="u1")
        redis_client.incr.return_value = 7
        pipeline = redis_client.pipeline.return_value

        # Act
        RedisFileRepository(redis_repo).insert(record)

        # Assert
        redis_client.incr.assert_called_once_with("test:files:seq")
        pipeline.set.assert_called_once_with(
            f"test:file:{record.file_id}", json.dumps(record.to_dict())
        )
        pipeline.zadd.assert_called_once_with("test:files:children:u1:0", {record.file_id: 7})
        pipeline.incr.assert_called_once_with("test:files:count")

    def test_list_children_newest_first_page(self, redis_repo, redis_client):
        # Arrange
        newer = create_file_record(user_id="u1", name="newer")
        older = create_file_record(user_id="u1", name="older")
        redis_client.zrevrange.return_value = [newer.file_id.encode(), older.file_id.encode()]
        redis_client.pipeline.return_value.execute.return_value = [
            json.dumps(newer.to_dict()).encode(),
            json.dumps(older.to_dict()).encode(),
        ]

        # Act
        records = RedisFileRepository(redis_repo).list_children("u1", "0", offset=20, limit=20)

        # Assert
        redis_client.zrevrange.assert_called_once_with("test:files:children:u1:0", 20, 39)
        assert records == [newer, older]

    def test_list_children_skips_dangling_index_entries(self, redis_repo, redis_client):
        record = create_file_record(user_id="u1")
        redis_client.zrevrange.return_value = [b"gone", record.file_id.encode()]
        redis_client.pipeline.return_value.execute.return_value = [
            None,
            json.dumps(record.to_dict()).encode(),
        ]

        assert RedisFileRepository(redis_repo).list_children("u1", "0", 0, 20) == [record]

    def test_list_children_empty(self, redis_repo, redis_client):
        redis_client.zrevrange.return_value = []

        assert RedisFileRepository(redis_repo).list_children("u1", "0", 0, 20) == []

    def test_list_children_page_beyond_index_range(self, redis_repo, redis_client):
        records = RedisFileRepository(redis_repo).list_children(
            "u1", "0", offset=99999999999999999999 * 20, limit=20
        )

        assert records == []
        redis_client.zrevrange.assert_not_called()
        redis_client.pipeline.assert_not_called()

    def test_update_visibility(self, redis_repo, redis_client):
        record = create_file_record(user_id="u1")
        data = dict(record.to_dict(), isPublic=True)
        redis_client.eval.return_value = json.dumps(data).encode()

        updated = RedisFileRepository(redis_repo).update_visibility(record.file_id, True)

        assert updated == record.with_visibility(True)

    def test_get_missing(self, redis_repo, redis_client):
        redis_client.get.return_value = None

        assert RedisFileRepository(redis_repo).get("missing") is None

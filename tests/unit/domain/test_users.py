"""
Unit tests for the user domain: entity, registration and authentication.
"""

import threading

import pytest

from files_manager.domain.errors import (
    EmailTakenError,
    InvalidCredentialsError,
    MissingEmailError,
    MissingPasswordError,
    StoreUnavailableError,
)
from files_manager.domain.users import User, UserManager
from tests.fixtures.mock_repositories import MockUserRepository


class TestUserEntity:
    """Test User entity behavior."""

    def test_create_hashes_password(self):
        """Test that the clear-text password is never stored."""
        user = User.create("bob@dylan.com", "toto1234!")

        assert user.password_hash != "toto1234!"
        assert user.verify_password("toto1234!")
        assert not user.verify_password("wrong")

    def test_create_generates_unique_ids(self):
        first = User.create("a@b.c", "pw")
        second = User.create("a@b.c", "pw")

        assert first.user_id != second.user_id

    def test_public_dict_excludes_hash(self):
        user = User.create("bob@dylan.com", "toto1234!")

        assert user.to_public_dict() == {"id": user.user_id, "email": "bob@dylan.com"}

    def test_persistence_round_trip(self):
        user = User.create("bob@dylan.com", "toto1234!")

        restored = User.from_dict(user.to_dict())

        assert restored == user
        assert restored.verify_password("toto1234!")

    def test_repr_hides_hash(self):
        user = User.create("bob@dylan.com", "toto1234!")

        assert user.password_hash not in repr(user)


class TestUserManagerRegister:
    """Test UserManager.register."""

    def test_register_success(self, user_manager, user_repository):
        # Act
        user = user_manager.register("bob@dylan.com", "toto1234!")

        # Assert
        assert user.email == "bob@dylan.com"
        assert user_repository.get(user.user_id) == user
        assert user_manager.count_users() == 1

    @pytest.mark.parametrize("email", [None, ""])
    def test_missing_email(self, user_manager, user_repository, email):
        with pytest.raises(MissingEmailError):
            user_manager.register(email, "toto1234!")
        assert user_repository.count() == 0

    @pytest.mark.parametrize("password", [None, ""])
    def test_missing_password(self, user_manager, user_repository, password):
        with pytest.raises(MissingPasswordError):
            user_manager.register("bob@dylan.com", password)
        assert user_repository.count() == 0

    def test_missing_email_checked_before_password(self, user_manager):
        with pytest.raises(MissingEmailError):
            user_manager.register(None, None)

    def test_duplicate_email(self, user_manager):
        user_manager.register("bob@dylan.com", "toto1234!")

        with pytest.raises(EmailTakenError) as exc_info:
            user_manager.register("bob@dylan.com", "other")

        assert exc_info.value.public_message == "Already exist"
        assert user_manager.count_users() == 1

    def test_concurrent_registration_same_email_one_wins(self):
        """Test that racing registrations for one email create a single user."""
        # Arrange
        repository = MockUserRepository()
        manager = UserManager(repository)
        barrier = threading.Barrier(8)
        outcomes = []
        outcomes_lock = threading.Lock()

        def register():
            barrier.wait()
            try:
                manager.register("race@example.com", "pw")
                result = "created"
            except EmailTakenError:
                result = "taken"
            with outcomes_lock:
                outcomes.append(result)

        threads = [threading.Thread(target=register) for _ in range(8)]

        # Act
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        assert outcomes.count("created") == 1
        assert outcomes.count("taken") == 7
        assert repository.count() == 1

    def test_store_failure_propagates(self, user_manager, user_repository):
        user_repository.unavailable = True

        with pytest.raises(StoreUnavailableError):
            user_manager.register("bob@dylan.com", "toto1234!")


class TestUserManagerAuthenticate:
    """Test UserManager.authenticate."""

    def test_authenticate_success(self, user_manager):
        registered = user_manager.register("bob@dylan.com", "toto1234!")

        user = user_manager.authenticate("bob@dylan.com", "toto1234!")

        assert user.user_id == registered.user_id

    def test_wrong_password(self, user_manager):
        user_manager.register("bob@dylan.com", "toto1234!")

        with pytest.raises(InvalidCredentialsError):
            user_manager.authenticate("bob@dylan.com", "nope")

    def test_unknown_email(self, user_manager):
        with pytest.raises(InvalidCredentialsError):
            user_manager.authenticate("ghost@example.com", "toto1234!")

    @pytest.mark.parametrize("email,password", [("", "pw"), ("a@b.c", ""), (None, None)])
    def test_empty_credentials(self, user_manager, email, password):
        with pytest.raises(InvalidCredentialsError):
            user_manager.authenticate(email, password)

    def test_get_user_unknown_returns_none(self, user_manager):
        assert user_manager.get_user("missing") is None

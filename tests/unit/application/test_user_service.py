"""Unit tests for UserService."""

import logging
from unittest.mock import Mock
from uuid import uuid4

import pytest

from userhub.application.dtos import (
    CreateUserRequest,
    ListUsersQuery,
    UpdateUserRequest,
    UserDTO,
)
from userhub.application.services import UserService
from userhub.domain.user import (
    InvalidInputError,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)
from userhub.infrastructure.persistence.memory import InMemoryUserRepository


class TestUserServiceWithMockRepository:
    """Orchestration checks against a mocked repository."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = Mock(spec=UserRepository)
        self.service = UserService(user_repository=self.user_repo)

    def test_create_normalizes_before_storing(self):
        # Arrange
        self.user_repo.create.side_effect = lambda user: user

        # Act
        result = self.service.create_user(
            CreateUserRequest(name="  Zed  ", email="  ZED@X.com ", age=40),
        )

        # Assert
        stored = self.user_repo.create.call_args.args[0]
        assert stored.name == "Zed"
        assert stored.email == "zed@x.com"
        assert result == UserDTO(id=stored.id, name="Zed", email="zed@x.com", age=40)

    def test_create_invalid_request_never_reaches_repository(self):
        with pytest.raises(InvalidInputError):
            self.service.create_user(CreateUserRequest(name="", email="a@b.c", age=1))

        self.user_repo.create.assert_not_called()

    def test_create_propagates_conflict_unchanged(self):
        error = UserAlreadyExistsError("zed@x.com")
        self.user_repo.create.side_effect = error

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            self.service.create_user(
                CreateUserRequest(name="Zed", email="zed@x.com", age=40),
            )

        assert exc_info.value is error

    def test_update_without_fields_fails_before_lookup(self):
        """No-field updates are rejected whether or not the user exists."""
        with pytest.raises(InvalidInputError) as exc_info:
            self.service.update_user(uuid4(), UpdateUserRequest())

        assert exc_info.value.reason == "No updates provided"
        self.user_repo.find_by_id.assert_not_called()
        self.user_repo.update.assert_not_called()

    def test_update_missing_user_raises_not_found(self):
        user_id = uuid4()
        self.user_repo.find_by_id.side_effect = UserNotFoundError(user_id)

        with pytest.raises(UserNotFoundError):
            self.service.update_user(user_id, UpdateUserRequest(age=30))

        self.user_repo.update.assert_not_called()

    def test_delete_fetches_then_deletes(self):
        user = User.create("Zed", "zed@x.com", 40)
        self.user_repo.find_by_id.return_value = user

        self.service.delete_user(user.id)

        self.user_repo.find_by_id.assert_called_once_with(user.id)
        self.user_repo.delete.assert_called_once_with(user.id)

    def test_delete_missing_user_skips_delete(self):
        user_id = uuid4()
        self.user_repo.find_by_id.side_effect = UserNotFoundError(user_id)

        with pytest.raises(UserNotFoundError):
            self.service.delete_user(user_id)

        self.user_repo.delete.assert_not_called()

    def test_list_invalid_limit_never_reaches_repository(self):
        with pytest.raises(InvalidInputError):
            self.service.list_users(ListUsersQuery(limit=0))

        self.user_repo.find_all.assert_not_called()


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(repo) -> UserService:
    return UserService(user_repository=repo)


def _create(service: UserService, name: str, email: str, age: int = 30) -> UserDTO:
    return service.create_user(CreateUserRequest(name=name, email=email, age=age))


class TestUserServiceCreate:
    def test_distinct_creates_grow_count_and_ids_are_unique(self, service, repo):
        ids = set()
        for i in range(5):
            dto = _create(service, f"User {i}", f"user{i}@example.com")
            ids.add(dto.id)
            assert repo.count() == i + 1

        assert len(ids) == 5

    @pytest.mark.parametrize(
        "duplicate_email",
        ["zed@x.com", "ZED@X.COM", "  Zed@x.com  "],
    )
    def test_same_normalized_email_conflicts(self, service, repo, duplicate_email):
        _create(service, "Zed", "zed@x.com")

        with pytest.raises(UserAlreadyExistsError):
            _create(service, "Other Zed", duplicate_email)

        assert repo.count() == 1

    def test_get_after_create_returns_same_record(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        assert service.get_user(created.id) == created

    @pytest.mark.parametrize("email", ["    @", "  a@b  "])
    def test_padded_short_email_is_rejected(self, service, repo, email):
        with pytest.raises(InvalidInputError, match="Invalid email format"):
            _create(service, "Zed", email)

        assert repo.count() == 0


class TestUserServiceList:
    def test_sorted_by_name_with_sample_data(self):
        service = UserService(InMemoryUserRepository.with_sample_data())
        _create(service, "Zed", "zed@x.com", 40)

        result = service.list_users(ListUsersQuery())

        assert [u.name for u in result.users] == ["Alice Johnson", "Bob Smith", "Zed"]
        assert result.total == 3
        assert result.limit == 10
        assert result.offset == 0

    def test_last_partial_page(self, service):
        for i in range(25):
            _create(service, f"User {i:02d}", f"user{i}@example.com")

        result = service.list_users(ListUsersQuery(limit=10, offset=20))

        assert len(result.users) == 5
        assert result.total == 25
        assert [u.name for u in result.users] == [f"User {i}" for i in range(20, 25)]

    def test_offset_past_end_is_empty_not_an_error(self, service):
        for i in range(3):
            _create(service, f"User {i}", f"user{i}@example.com")

        result = service.list_users(ListUsersQuery(offset=3))

        assert result.users == []
        assert result.total == 3
        assert result.offset == 3

    def test_negative_offset_is_rejected(self):
        service = UserService(InMemoryUserRepository.with_sample_data())

        with pytest.raises(InvalidInputError, match="Offset cannot be negative"):
            service.list_users(ListUsersQuery(offset=-1))


class TestUserServiceUpdate:
    def test_update_age_only_preserves_other_fields(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        updated = service.update_user(created.id, UpdateUserRequest(age=41))

        assert updated.id == created.id
        assert updated.name == "Zed"
        assert updated.email == "zed@x.com"
        assert updated.age == 41

    def test_update_normalizes_fields(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        updated = service.update_user(
            created.id,
            UpdateUserRequest(name="  Zed Z ", email=" NEW@X.COM "),
        )

        assert updated.name == "Zed Z"
        assert updated.email == "new@x.com"

    def test_update_to_taken_email_conflicts(self, service):
        _create(service, "Alice", "alice@x.com")
        bob = _create(service, "Bob", "bob@x.com")

        with pytest.raises(UserAlreadyExistsError):
            service.update_user(bob.id, UpdateUserRequest(email="ALICE@x.com"))

        assert service.get_user(bob.id).email == "bob@x.com"

    def test_update_to_padded_short_email_is_rejected(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        with pytest.raises(InvalidInputError, match="Invalid email format"):
            service.update_user(created.id, UpdateUserRequest(email="x@y       "))

        assert service.get_user(created.id).email == "zed@x.com"

    def test_update_keeping_own_email_is_allowed(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        updated = service.update_user(created.id, UpdateUserRequest(email="zed@x.com"))

        assert updated.email == "zed@x.com"

    def test_update_without_fields_on_existing_user(self, service):
        created = _create(service, "Zed", "zed@x.com", 40)

        with pytest.raises(InvalidInputError):
            service.update_user(created.id, UpdateUserRequest())


class TestUserServiceDeleteAndProfile:
    def test_delete_missing_user_leaves_count_unchanged(self, service, repo):
        _create(service, "Zed", "zed@x.com")

        with pytest.raises(UserNotFoundError):
            service.delete_user(uuid4())

        assert repo.count() == 1

    def test_delete_removes_user(self, service, repo):
        created = _create(service, "Zed", "zed@x.com")

        service.delete_user(created.id)

        assert repo.count() == 0
        with pytest.raises(UserNotFoundError):
            service.get_user(created.id)

    def test_profile_derives_presentation_fields(self, service, repo):
        created = _create(service, "Kid", "kid@x.com", 12)

        profile = service.get_user_profile(created.id)

        assert profile.is_adult is False
        assert profile.profile_url == f"/api/v1/users/{created.id}/profile"
        assert profile.created_at == repo.find_by_id(created.id).created_at

    def test_logs_mutations(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="userhub"):
            created = _create(service, "Zed", "zed@x.com")
            service.delete_user(created.id)

        messages = [r.getMessage() for r in caplog.records]
        assert f"Created new user: Zed ({created.id})" in messages
        assert f"Deleted user: Zed ({created.id})" in messages

"""Unit tests for User aggregate."""

import time
from datetime import datetime, timezone
from uuid import UUID, uuid4

from userhub.domain.user import User


class TestUser:
    """Tests for User aggregate."""

    def test_create_generates_random_uuid(self):
        """User.create generates a random UUID4 for ID."""
        user = User.create(name="Alice", email="alice@example.com", age=30)

        assert isinstance(user.id, UUID)
        assert user.id.version == 4
        assert user.name == "Alice"
        assert user.email == "alice@example.com"
        assert user.age == 30

    def test_create_generates_unique_ids(self):
        """Each User.create call generates a unique ID."""
        user1 = User.create(name="Alice", email="alice@example.com", age=30)
        user2 = User.create(name="Alice", email="alice@example.com", age=30)

        assert user1.id != user2.id

    def test_is_adult_threshold(self):
        """Adulthood starts at 18."""
        assert User.create("Kid", "kid@example.com", 17).is_adult is False
        assert User.create("Teen", "teen@example.com", 18).is_adult is True
        assert User.create("Elder", "elder@example.com", 90).is_adult is True

    def test_is_adult_follows_age_updates(self):
        user = User.create("Sam", "sam@example.com", 17)

        user.update_age(18)

        assert user.is_adult is True

    def test_update_methods_keep_id(self):
        """Mutators never touch the identifier."""
        user = User.create("Sam", "sam@example.com", 20)
        original_id = user.id

        user.update_name("Samuel")
        user.update_email("samuel@example.com")
        user.update_age(21)

        assert user.id == original_id
        assert user.name == "Samuel"
        assert user.email == "samuel@example.com"
        assert user.age == 21

    def test_timestamps_set_on_creation(self):
        """created_at and updated_at set on creation."""
        before = datetime.now(tz=timezone.utc)
        user = User.create("Sam", "sam@example.com", 20)
        after = datetime.now(tz=timezone.utc)

        assert before <= user.created_at <= after
        assert user.updated_at == user.created_at

    def test_updated_at_changes_on_update(self):
        user = User.create("Sam", "sam@example.com", 20)
        created = user.created_at

        # Small delay to ensure timestamp difference
        time.sleep(0.01)
        user.update_name("Samuel")

        assert user.updated_at > created
        assert user.created_at == created

    def test_equality_based_on_id(self):
        """Users are equal if they have the same ID."""
        user_id = uuid4()
        user1 = User(id=user_id, name="A", email="a@example.com", age=1)
        user2 = User(id=user_id, name="B", email="b@example.com", age=2)

        assert user1 == user2
        assert hash(user1) == hash(user2)

    def test_inequality_different_ids(self):
        user1 = User.create("Sam", "sam@example.com", 20)
        user2 = User.create("Sam", "sam@example.com", 20)

        assert user1 != user2

    def test_reconstitute_with_id(self):
        """reconstitute restores user with specific ID and timestamps."""
        user_id = uuid4()
        created = datetime(2023, 1, 1, tzinfo=timezone.utc)
        updated = datetime(2023, 6, 1, tzinfo=timezone.utc)

        user = User.reconstitute(
            id=user_id,
            name="Sam",
            email="sam@example.com",
            age=20,
            created_at=created,
            updated_at=updated,
        )

        assert user.id == user_id
        assert user.created_at == created
        assert user.updated_at == updated

    def test_repr(self):
        user = User.create("Sam", "sam@example.com", 20)

        assert "User" in repr(user)
        assert "sam@example.com" in repr(user)

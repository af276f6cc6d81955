"""In-memory implementation of UserRepository."""

import copy
import logging
import threading
from uuid import UUID

from userhub.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    ("Alice Johnson", "alice@example.com", 28),
    ("Bob Smith", "bob@example.com", 32),
)


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository guarded by a single lock.

    Every operation, reads included, holds the lock for its whole duration.
    Users go in and come out as copies, so no caller ever holds a reference
    into the stored map.
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_sample_data(cls) -> "InMemoryUserRepository":
        repo = cls()
        for name, email, age in SAMPLE_USERS:
            repo.create(User.create(name=name, email=email, age=age))
        logger.debug("Seeded %d sample users", len(SAMPLE_USERS))
        return repo

    def create(self, user: User) -> User:
        with self._lock:
            if self._email_taken(user.email):
                raise UserAlreadyExistsError(user.email)
            self._users[user.id] = copy.copy(user)
            return copy.copy(user)

    def find_by_id(self, user_id: UUID) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return copy.copy(user)

    def find_all(self) -> list[User]:
        with self._lock:
            users = [copy.copy(u) for u in self._users.values()]
        # sorted() is stable, so equal names keep insertion order
        return sorted(users, key=lambda u: u.name)

    def update(self, user_id: UUID, user: User) -> User:
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise UserNotFoundError(user_id)
            if self._email_taken(user.email, exclude=user_id):
                raise UserAlreadyExistsError(user.email)

            stored = User.reconstitute(
                id=user_id,
                name=user.name,
                email=user.email,
                age=user.age,
                created_at=existing.created_at,
                updated_at=user.updated_at,
            )
            self._users[user_id] = stored
            return copy.copy(stored)

    def delete(self, user_id: UUID) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _email_taken(self, email: str, exclude: UUID | None = None) -> bool:
        # Caller must hold self._lock
        return any(
            u.email == email for u in self._users.values() if u.id != exclude
        )

"""In-memory persistence adapters."""

from userhub.infrastructure.persistence.memory.user_repository import (
    SAMPLE_USERS,
    InMemoryUserRepository,
)

__all__ = ["SAMPLE_USERS", "InMemoryUserRepository"]

"""DTOs for user responses.

DTOs are independent snapshots of a User; derived presentation fields
(adulthood, profile link) are computed here and never stored.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from userhub.domain.user import User

PROFILE_URL_TEMPLATE = "/api/v1/users/{user_id}/profile"


@dataclass(frozen=True)
class UserDTO:
    """DTO for a single user."""

    id: UUID
    name: str
    email: str
    age: int

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(id=user.id, name=user.name, email=user.email, age=user.age)


@dataclass(frozen=True)
class UserProfileDTO:
    """DTO for the profile view of a user."""

    id: UUID
    name: str
    email: str
    age: int
    profile_url: str
    created_at: datetime
    is_adult: bool

    @classmethod
    def from_user(cls, user: User) -> "UserProfileDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            profile_url=PROFILE_URL_TEMPLATE.format(user_id=user.id),
            created_at=user.created_at,
            is_adult=user.is_adult,
        )


@dataclass(frozen=True)
class UserListDTO:
    """One page of users plus the pre-pagination total."""

    users: list[UserDTO]
    total: int
    limit: int
    offset: int

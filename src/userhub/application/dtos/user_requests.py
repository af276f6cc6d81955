"""Request objects for user operations.

Each request validates itself fail-fast: the first broken rule is raised
as InvalidInputError and nothing else is checked.
"""

from dataclasses import dataclass
from typing import Optional

from userhub.domain.user.exceptions import InvalidInputError

NAME_MAX_LENGTH = 100
EMAIL_MIN_LENGTH = 5
EMAIL_MAX_LENGTH = 255
AGE_MAX = 150

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
MAX_LIMIT = 100


def normalize_name(name: str) -> str:
    return name.strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _validate_name(name: str) -> None:
    if not name.strip():
        msg = "Name cannot be empty"
        raise InvalidInputError(msg)
    if len(name) > NAME_MAX_LENGTH:
        msg = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
        raise InvalidInputError(msg)


def _validate_email(email: str) -> None:
    # Rules apply to the stored form
    email = normalize_email(email)
    if "@" not in email or len(email) < EMAIL_MIN_LENGTH:
        msg = "Invalid email format"
        raise InvalidInputError(msg)
    if len(email) > EMAIL_MAX_LENGTH:
        msg = f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"
        raise InvalidInputError(msg)


def _validate_age(age: int) -> None:
    if age < 0 or age > AGE_MAX:
        msg = "Age must be realistic"
        raise InvalidInputError(msg)


@dataclass(frozen=True)
class CreateUserRequest:
    """Payload for creating a user."""

    name: str
    email: str
    age: int

    def validate(self) -> None:
        _validate_name(self.name)
        _validate_email(self.email)
        _validate_age(self.age)


@dataclass(frozen=True)
class UpdateUserRequest:
    """Partial update payload.

    All fields are optional - only provided fields will be updated.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None

    def validate(self) -> None:
        if self.name is not None:
            _validate_name(self.name)
        if self.email is not None:
            _validate_email(self.email)
        if self.age is not None:
            _validate_age(self.age)

    def has_updates(self) -> bool:
        return any(v is not None for v in (self.name, self.email, self.age))


@dataclass(frozen=True)
class ListUsersQuery:
    """Offset/limit pagination parameters."""

    limit: Optional[int] = None
    offset: Optional[int] = None

    def validate(self) -> None:
        if self.limit is not None and not 1 <= self.limit <= MAX_LIMIT:
            msg = f"Limit must be between 1 and {MAX_LIMIT}"
            raise InvalidInputError(msg)
        if self.offset is not None and self.offset < 0:
            msg = "Offset cannot be negative"
            raise InvalidInputError(msg)

    @property
    def effective_limit(self) -> int:
        # Clamped even when validate() was skipped
        limit = DEFAULT_LIMIT if self.limit is None else self.limit
        return max(1, min(limit, MAX_LIMIT))

    @property
    def effective_offset(self) -> int:
        return DEFAULT_OFFSET if self.offset is None else max(0, self.offset)

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from userhub.domain.shared.time import utc_now

ADULT_AGE = 18


class User:
    """
    User aggregate root.

    Each user is uniquely identified by a random UUID generated at creation
    time. Field values are expected to be validated and normalized before
    construction; the aggregate itself does not re-check them.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        age: int,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = name
        self._email = email
        self._age = age
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def age(self) -> int:
        return self._age

    @property
    def is_adult(self) -> bool:
        return self._age >= ADULT_AGE

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_name(self, name: str) -> None:
        self._name = name
        self._updated_at = utc_now()

    def update_email(self, email: str) -> None:
        self._email = email
        self._updated_at = utc_now()

    def update_age(self, age: int) -> None:
        self._age = age
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: str, email: str, age: int) -> "User":
        return cls(name=name, email=email, age=age)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: str,
        age: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            age=age,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email})"

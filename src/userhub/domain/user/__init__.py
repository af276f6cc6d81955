"""User domain - manages the User resource.

This domain handles:
- User aggregate (identity, name, email, age)
- Domain exceptions for lookups, uniqueness and input validation
- Repository interface (implementation lives in infrastructure)

Design notes:
- User ID is a random UUID4 generated at creation and never changes
- Email is stored trimmed and lowercased, and is unique across all users
- Adulthood is derived from age, never stored
"""

from userhub.domain.user.aggregates import ADULT_AGE, User
from userhub.domain.user.exceptions import (
    InvalidInputError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository

__all__ = [
    "ADULT_AGE",
    "InvalidInputError",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]

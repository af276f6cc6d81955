"""Data Transfer Objects for the user application layer.

Requests validate inbound payloads; responses decouple the presentation
layer from the User aggregate.
"""

from userhub.application.dtos.user_requests import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MAX_LIMIT,
    CreateUserRequest,
    ListUsersQuery,
    UpdateUserRequest,
    normalize_email,
    normalize_name,
)
from userhub.application.dtos.user_responses import (
    UserDTO,
    UserListDTO,
    UserProfileDTO,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "MAX_LIMIT",
    "CreateUserRequest",
    "ListUsersQuery",
    "UpdateUserRequest",
    "UserDTO",
    "UserListDTO",
    "UserProfileDTO",
    "normalize_email",
    "normalize_name",
]

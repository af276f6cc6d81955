from userhub.presentation.api.schemas.common import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from userhub.presentation.api.schemas.users import (
    CreateUserBody,
    UpdateUserBody,
    UserProfileResponse,
    UserResponse,
    UsersListResponse,
)

__all__ = [
    "ApiResponse",
    "CreateUserBody",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "UpdateUserBody",
    "UserProfileResponse",
    "UserResponse",
    "UsersListResponse",
]

"""Users router for CRUD operations on the User resource.

Handlers are plain functions: FastAPI runs each request in its worker
thread pool, and the service below them never awaits.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from userhub.application.dtos import ListUsersQuery
from userhub.presentation.api.dependencies import UserServiceDep
from userhub.presentation.api.schemas import (
    ApiResponse,
    CreateUserBody,
    ErrorResponse,
    UpdateUserBody,
    UserProfileResponse,
    UserResponse,
    UsersListResponse,
)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Email already in use"}}


@router.get(
    "",
    summary="List users",
    responses={**_INVALID},
)
def list_users(
    service: UserServiceDep,
    limit: Annotated[Optional[int], Query(description="Page size (1-100)")] = None,
    offset: Annotated[Optional[int], Query(ge=0, description="Users to skip")] = None,
) -> ApiResponse[UsersListResponse]:
    """List users sorted by name, paginated by offset and limit."""
    result = service.list_users(ListUsersQuery(limit=limit, offset=offset))
    return ApiResponse(data=UsersListResponse.from_dto(result))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={**_INVALID, **_CONFLICT},
)
def create_user(
    body: CreateUserBody,
    service: UserServiceDep,
) -> ApiResponse[UserResponse]:
    """Create a new user."""
    user = service.create_user(body.to_request())
    return ApiResponse(data=UserResponse.from_dto(user))


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={**_NOT_FOUND},
)
def get_user(user_id: UUID, service: UserServiceDep) -> ApiResponse[UserResponse]:
    """Get a user by ID."""
    user = service.get_user(user_id)
    return ApiResponse(data=UserResponse.from_dto(user))


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={**_INVALID, **_NOT_FOUND, **_CONFLICT},
)
def update_user(
    user_id: UUID,
    body: UpdateUserBody,
    service: UserServiceDep,
) -> ApiResponse[UserResponse]:
    """Update any subset of name, email and age."""
    user = service.update_user(user_id, body.to_request())
    return ApiResponse(data=UserResponse.from_dto(user))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={**_NOT_FOUND},
)
def delete_user(user_id: UUID, service: UserServiceDep) -> Response:
    """Delete a user."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{user_id}/profile",
    summary="Get a user's profile",
    responses={**_NOT_FOUND},
)
def get_user_profile(
    user_id: UUID,
    service: UserServiceDep,
) -> ApiResponse[UserProfileResponse]:
    """Get the profile view of a user, including derived fields."""
    profile = service.get_user_profile(user_id)
    return ApiResponse(data=UserProfileResponse.from_dto(profile))

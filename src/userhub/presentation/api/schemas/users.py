from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from userhub.application.dtos import (
    CreateUserRequest,
    UpdateUserRequest,
    UserDTO,
    UserListDTO,
    UserProfileDTO,
)


class CreateUserBody(BaseModel):
    """Request schema for creating a new user.

    Field rules (length, format, age range) are enforced by the
    application layer so that every violation reports the same way.
    """

    name: str
    email: str
    age: int = Field(..., ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Zed", "email": "zed@example.com", "age": 40},
        },
    )

    def to_request(self) -> CreateUserRequest:
        return CreateUserRequest(name=self.name, email=self.email, age=self.age)


class UpdateUserBody(BaseModel):
    """Request to update a user.

    All fields are optional - only provided fields will be updated.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)

    def to_request(self) -> UpdateUserRequest:
        return UpdateUserRequest(name=self.name, email=self.email, age=self.age)


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: UUID
    name: str
    email: str
    age: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls.model_validate(dto)


class UserProfileResponse(BaseModel):
    """Response schema for the profile view of a user."""

    id: UUID
    name: str
    email: str
    age: int
    profile_url: str
    created_at: datetime
    is_adult: bool

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_dto(cls, dto: UserProfileDTO) -> "UserProfileResponse":
        return cls.model_validate(dto)


class UsersListResponse(BaseModel):
    """One page of users."""

    users: list[UserResponse]
    total: int = Field(..., description="Total number of users")
    limit: int = Field(..., description="Page size applied")
    offset: int = Field(..., description="Number of users skipped")

    @classmethod
    def from_dto(cls, dto: UserListDTO) -> "UsersListResponse":
        return cls(
            users=[UserResponse.from_dto(u) for u in dto.users],
            total=dto.total,
            limit=dto.limit,
            offset=dto.offset,
        )

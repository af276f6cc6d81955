"""Common schemas shared across API endpoints."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from userhub.domain.shared.time import utc_now

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope wrapping every response payload."""

    data: T
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the response was produced",
    )


class ErrorDetail(BaseModel):
    """Body of an error response."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the error occurred",
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: ErrorDetail

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "code": "USER_NOT_FOUND",
                    "message": "User with id 0b4c... not found",
                    "timestamp": "2024-01-01T00:00:00Z",
                },
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    timestamp: datetime = Field(default_factory=utc_now)
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")

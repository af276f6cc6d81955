"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from uuid import UUID

from userhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with id {user_id} not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class UserAlreadyExistsError(ConflictError):
    """Email already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User with email {email} already exists",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"email": email},
        )


class InvalidInputError(ValidationError):
    """
    Raised when a request payload violates a field constraint.

    Attributes
    ----------
    reason
        The first rule that failed, as a human-readable sentence
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid input: {reason}", code=ErrorCode.INVALID_INPUT)

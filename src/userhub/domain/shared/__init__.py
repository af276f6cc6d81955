"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
the domain and application layers.
"""

from userhub.domain.shared.exceptions import (
    ConfigurationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    StorageError,
    ValidationError,
)
from userhub.domain.shared.time import utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "StorageError",
    "InternalError",
    "ConfigurationError",
    # Utilities
    "utc_now",
]

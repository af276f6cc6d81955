"""User service for CRUD operations over the User resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from userhub.application.dtos import (
    CreateUserRequest,
    ListUsersQuery,
    UpdateUserRequest,
    UserDTO,
    UserListDTO,
    UserProfileDTO,
    normalize_email,
    normalize_name,
)
from userhub.domain.user import InvalidInputError, User

if TYPE_CHECKING:
    from userhub.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for the User resource.

    Runs validate -> normalize -> repository call -> DTO mapping for each
    operation. Domain errors from validation and the repository propagate
    unchanged; this layer only adds log records.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    def create_user(self, request: CreateUserRequest) -> UserDTO:
        request.validate()

        user = User.create(
            name=normalize_name(request.name),
            email=normalize_email(request.email),
            age=request.age,
        )
        created = self._user_repo.create(user)

        logger.info("Created new user: %s (%s)", created.name, created.id)
        return UserDTO.from_user(created)

    def get_user(self, user_id: UUID) -> UserDTO:
        user = self._user_repo.find_by_id(user_id)
        logger.debug("Fetched user %s", user_id)
        return UserDTO.from_user(user)

    def get_user_profile(self, user_id: UUID) -> UserProfileDTO:
        user = self._user_repo.find_by_id(user_id)
        logger.debug("Fetched profile for user %s", user_id)
        return UserProfileDTO.from_user(user)

    def list_users(self, query: ListUsersQuery) -> UserListDTO:
        query.validate()

        all_users = self._user_repo.find_all()
        total = len(all_users)
        limit = query.effective_limit
        offset = query.effective_offset

        page = all_users[offset : offset + limit]

        logger.debug(
            "Listed %d of %d users (limit=%d, offset=%d)",
            len(page),
            total,
            limit,
            offset,
        )
        return UserListDTO(
            users=[UserDTO.from_user(u) for u in page],
            total=total,
            limit=limit,
            offset=offset,
        )

    def update_user(self, user_id: UUID, request: UpdateUserRequest) -> UserDTO:
        request.validate()

        if not request.has_updates():
            logger.warning("Update request for user %s has no updates", user_id)
            msg = "No updates provided"
            raise InvalidInputError(msg)

        # Fetch and write are separate repository calls, each atomic on its
        # own; concurrent partial updates to one user are last-writer-wins.
        user = self._user_repo.find_by_id(user_id)

        # Only provided (non-None) values are updated; others are preserved.
        if request.name is not None:
            user.update_name(normalize_name(request.name))
        if request.email is not None:
            user.update_email(normalize_email(request.email))
        if request.age is not None:
            user.update_age(request.age)

        updated = self._user_repo.update(user_id, user)

        logger.info("Updated user: %s (%s)", updated.name, updated.id)
        return UserDTO.from_user(updated)

    def delete_user(self, user_id: UUID) -> None:
        # Fetch first so the log record can name the deleted user
        user = self._user_repo.find_by_id(user_id)
        self._user_repo.delete(user_id)

        logger.info("Deleted user: %s (%s)", user.name, user.id)

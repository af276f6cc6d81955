"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from userhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations own the canonical user set. Every operation must be
    atomic with respect to concurrent callers: the email uniqueness check
    and the write it guards happen as one step.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Store a new user.

        Parameters
        ----------
        user
            The user to store (email already normalized)

        Returns
        -------
        The stored user

        Raises
        ------
        UserAlreadyExistsError
            If another user already holds the same email
        """

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> User:
        """
        Find a user by their ID.

        Raises
        ------
        UserNotFoundError
            If no user has this ID
        """

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return all users ordered by name ascending."""

    @abstractmethod
    def update(self, user_id: UUID, user: User) -> User:
        """
        Replace the stored state of an existing user.

        The stored record keeps ``user_id`` and its original creation time,
        whatever identifier ``user`` carries.

        Raises
        ------
        UserNotFoundError
            If no user has this ID
        UserAlreadyExistsError
            If a different user already holds the target email
        """

    @abstractmethod
    def delete(self, user_id: UUID) -> None:
        """
        Delete a user by ID.

        Raises
        ------
        UserNotFoundError
            If no user has this ID
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored users."""

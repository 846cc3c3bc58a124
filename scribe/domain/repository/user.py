"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from scribe.domain.model.user import User
from scribe.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's public name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> List[User]:
        """List users, oldest first."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The saved user

        Raises:
            AlreadyExistsError: If the username or email is taken
        """
        pass

    @abstractmethod
    async def update_fields(
        self, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[User]:
        """Overwrite the given fields of a user.

        Args:
            user_id: The user's unique identifier
            fields: Attribute names mapped to their new values

        Returns:
            The updated user, or None if no user matched
        """
        pass

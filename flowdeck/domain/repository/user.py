"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from flowdeck.domain.model.user import User
from flowdeck.domain.value import UserId, UserRole


class UserRepository(ABC):
    """Repository for User records.

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
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        email: str,
        full_name: str,
        role: UserRole,
        google_sub: str | None = None,
        google_refresh_token: str | None = None,
    ) -> User:
        """Insert a new user and return it with its assigned ID.

        Args:
            email: Email address (natural key)
            full_name: Display name
            role: Directory role
            google_sub: Google subject identifier
            google_refresh_token: Refresh token from the login flow

        Returns:
            The created user
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

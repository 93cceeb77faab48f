"""In-memory user repository for testing."""

from datetime import datetime, timezone
from itertools import count
from typing import Optional

from flowdeck.domain.model.user import User
from flowdeck.domain.repository.user import UserRepository
from flowdeck.domain.value import UserId, UserRole


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case."""
        wanted = email.lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def create(
        self,
        email: str,
        full_name: str,
        role: UserRole,
        google_sub: str | None = None,
        google_refresh_token: str | None = None,
    ) -> User:
        """Insert a user with the next sequential ID."""
        now = datetime.now(timezone.utc)
        user = User(
            id=UserId(next(self._ids)),
            email=email,
            full_name=full_name,
            role=role,
            google_sub=google_sub,
            google_refresh_token=google_refresh_token,
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Update a user."""
        self._users[user.id] = user
        return user

"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from flowdeck.domain.model import User
from flowdeck.domain.repository import UserRepository
from flowdeck.domain.value import UserId, UserRole
from flowdeck.persistence.mappers import row_to_user, user_to_dict
from flowdeck.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Uses the lower(email) unique index.
        """
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(
        self,
        email: str,
        full_name: str,
        role: UserRole,
        google_sub: str | None = None,
        google_refresh_token: str | None = None,
    ) -> User:
        stmt = (
            users_table.insert()
            .values(
                email=email,
                full_name=full_name,
                role=role.value,
                google_sub=google_sub,
                google_refresh_token=google_refresh_token,
            )
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def save(self, user: User) -> User:
        stmt = (
            users_table.update()
            .where(users_table.c.id == user.id)
            .values(**user_to_dict(user))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

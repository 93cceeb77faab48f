"""PostgreSQL repository implementations."""

from flowdeck.persistence.repository.user import PostgresUserRepository

__all__ = ["PostgresUserRepository"]

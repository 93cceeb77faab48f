"""Mock persistence providers for testing."""

from dishka import Scope, provide

from flowdeck.domain.repository import UserRepository
from flowdeck.persistence.repository.inmemory import InMemoryUserRepository
from flowdeck.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so that users created in one request are visible to the
    next, as they would be in the database. Each container gets its own.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

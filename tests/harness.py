"""Test harness for use case and E2E tests.

Settings are loaded from environment variables; see conftest.py for the
Google configuration every test runs with.
"""

import pytest_asyncio

from flowdeck.config import GoogleOAuthSettings
from flowdeck.util.di import Component
from tests.di import build_test_container

TEST_CLIENT_ID = "test-client-id"
TEST_CLIENT_SECRET = "test-client-secret"
TEST_REDIRECT_URI = "http://localhost:8081/oauth/google/callback"
TEST_CALENDAR_REDIRECT_URI = "http://localhost:8081/oauth/google/calendar/callback"


def make_google_settings(**overrides) -> GoogleOAuthSettings:
    """Google settings with test credentials, overridable per test."""
    values = {
        "client_id": TEST_CLIENT_ID,
        "client_secret": TEST_CLIENT_SECRET,
        "redirect_uri": TEST_REDIRECT_URI,
        "calendar_redirect_uri": TEST_CALENDAR_REDIRECT_URI,
    }
    values.update(overrides)
    return GoogleOAuthSettings(**values)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_start_login(unit_env):
            use_case = await unit_env.get(StartGoogleLoginUseCase)
            response = await use_case.execute()
            assert response.state
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment

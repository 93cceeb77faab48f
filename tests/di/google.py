"""Mock Google providers for testing."""

from dishka import Scope, provide

from flowdeck.adapter.google.calendar import (
    GoogleCalendarClient,
    MockGoogleCalendarClient,
)
from flowdeck.adapter.google.client import GoogleOAuthClient, MockGoogleOAuthClient
from flowdeck.config import GoogleOAuthSettings
from flowdeck.util.di.infrastructure.google import GoogleProvider


class MockGoogleProvider(GoogleProvider):
    """Mock Google provider using mock OAuth and Calendar clients."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_google_oauth_client(
        self, google_settings: GoogleOAuthSettings
    ) -> GoogleOAuthClient:
        """Provide mock Google OAuth client issuing tokens for our client id."""
        return MockGoogleOAuthClient(client_id=google_settings.client_id)

    @provide(scope=Scope.APP)
    def get_google_calendar_client(self) -> GoogleCalendarClient:
        """Provide mock Google Calendar client."""
        return MockGoogleCalendarClient()

"""Google infrastructure providers."""

from dishka import Scope, provide

from flowdeck.adapter.google.calendar import (
    GoogleCalendarClient,
    RealGoogleCalendarClient,
)
from flowdeck.adapter.google.client import GoogleOAuthClient, RealGoogleOAuthClient
from flowdeck.config import GoogleOAuthSettings
from flowdeck.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(
        self, google_settings: GoogleOAuthSettings
    ) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Missing credentials are not an error here: the OAuth service
        rejects each flow with a configuration error instead, so the
        rest of the API still starts.
        """
        return RealGoogleOAuthClient(
            client_id=google_settings.client_id,
            client_secret=google_settings.client_secret,
            token_uri=google_settings.token_uri,
            token_info_uri=google_settings.token_info_uri,
            timeout=google_settings.http_timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_google_calendar_client(
        self, google_settings: GoogleOAuthSettings
    ) -> GoogleCalendarClient:
        """Provide Google Calendar client."""
        return RealGoogleCalendarClient(
            events_uri=google_settings.calendar_events_uri,
            timeout=google_settings.http_timeout_seconds,
        )

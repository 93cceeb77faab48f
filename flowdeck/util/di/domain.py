"""Domain layer DI providers."""

from dishka import Scope, provide

from flowdeck.adapter.google.calendar import GoogleCalendarClient
from flowdeck.adapter.google.client import GoogleOAuthClient
from flowdeck.domain.service.state_store import OAuthStateStore
from flowdeck.config import GoogleOAuthSettings
from flowdeck.domain.repository import UserRepository
from flowdeck.domain.service import (
    CalendarSyncService,
    OAuthService,
    UserDirectoryService,
)
from flowdeck.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The state store they share is APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_state_store(self, google_settings: GoogleOAuthSettings) -> OAuthStateStore:
        """Provide the process-wide store of pending authorization flows."""
        return OAuthStateStore(ttl_seconds=google_settings.state_ttl_seconds)

    @provide
    def get_oauth_service(
        self,
        google_settings: GoogleOAuthSettings,
        state_store: OAuthStateStore,
        google_oauth_client: GoogleOAuthClient,
    ) -> OAuthService:
        """Provide OAuth domain service."""
        return OAuthService(
            settings=google_settings,
            state_store=state_store,
            identity_provider=google_oauth_client,
        )

    @provide
    def get_user_directory_service(
        self, user_repository: UserRepository
    ) -> UserDirectoryService:
        """Provide user directory domain service."""
        return UserDirectoryService(user_repository=user_repository)

    @provide
    def get_calendar_sync_service(
        self,
        user_directory: UserDirectoryService,
        google_oauth_client: GoogleOAuthClient,
        google_calendar_client: GoogleCalendarClient,
    ) -> CalendarSyncService:
        """Provide calendar sync domain service."""
        return CalendarSyncService(
            user_directory=user_directory,
            identity_provider=google_oauth_client,
            event_sink=google_calendar_client,
        )

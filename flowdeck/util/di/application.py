"""Application layer DI providers."""

from dishka import Scope, provide

from flowdeck.application.usecase.auth import (
    GoogleLoginUseCase,
    StartGoogleLoginUseCase,
)
from flowdeck.application.usecase.calendar import (
    CompleteCalendarLinkUseCase,
    StartCalendarLinkUseCase,
    SyncTaskEventUseCase,
)
from flowdeck.domain.service import (
    CalendarSyncService,
    OAuthService,
    UserDirectoryService,
)
from flowdeck.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Login use cases
    @provide(scope=Scope.REQUEST)
    def get_start_google_login_use_case(
        self, oauth_service: OAuthService
    ) -> StartGoogleLoginUseCase:
        """Provide start login use case."""
        return StartGoogleLoginUseCase(oauth_service=oauth_service)

    @provide(scope=Scope.REQUEST)
    def get_google_login_use_case(
        self, oauth_service: OAuthService, user_directory: UserDirectoryService
    ) -> GoogleLoginUseCase:
        """Provide login callback use case."""
        return GoogleLoginUseCase(
            oauth_service=oauth_service, user_directory=user_directory
        )

    # Calendar use cases
    @provide(scope=Scope.REQUEST)
    def get_start_calendar_link_use_case(
        self, oauth_service: OAuthService
    ) -> StartCalendarLinkUseCase:
        """Provide start calendar link use case."""
        return StartCalendarLinkUseCase(oauth_service=oauth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_calendar_link_use_case(
        self, oauth_service: OAuthService, user_directory: UserDirectoryService
    ) -> CompleteCalendarLinkUseCase:
        """Provide calendar link callback use case."""
        return CompleteCalendarLinkUseCase(
            oauth_service=oauth_service, user_directory=user_directory
        )

    @provide(scope=Scope.REQUEST)
    def get_sync_task_event_use_case(
        self, calendar_sync_service: CalendarSyncService
    ) -> SyncTaskEventUseCase:
        """Provide sync task event use case."""
        return SyncTaskEventUseCase(calendar_sync_service=calendar_sync_service)

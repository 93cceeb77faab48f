"""Calendar sync domain service."""

from datetime import date, timedelta
from typing import Any

import logfire

from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError, UpstreamError
from flowdeck.domain.value import CalendarSyncOutcome, UserId

from .base import Service
from .oauth_service import GoogleIdentityProvider
from .user_service import UserDirectoryService

PLACEHOLDER_NAME = "Task"
EVENT_DESCRIPTION = "Task assigned from FlowDeck"


class CalendarEventSink:
    """Destination for calendar events (Google Calendar in production)."""

    async def create_event(self, access_token: str, event: dict[str, Any]) -> None:
        """Create an event in the user's primary calendar.

        Raises:
            UpstreamError: On any non-success response
        """
        raise NotImplementedError


def _or_placeholder(value: str | None) -> str:
    return PLACEHOLDER_NAME if value is None or not value.strip() else value


def build_task_event(team_name: str | None, task_name: str | None, day: date) -> dict:
    """Build an all-day event covering ``[day, day + 1)``."""
    return {
        "summary": f"[{_or_placeholder(team_name)}] {_or_placeholder(task_name)}",
        "description": EVENT_DESCRIPTION,
        "start": {"date": day.isoformat()},
        "end": {"date": (day + timedelta(days=1)).isoformat()},
    }


class CalendarSyncService(Service):
    """Writes task events to a user's linked Google Calendar."""

    def __init__(
        self,
        user_directory: UserDirectoryService,
        identity_provider: GoogleIdentityProvider,
        event_sink: CalendarEventSink,
    ) -> None:
        """Initialize calendar sync service.

        Args:
            user_directory: Source of the stored calendar refresh token
            identity_provider: Mints access tokens from refresh tokens
            event_sink: Calendar event API
        """
        self.user_directory = user_directory
        self.identity_provider = identity_provider
        self.event_sink = event_sink

    async def create_or_update_task_event(
        self,
        user_id: UserId,
        team_name: str | None,
        task_name: str | None,
        day: date | None,
    ) -> None:
        """Create an all-day calendar event for a task.

        Args:
            user_id: Owner of the linked calendar
            team_name: Team shown in the summary
            task_name: Task shown in the summary
            day: Event date

        Raises:
            OAuthFlowError: INVALID_REQUEST without a date, NOT_LINKED when
                no calendar token is stored, UPSTREAM_FAILURE when Google
                rejects the refresh or the event
        """
        if day is None:
            raise OAuthFlowError(OAuthErrorKind.INVALID_REQUEST, "Date is required")

        with logfire.span("calendar_sync.create_task_event", user_id=user_id):
            refresh_token = await self.user_directory.get_calendar_refresh_token(
                user_id
            )
            if not refresh_token:
                raise OAuthFlowError(
                    OAuthErrorKind.NOT_LINKED, "Google Calendar account not linked"
                )

            try:
                access_token = await self.identity_provider.refresh_access_token(
                    refresh_token
                )
            except UpstreamError as e:
                logfire.error("Calendar access token refresh failed", error=str(e))
                raise OAuthFlowError(
                    OAuthErrorKind.UPSTREAM_FAILURE,
                    "Could not refresh the Google Calendar access_token",
                ) from e

            event = build_task_event(team_name, task_name, day)
            try:
                await self.event_sink.create_event(access_token, event)
            except UpstreamError as e:
                logfire.error("Calendar event creation failed", error=str(e))
                raise OAuthFlowError(
                    OAuthErrorKind.UPSTREAM_FAILURE,
                    "Could not create the event in Google Calendar",
                ) from e

            logfire.info("Calendar event created", user_id=user_id, date=str(day))

    async def try_create_or_update_task_event(
        self,
        user_id: UserId,
        team_name: str | None,
        task_name: str | None,
        day: date | None,
    ) -> CalendarSyncOutcome:
        """Best-effort variant for callers that must not be blocked.

        Flow failures are reported in the outcome and as a warning event
        instead of being raised.
        """
        try:
            await self.create_or_update_task_event(user_id, team_name, task_name, day)
        except OAuthFlowError as e:
            logfire.warn(
                "Calendar sync skipped",
                user_id=user_id,
                kind=e.kind.value,
                reason=e.message,
            )
            return CalendarSyncOutcome(synced=False, warning=f"{e.kind.value}: {e.message}")
        return CalendarSyncOutcome(synced=True)

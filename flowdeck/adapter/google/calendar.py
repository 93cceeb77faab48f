"""Google Calendar events client."""

from typing import Any

import httpx
import logfire

from flowdeck.domain.service.calendar_service import CalendarEventSink

from .client import GoogleAPIError


class GoogleCalendarClient(CalendarEventSink):
    """Base class for Google Calendar clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleCalendarClient(GoogleCalendarClient):
    """Creates events in the user's primary Google Calendar."""

    def __init__(self, events_uri: str, timeout: float | None = None) -> None:
        """Initialize Google Calendar client.

        Args:
            events_uri: Events collection of the primary calendar
            timeout: Seconds per request, None for no timeout
        """
        self.events_uri = events_uri
        self.timeout = timeout

    async def create_event(self, access_token: str, event: dict[str, Any]) -> None:
        """Insert an event.

        Args:
            access_token: Short-lived calendar access token
            event: Event resource (summary, description, start, end)

        Raises:
            GoogleAPIError: If Google does not answer with a 2xx
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.events_uri,
                    json=event,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Google Calendar HTTP error", error=str(e))
            raise GoogleAPIError(f"HTTP error creating calendar event: {e}") from e

        if not response.is_success:
            logfire.error(
                "Google Calendar event creation failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleAPIError(
                f"Calendar event creation failed: {response.status_code}",
                status_code=response.status_code,
            )


class MockGoogleCalendarClient(GoogleCalendarClient):
    """Mock Google Calendar client for testing.

    Records every event it is given. Set ``fail`` to make the next calls
    behave like a Google error response.
    """

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.fail = False

    async def create_event(self, access_token: str, event: dict[str, Any]) -> None:
        if self.fail:
            raise GoogleAPIError("Calendar event creation failed: 500", status_code=500)
        self.events.append((access_token, event))

"""Google Calendar link use cases."""

import re

import logfire
from pydantic import Field

from flowdeck.application.usecase.auth.start_login import OAuthStartResponse
from flowdeck.application.usecase.base import BaseUseCase, CamelModel
from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError
from flowdeck.domain.service import OAuthService, UserDirectoryService
from flowdeck.domain.value import MAX_USER_ID, OAuthFlow, UserId

# ASCII digits only with an optional sign, at most as many digits as MAX_USER_ID
USER_ID_PATTERN = re.compile(r"[+-]?[0-9]{1,19}")


class StartCalendarLinkRequest(CamelModel):
    """Start calendar link request."""

    user_id: int | None = Field(default=None, gt=0, le=MAX_USER_ID)


class CalendarCallbackRequest(CamelModel):
    """Calendar link callback parameters from Google."""

    code: str | None = None
    state: str | None = None


class CalendarLinkResponse(CamelModel):
    """Calendar link response."""

    user_id: int
    calendar_linked: bool = True


class StartCalendarLinkUseCase(BaseUseCase):
    """Use case for starting the Google Calendar consent flow for a user."""

    def __init__(self, oauth_service: OAuthService) -> None:
        self.oauth_service = oauth_service

    async def execute(self, request: StartCalendarLinkRequest) -> OAuthStartResponse:
        """Build the authorization URL for calendar access.

        The user id travels in the state entry so the callback knows whose
        calendar was linked.

        Raises:
            OAuthFlowError: INVALID_REQUEST without a user id, CONFIGURATION
                if the calendar flow is not configured
        """
        if request.user_id is None:
            raise OAuthFlowError(OAuthErrorKind.INVALID_REQUEST, "userId is required")

        authorization_url, state = self.oauth_service.begin(
            OAuthFlow.CALENDAR, meta=str(request.user_id)
        )
        return OAuthStartResponse(authorization_url=authorization_url, state=state)


class CompleteCalendarLinkUseCase(BaseUseCase):
    """Use case for storing the calendar refresh token after consent."""

    def __init__(
        self,
        oauth_service: OAuthService,
        user_directory: UserDirectoryService,
    ) -> None:
        """Initialize calendar link callback use case.

        Args:
            oauth_service: OAuth domain service
            user_directory: User directory domain service
        """
        self.oauth_service = oauth_service
        self.user_directory = user_directory

    async def execute(self, request: CalendarCallbackRequest) -> CalendarLinkResponse:
        """Execute the calendar link callback.

        Raises:
            OAuthFlowError: INVALID_STATE, INVALID_USER_ID,
                UPSTREAM_FAILURE, MISSING_REFRESH_TOKEN or USER_NOT_FOUND
        """
        try:
            return await self._link(request)
        except OAuthFlowError as e:
            logfire.warn(
                "OAuth flow failed",
                flow=OAuthFlow.CALENDAR.value,
                step="FAILED",
                kind=e.kind.value,
            )
            raise

    async def _link(self, request: CalendarCallbackRequest) -> CalendarLinkResponse:
        self.oauth_service.ensure_configured(OAuthFlow.CALENDAR)
        if not request.code:
            raise OAuthFlowError(OAuthErrorKind.INVALID_REQUEST, "code is required")

        entry = self.oauth_service.consume_state(OAuthFlow.CALENDAR, request.state)
        user_id = self._parse_user_id(entry.meta)

        tokens = await self.oauth_service.exchange_code(
            OAuthFlow.CALENDAR, request.code, entry.code_verifier
        )
        if not tokens.has_refresh_token:
            raise OAuthFlowError(
                OAuthErrorKind.MISSING_REFRESH_TOKEN,
                "Google did not return a refresh_token. Revoke the app's access "
                "in your Google account and link the calendar again so consent "
                "is requested (prompt=consent).",
            )

        # has_refresh_token guarantees a non-blank token
        await self.user_directory.update_calendar_refresh_token(
            user_id, tokens.refresh_token or ""
        )

        logfire.info(
            "Google Calendar linked",
            flow=OAuthFlow.CALENDAR.value,
            step="DONE",
            user_id=user_id,
        )
        return CalendarLinkResponse(user_id=user_id, calendar_linked=True)

    def _parse_user_id(self, meta: str | None) -> UserId:
        if (
            meta is None
            or not USER_ID_PATTERN.fullmatch(meta)
            or not 0 < int(meta) <= MAX_USER_ID
        ):
            raise OAuthFlowError(
                OAuthErrorKind.INVALID_USER_ID, "Invalid userId in state"
            )
        return UserId(int(meta))

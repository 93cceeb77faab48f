"""Google OAuth routes: sign-in and calendar linking."""

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from fastapi.responses import RedirectResponse

from flowdeck.application.usecase.auth import (
    GoogleLoginRequest,
    GoogleLoginResponse,
    GoogleLoginUseCase,
    OAuthStartResponse,
    StartGoogleLoginUseCase,
)
from flowdeck.application.usecase.calendar import (
    CalendarCallbackRequest,
    CalendarLinkResponse,
    CompleteCalendarLinkUseCase,
    StartCalendarLinkRequest,
    StartCalendarLinkUseCase,
)
from flowdeck.config import GoogleOAuthSettings
from flowdeck.domain.value import MAX_USER_ID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth/google", tags=["oauth"], route_class=DishkaRoute)


def with_query(url: str, params: dict[str, str]) -> str:
    """Append query parameters to a URL, keeping any it already has."""
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _redirect_target(redirect: str | None, default: str) -> str | None:
    if redirect and redirect.strip():
        return redirect
    return default or None


@router.get("/start", response_model=OAuthStartResponse)
async def start_login(
    use_case: FromDishka[StartGoogleLoginUseCase],
) -> OAuthStartResponse:
    """Start Google sign-in.

    Returns the authorization URL the browser should be sent to, and the
    state token that Google will echo back.
    """
    return await use_case.execute()


@router.get("/callback", response_model=None)
async def login_callback(
    use_case: FromDishka[GoogleLoginUseCase],
    google_settings: FromDishka[GoogleOAuthSettings],
    code: str | None = None,
    state: str | None = None,
    redirect: str | None = None,
) -> RedirectResponse | GoogleLoginResponse:
    """Complete Google sign-in.

    Redirects to ``redirect`` (or the configured frontend page) with the
    user's profile in the query string. Without any redirect target the
    result is returned as JSON.

    Example:
        GET /oauth/google/callback?code=4/0Ab...&state=Qm9...

        Redirects to:
        http://localhost:4200/oauth/google/callback?userId=7&email=...
    """
    result = await use_case.execute(GoogleLoginRequest(code=code, state=state))

    target = _redirect_target(redirect, google_settings.frontend_redirect)
    if target is None:
        return result

    user = result.user
    logger.info(f"Login callback redirecting user {user.id}")
    return RedirectResponse(
        url=with_query(
            target,
            {
                "userId": str(user.id),
                "email": user.email,
                "fullName": user.full_name,
                "role": user.role.value,
                "createdAt": user.created_at.isoformat(),
                "created": _flag(result.created),
                "refreshTokenStored": _flag(result.refresh_token_stored),
            },
        ),
        status_code=302,
    )


@router.get(
    "/calendar/start",
    response_model=OAuthStartResponse,
)
async def start_calendar_link(
    use_case: FromDishka[StartCalendarLinkUseCase],
    user_id: int | None = Query(default=None, alias="userId", gt=0, le=MAX_USER_ID),
) -> OAuthStartResponse:
    """Start the Google Calendar consent flow for a user."""
    return await use_case.execute(StartCalendarLinkRequest(user_id=user_id))


@router.get("/calendar/callback", response_model=None)
async def calendar_callback(
    use_case: FromDishka[CompleteCalendarLinkUseCase],
    google_settings: FromDishka[GoogleOAuthSettings],
    code: str | None = None,
    state: str | None = None,
    redirect: str | None = None,
) -> RedirectResponse | CalendarLinkResponse:
    """Store the calendar refresh token and send the user back to the app."""
    result = await use_case.execute(CalendarCallbackRequest(code=code, state=state))

    target = _redirect_target(redirect, google_settings.calendar_frontend_redirect)
    if target is None:
        return result

    return RedirectResponse(
        url=with_query(
            target,
            {"calendarLinked": _flag(result.calendar_linked), "userId": str(result.user_id)},
        ),
        status_code=302,
    )

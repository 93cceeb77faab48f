"""Interface layer error translation.

Every OAuthFlowError kind maps to exactly one HTTP status.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

import logfire

from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError

STATUS_BY_KIND: dict[OAuthErrorKind, int] = {
    OAuthErrorKind.CONFIGURATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    OAuthErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.MISSING_ID_TOKEN: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.MISSING_EMAIL: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.MISSING_REFRESH_TOKEN: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.NOT_LINKED: status.HTTP_400_BAD_REQUEST,
    OAuthErrorKind.AUDIENCE_MISMATCH: status.HTTP_401_UNAUTHORIZED,
    OAuthErrorKind.EMAIL_NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    OAuthErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OAuthErrorKind.UPSTREAM_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


def status_for(kind: OAuthErrorKind) -> int:
    return STATUS_BY_KIND[kind]


async def oauth_flow_error_handler(request: Request, exc: OAuthFlowError) -> JSONResponse:
    status_code = status_for(exc.kind)
    logfire.info(
        "OAuth flow error response",
        path=request.url.path,
        kind=exc.kind.value,
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the OAuthFlowError handler on the app."""
    app.add_exception_handler(OAuthFlowError, oauth_flow_error_handler)

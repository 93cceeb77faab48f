"""Google OAuth 2.0 client implementation.

Talks to Google's token and token-info endpoints. The authorization
request itself is a browser redirect and is built by the OAuth service.
"""

from typing import Any

import httpx
import logfire
from pydantic import ValidationError

from flowdeck.adapter.error import ProviderError
from flowdeck.domain.service.oauth_service import GoogleIdentityProvider
from flowdeck.domain.value import GoogleTokenResponse, IdentityClaims


class GoogleAPIError(ProviderError):
    """Google returned an error, an unusable body, or was unreachable."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class GoogleOAuthClient(GoogleIdentityProvider):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client for the authorization code + PKCE flow.

    Client credentials are sent in the form body, as Google expects for
    web-server applications.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_uri: str,
        token_info_uri: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            token_uri: Token endpoint
            token_info_uri: Token-info endpoint for id_token inspection
            timeout: Seconds per request, None for no timeout
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_uri = token_uri
        self.token_info_uri = token_info_uri
        self.timeout = timeout

    async def exchange_code(
        self, code: str, code_verifier: str, redirect_uri: str
    ) -> GoogleTokenResponse:
        """Exchange an authorization code for tokens.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier saved when the flow started
            redirect_uri: Must equal the one sent in the authorization request

        Returns:
            Parsed token response

        Raises:
            GoogleAPIError: If the exchange fails
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code_verifier": code_verifier,
        }
        body = await self._post_form(data, "token exchange")

        try:
            return GoogleTokenResponse.model_validate(body)
        except ValidationError as e:
            logfire.error("Google token response missing access_token")
            raise GoogleAPIError("Token exchange returned no access_token") from e

    async def refresh_access_token(self, refresh_token: str) -> str:
        """Mint a fresh access token from a stored refresh token.

        Args:
            refresh_token: Refresh token from an earlier consent

        Returns:
            Access token

        Raises:
            GoogleAPIError: If the refresh fails or returns no access_token
        """
        data = {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        body = await self._post_form(data, "token refresh")

        access_token = body.get("access_token")
        if not access_token:
            logfire.error("Google token refresh returned no access_token")
            raise GoogleAPIError("Token refresh returned no access_token")
        return access_token

    async def fetch_token_info(self, id_token: str) -> IdentityClaims:
        """Ask Google to decode and check an id_token.

        Google verifies the signature and expiry; the caller still has to
        check the audience.

        Args:
            id_token: id_token from the token response

        Returns:
            Claims relevant to sign-in

        Raises:
            GoogleAPIError: If Google rejects the token or the request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.token_info_uri,
                    params={"id_token": id_token},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Google token info HTTP error", error=str(e))
            raise GoogleAPIError(f"HTTP error during token info: {e}") from e

        body = self._parse_body(response, "token info")
        return IdentityClaims(
            audience=body.get("aud"),
            email=body.get("email"),
            email_verified=body.get("email_verified"),
            name=body.get("name"),
            subject=body.get("sub"),
        )

    async def _post_form(self, data: dict[str, str], operation: str) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_uri,
                    data=data,
                    headers={
                        "Content-Type": "application/x-www-form-urlencoded",
                        "Accept": "application/json",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(f"Google {operation} HTTP error", error=str(e))
            raise GoogleAPIError(f"HTTP error during {operation}: {e}") from e

        return self._parse_body(response, operation)

    def _parse_body(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        # Error bodies from the token endpoint never contain tokens, so
        # they are safe to log.
        if not response.is_success:
            logfire.error(
                f"Google {operation} failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleAPIError(
                f"Google {operation} failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise GoogleAPIError(
                f"Google {operation} returned invalid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict) or not body:
            raise GoogleAPIError(
                f"Google {operation} returned an empty body",
                status_code=response.status_code,
            )
        return body


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls. A few
    magic values drive the failure paths:

    - code ``"invalid"``: the exchange is rejected
    - code ``"no-refresh"``: the exchange returns no refresh_token
    - refresh token ``"revoked"``: the refresh is rejected

    The token-info audience is the configured client id, so the audience
    check passes unless a test changes ``audience``.
    """

    INVALID_CODE = "invalid"
    NO_REFRESH_CODE = "no-refresh"
    REVOKED_REFRESH_TOKEN = "revoked"

    def __init__(self, client_id: str = "mock-client-id"):
        """Initialize mock client without real OAuth configuration."""
        self.client_id = client_id
        self.audience: str | None = client_id
        self.email: str | None = "mock.user@example.com"
        self.email_verified = True
        self.name: str | None = "Mock User"
        self.subject: str | None = "mock-google-sub"
        self.id_token: str | None = "mock-id-token"
        self.exchanges: list[tuple[str, str, str]] = []
        self.refreshes: list[str] = []

    async def exchange_code(
        self, code: str, code_verifier: str, redirect_uri: str
    ) -> GoogleTokenResponse:
        self.exchanges.append((code, code_verifier, redirect_uri))
        if code == self.INVALID_CODE:
            raise GoogleAPIError("Token exchange failed: 400", status_code=400)

        refresh_token = None if code == self.NO_REFRESH_CODE else f"mock-refresh-{code}"
        return GoogleTokenResponse(
            access_token=f"mock-access-{code}",
            refresh_token=refresh_token,
            id_token=self.id_token,
            expires_in=3599,
            token_type="Bearer",
        )

    async def refresh_access_token(self, refresh_token: str) -> str:
        self.refreshes.append(refresh_token)
        if refresh_token == self.REVOKED_REFRESH_TOKEN:
            raise GoogleAPIError("Google token refresh failed: 400", status_code=400)
        return "mock-calendar-access-token"

    async def fetch_token_info(self, id_token: str) -> IdentityClaims:
        return IdentityClaims(
            audience=self.audience,
            email=self.email,
            email_verified=self.email_verified,
            name=self.name,
            subject=self.subject,
        )

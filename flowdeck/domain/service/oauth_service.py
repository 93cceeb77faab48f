"""Google OAuth domain service.

Holds the mechanics shared by the login and calendar-link flows: PKCE
generation, state correlation, authorization URL construction, code
exchange and identity validation. The use cases compose these steps.
"""

import secrets
from collections.abc import Callable
from urllib.parse import urlencode

import logfire

from flowdeck.config import GoogleOAuthSettings
from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError, UpstreamError
from flowdeck.domain.value import (
    GoogleTokenResponse,
    IdentityClaims,
    OAuthFlow,
    StateEntry,
)

from .base import Service
from .pkce import generate_pkce_pair
from .state_store import OAuthStateStore


class GoogleIdentityProvider:
    """Google token and token-info endpoints, as the domain sees them."""

    async def exchange_code(
        self, code: str, code_verifier: str, redirect_uri: str
    ) -> GoogleTokenResponse:
        """Exchange an authorization code (plus PKCE verifier) for tokens.

        Raises:
            UpstreamError: On any non-success response
        """
        raise NotImplementedError

    async def refresh_access_token(self, refresh_token: str) -> str:
        """Mint a new access token from a refresh token.

        Raises:
            UpstreamError: On any non-success response
        """
        raise NotImplementedError

    async def fetch_token_info(self, id_token: str) -> IdentityClaims:
        """Fetch the claims of an id_token from the token-info endpoint.

        Raises:
            UpstreamError: On any non-success response
        """
        raise NotImplementedError


class OAuthService(Service):
    """Domain service for the Google authorization code + PKCE flow."""

    def __init__(
        self,
        settings: GoogleOAuthSettings,
        state_store: OAuthStateStore,
        identity_provider: GoogleIdentityProvider,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        """Initialize OAuth service.

        Args:
            settings: Google OAuth configuration
            state_store: Shared store of pending flows
            identity_provider: Google token/token-info client
            random_bytes: Randomness for PKCE verifiers; tests may pass a
                seeded generator
        """
        self.settings = settings
        self.state_store = state_store
        self.identity_provider = identity_provider
        self.random_bytes = random_bytes

    def redirect_uri_for(self, flow: OAuthFlow) -> str:
        if flow is OAuthFlow.CALENDAR:
            return self.settings.calendar_redirect_uri
        return self.settings.redirect_uri

    def scope_for(self, flow: OAuthFlow) -> str:
        if flow is OAuthFlow.CALENDAR:
            return self.settings.calendar_scope
        return self.settings.scope

    def ensure_configured(self, flow: OAuthFlow) -> None:
        """Fail if client credentials or the flow's redirect URI are missing.

        Raises:
            OAuthFlowError: CONFIGURATION
        """
        if flow is OAuthFlow.CALENDAR:
            configured = self.settings.calendar_configured()
        else:
            configured = self.settings.login_configured()

        if not configured:
            logfire.error("Google OAuth not configured", flow=flow.value)
            raise OAuthFlowError(
                OAuthErrorKind.CONFIGURATION,
                f"Google OAuth not configured for {flow.value} flow",
            )

    def begin(self, flow: OAuthFlow, meta: str | None = None) -> tuple[str, str]:
        """Start an authorization flow.

        Generates a PKCE pair, saves the verifier under a new state token
        and builds the Google authorization URL.

        Args:
            flow: Which flow is starting
            meta: Opaque data to get back at callback time

        Returns:
            Tuple of (authorization_url, state)
        """
        self.ensure_configured(flow)

        pkce = generate_pkce_pair(self.random_bytes)
        state = self.state_store.save(pkce.code_verifier, meta)

        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.redirect_uri_for(flow),
            "response_type": "code",
            "scope": self.scope_for(flow),
            "access_type": "offline",
            "prompt": "consent",
            "include_granted_scopes": "true",
            "state": state,
            "code_challenge_method": "S256",
            "code_challenge": pkce.code_challenge,
        }
        authorization_url = f"{self.settings.authorization_uri}?{urlencode(params)}"

        logfire.info(
            "OAuth flow started",
            flow=flow.value,
            step="STARTED",
            verifier_length=len(pkce.code_verifier),
            challenge_length=len(pkce.code_challenge),
            pending_flows=len(self.state_store),
        )
        return authorization_url, state

    def consume_state(self, flow: OAuthFlow, state: str | None) -> StateEntry:
        """Consume the state entry for a callback.

        Raises:
            OAuthFlowError: INVALID_STATE for unknown, expired or reused state
        """
        entry = self.state_store.consume(state)
        if entry is None:
            logfire.warn("OAuth callback with invalid state", flow=flow.value)
            raise OAuthFlowError(
                OAuthErrorKind.INVALID_STATE, "Invalid or expired state"
            )
        return entry

    async def exchange_code(
        self, flow: OAuthFlow, code: str, code_verifier: str
    ) -> GoogleTokenResponse:
        """Exchange the authorization code using the flow's redirect URI.

        Never retried: the code is single-use.

        Raises:
            OAuthFlowError: UPSTREAM_FAILURE if Google rejects the exchange
        """
        try:
            tokens = await self.identity_provider.exchange_code(
                code, code_verifier, self.redirect_uri_for(flow)
            )
        except UpstreamError as e:
            logfire.error(
                "Authorization code exchange failed", flow=flow.value, error=str(e)
            )
            raise OAuthFlowError(
                OAuthErrorKind.UPSTREAM_FAILURE, "Failed to exchange authorization code"
            ) from e

        logfire.info(
            "Authorization code exchanged",
            flow=flow.value,
            step="CODE_EXCHANGED",
            has_refresh_token=tokens.has_refresh_token,
            has_id_token=bool(tokens.id_token),
        )
        return tokens

    async def validate_identity(self, id_token: str | None) -> IdentityClaims:
        """Fetch and validate the claims of an id_token.

        Checks, in order: token present, audience equals our client id,
        email present, and (only when configured) email verified.

        Raises:
            OAuthFlowError: MISSING_ID_TOKEN, UPSTREAM_FAILURE,
                AUDIENCE_MISMATCH, MISSING_EMAIL or EMAIL_NOT_VERIFIED
        """
        if not id_token or not id_token.strip():
            raise OAuthFlowError(
                OAuthErrorKind.MISSING_ID_TOKEN, "id_token missing in response"
            )

        try:
            claims = await self.identity_provider.fetch_token_info(id_token)
        except UpstreamError as e:
            logfire.error("id_token validation request failed", error=str(e))
            raise OAuthFlowError(
                OAuthErrorKind.UPSTREAM_FAILURE, "Failed to validate id_token"
            ) from e

        if claims.audience != self.settings.client_id:
            logfire.warn(
                "id_token audience mismatch, possible token substitution",
                audience=claims.audience,
            )
            raise OAuthFlowError(
                OAuthErrorKind.AUDIENCE_MISMATCH, "Invalid audience in id_token"
            )

        if not claims.email or not claims.email.strip():
            raise OAuthFlowError(
                OAuthErrorKind.MISSING_EMAIL, "Email not present in Google profile"
            )

        if not claims.email_verified:
            if self.settings.require_verified_email:
                raise OAuthFlowError(
                    OAuthErrorKind.EMAIL_NOT_VERIFIED, "Google email is not verified"
                )
            logfire.warn("Accepting unverified Google email", subject=claims.subject)

        logfire.info("id_token validated", step="IDENTITY_VALIDATED")
        return claims

"""Google login callback use case."""

from datetime import datetime

import logfire

from flowdeck.application.usecase.base import BaseUseCase, CamelModel
from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError
from flowdeck.domain.model import User
from flowdeck.domain.service import OAuthService, UserDirectoryService
from flowdeck.domain.value import GoogleProfile, OAuthFlow, UserRole


class GoogleLoginRequest(CamelModel):
    """Login request from the Google callback.

    These parameters come from Google in the callback URL.
    """

    code: str | None = None
    state: str | None = None


class UserView(CamelModel):
    """Public view of a user."""

    id: int
    email: str
    full_name: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            created_at=user.created_at,
        )


class GoogleLoginResponse(CamelModel):
    """Login response."""

    user: UserView
    created: bool
    refresh_token_stored: bool


class GoogleLoginUseCase(BaseUseCase):
    """Use case for completing Google sign-in."""

    def __init__(
        self,
        oauth_service: OAuthService,
        user_directory: UserDirectoryService,
    ) -> None:
        """Initialize login use case.

        Args:
            oauth_service: OAuth domain service
            user_directory: User directory domain service
        """
        self.oauth_service = oauth_service
        self.user_directory = user_directory

    async def execute(self, request: GoogleLoginRequest) -> GoogleLoginResponse:
        """Execute the login callback.

        Steps:
        1. Consume the state and recover the PKCE verifier
        2. Exchange the code for tokens
        3. Validate the id_token claims
        4. Find or create the user for the email

        Args:
            request: Callback parameters

        Returns:
            The user, whether it was just created, and whether a refresh
            token was stored

        Raises:
            OAuthFlowError: On any failed step
        """
        try:
            return await self._login(request)
        except OAuthFlowError as e:
            logfire.warn(
                "OAuth flow failed",
                flow=OAuthFlow.LOGIN.value,
                step="FAILED",
                kind=e.kind.value,
            )
            raise

    async def _login(self, request: GoogleLoginRequest) -> GoogleLoginResponse:
        self.oauth_service.ensure_configured(OAuthFlow.LOGIN)
        if not request.code:
            raise OAuthFlowError(OAuthErrorKind.INVALID_REQUEST, "code is required")

        entry = self.oauth_service.consume_state(OAuthFlow.LOGIN, request.state)
        tokens = await self.oauth_service.exchange_code(
            OAuthFlow.LOGIN, request.code, entry.code_verifier
        )
        claims = await self.oauth_service.validate_identity(tokens.id_token)

        # validate_identity guarantees a non-blank email
        email = claims.email or ""
        full_name = claims.name if claims.name and claims.name.strip() else email

        existed_before = await self.user_directory.find_by_email(email) is not None
        user = await self.user_directory.find_or_create_from_google(
            GoogleProfile(subject=claims.subject, email=email, full_name=full_name),
            tokens.refresh_token,
        )
        logfire.info(
            "Google user resolved",
            flow=OAuthFlow.LOGIN.value,
            step="USER_RESOLVED",
            user_id=user.id,
        )

        logfire.info(
            "Google login completed",
            flow=OAuthFlow.LOGIN.value,
            step="DONE",
            user_id=user.id,
            created=not existed_before,
        )

        return GoogleLoginResponse(
            user=UserView.from_user(user),
            created=not existed_before,
            refresh_token_stored=tokens.has_refresh_token,
        )

"""Start Google login use case."""

from flowdeck.application.usecase.base import CamelModel
from flowdeck.domain.service import OAuthService
from flowdeck.domain.value import OAuthFlow


class OAuthStartResponse(CamelModel):
    """Where to send the browser to continue an authorization flow."""

    authorization_url: str
    state: str


class StartGoogleLoginUseCase:
    """Use case for starting Google sign-in."""

    def __init__(self, oauth_service: OAuthService) -> None:
        """Initialize start login use case.

        Args:
            oauth_service: OAuth domain service
        """
        self.oauth_service = oauth_service

    async def execute(self) -> OAuthStartResponse:
        """Build the Google authorization URL for a new login.

        Raises:
            OAuthFlowError: CONFIGURATION if login is not configured
        """
        authorization_url, state = self.oauth_service.begin(OAuthFlow.LOGIN)
        return OAuthStartResponse(authorization_url=authorization_url, state=state)

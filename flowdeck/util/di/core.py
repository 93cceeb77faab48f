"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from flowdeck.config import GoogleOAuthSettings, Settings
from flowdeck.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_google_settings(self, settings: Settings) -> GoogleOAuthSettings:
        """Provide Google OAuth settings."""
        return settings.google

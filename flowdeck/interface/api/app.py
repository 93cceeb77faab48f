"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flowdeck.config import Settings
from flowdeck.interface.api.routes import calendar, health, oauth
from flowdeck.interface.error import register_error_handlers
from flowdeck.util.di.container import create_container, setup_di
from flowdeck.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is
            built when omitted. Tests pass a container with mocks.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="FlowDeck Auth API",
        description="Google sign-in and Google Calendar linking for FlowDeck",
        version=health.VERSION,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(oauth.router)
    app_instance.include_router(calendar.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()

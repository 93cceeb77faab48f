#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from flowdeck.config import Settings
from flowdeck.util.logging import setup_logging
from flowdeck.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    if not settings.google.login_configured():
        logfire.warn(
            "Google sign-in is not configured; /oauth/google endpoints will fail",
            has_client_id=bool(settings.google.client_id),
            has_client_secret=bool(settings.google.client_secret),
            has_redirect_uri=bool(settings.google.redirect_uri),
        )

    try:
        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "flowdeck.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())

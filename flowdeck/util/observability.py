"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Calendar linked", user_id=user_id)

    with logfire.span("calendar_sync.create_task_event", user_id=user_id):
        ...

Tokens, codes and PKCE verifiers must never be passed as attributes;
log their presence or length instead.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from flowdeck.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is enabled when OBSERVABILITY__SEND_TO_LOGFIRE says so,
    or otherwise when OBSERVABILITY__LOGFIRE_TOKEN is set. Without either,
    events only go to the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "flowdeck-auth",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Query strings are not captured as attributes: the OAuth callbacks carry
    the authorization code there.
    """

    def _map_request_attributes(request, attributes):
        result = {
            k: v for k, v in attributes.items() if k not in ("values", "query")
        }
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries run on the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound calls to Google."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")

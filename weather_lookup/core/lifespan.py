"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from weather_lookup import __version__
from weather_lookup.config import Settings
from weather_lookup.core.context import AppContext
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log upstream requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "Upstream request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log upstream responses with redacted sensitive data."""
    await response.aread()  # Ensure response is read
    log_with_context(
        logger,
        "info",
        "Upstream response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared upstream HTTP client.

    Args:
        settings: Settings providing the upstream read timeout

    Returns:
        Pooled AsyncClient with logging event hooks
    """
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=5.0,  # Connection establishment timeout
            read=settings.upstream_timeout_seconds,
            write=5.0,
            pool=5.0,  # Pool checkout timeout
        ),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,  # How long to keep idle connections
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Builds the AppContext from the settings the factory placed on
    ``app.state.settings``. Exceptions after yield are re-raised so cleanup
    still runs and the error is not swallowed.
    """
    settings: Settings = app.state.settings
    client = create_http_client(settings)
    app.state.context = AppContext(settings=settings, http_client=client)

    log_with_context(
        logger,
        "info",
        f"Backend server running on port {settings.port}",
        version=__version__,
        environment=settings.environment,
        health_url=f"http://localhost:{settings.port}/health",
        event_type="app_startup",
    )
    if not settings.weather_configured:
        log_with_context(
            logger,
            "warning",
            "OPENWEATHER_API_KEY not configured; weather lookups will fail",
            event_type="config_missing_api_key",
        )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Weather Lookup application",
            event_type="app_shutdown",
        )
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )

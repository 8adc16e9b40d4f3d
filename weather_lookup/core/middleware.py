"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_lookup.config import Settings
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.middleware.logging_middleware import log_requests

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    allow_all = "*" in settings.cors_origins
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware",
        origins=settings.cors_origins,
        event_type="security_config",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        # Browsers reject credentials on a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    app.middleware("http")(log_requests)

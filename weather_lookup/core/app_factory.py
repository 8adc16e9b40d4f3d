"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from weather_lookup import __version__
from weather_lookup.config import Settings, get_settings
from weather_lookup.core.lifespan import lifespan
from weather_lookup.core.middleware import setup_middleware
from weather_lookup.middleware.error_handlers import register_error_handlers
from weather_lookup.routers import health_router, weather_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with; loaded from the environment when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    docs_enabled = not settings.is_production

    app = FastAPI(
        title="Weather Lookup API",
        description="""
        🌤️ **Weather Lookup** - current conditions for any city

        ## Endpoints
        - `/api/weather?city=London` - Simplified current weather from OpenWeatherMap
        - `/health` - Status, timestamp and uptime

        Errors are returned as `{"error": "<message>"}`.
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    # Read by the lifespan to build the AppContext
    app.state.settings = settings

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, prefix="/api/weather", tags=["weather"])

    return app

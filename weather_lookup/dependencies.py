"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Depends, Request

from weather_lookup.config import Settings
from weather_lookup.core.context import AppContext


async def get_app_context(request: Request) -> AppContext:
    """
    Get the application context from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The AppContext built at startup.

    Raises:
        RuntimeError: If the lifespan has not run.
    """
    context: AppContext | None = getattr(request.app.state, "context", None)

    if context is None:
        raise RuntimeError("Application context not initialized. This should never happen.")

    return context


async def get_app_settings(context: AppContext = Depends(get_app_context)) -> Settings:
    """Get the Settings the application was started with."""
    return context.settings


async def get_http_client(context: AppContext = Depends(get_app_context)) -> httpx.AsyncClient:
    """Get the shared upstream HTTP client."""
    return context.http_client

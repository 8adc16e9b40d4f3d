"""Health endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from weather_lookup.core.context import AppContext
from weather_lookup.dependencies import get_app_context
from weather_lookup.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
@router.head("/health", include_in_schema=False)
async def health_check(context: AppContext = Depends(get_app_context)):
    """Basic health check endpoint.

    Always answers 200 while the process is serving; it does not probe the
    weather provider.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        uptime=context.uptime_seconds(),
    )

"""Weather API routes."""

import httpx
from fastapi import APIRouter, Depends, Query

from weather_lookup.config import Settings
from weather_lookup.dependencies import get_app_settings, get_http_client
from weather_lookup.models import ErrorResponse, WeatherQuery, WeatherSummary
from weather_lookup.services import weather_service

router = APIRouter()


@router.get(
    "",
    response_model=WeatherSummary,
    summary="Get current weather for a city",
    description="""
    Looks up current conditions for a city on OpenWeatherMap (metric units)
    and returns a simplified summary.

    Provider errors other than "city not found" keep the provider's status code.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "city": "London",
                        "country": "GB",
                        "temperature": 18.5,
                        "feelsLike": 17.9,
                        "humidity": 72,
                        "pressure": 1012,
                        "windSpeed": 4.1,
                        "description": "light rain",
                        "icon": "10d",
                        "timestamp": "2026-10-18T14:30:00.000000Z",
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "City parameter missing or blank"},
        404: {"model": ErrorResponse, "description": "City not found"},
        500: {"model": ErrorResponse, "description": "Service not configured or provider unreachable"},
    },
)
@router.head("", include_in_schema=False)
async def get_current_weather(
    city: str | None = Query(default=None, description="City name, e.g. 'London' or 'Paris,FR'"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> WeatherSummary:
    """Get current weather for the requested city.

    Args:
        city: Raw city query parameter
        client: HTTP client from dependency injection
        settings: Settings from the application context

    Returns:
        WeatherSummary for the city
    """
    query = WeatherQuery.from_param(city)
    return await weather_service.get_current_weather(client, settings, query)

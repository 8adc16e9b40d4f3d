"""Weather service for OpenWeatherMap API integration."""

from datetime import UTC, datetime
from typing import Any

import httpx
from pydantic import ValidationError

from weather_lookup.config import Settings
from weather_lookup.exceptions import (
    GENERIC_FAILURE_MESSAGE,
    CityNotFoundException,
    ServiceMisconfiguredException,
    UpstreamAPIException,
    UpstreamPayloadException,
    UpstreamUnreachableException,
)
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.models.weather import CurrentWeather, WeatherQuery, WeatherSummary

logger = get_logger(__name__)


def _upstream_message(response: httpx.Response) -> str:
    """Pull the provider's own error message out of an error response, if any."""
    try:
        payload: Any = response.json()
    except ValueError:
        return GENERIC_FAILURE_MESSAGE
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return GENERIC_FAILURE_MESSAGE


async def get_current_weather(
    client: httpx.AsyncClient,
    settings: Settings,
    query: WeatherQuery,
) -> WeatherSummary:
    """Get current conditions for a city from OpenWeatherMap.

    One request per call: no caching and no retries.

    Args:
        client: Shared HTTP client for making requests
        settings: Settings with the provider credential and endpoint
        query: Validated lookup

    Returns:
        WeatherSummary built from the provider response

    Raises:
        ServiceMisconfiguredException: If no API key is configured
        CityNotFoundException: If the provider answers 404
        UpstreamAPIException: For any other provider HTTP error (status passed through)
        UpstreamUnreachableException: If no response was received at all
        UpstreamPayloadException: If a successful response cannot be mapped
    """
    if not settings.weather_configured:
        log_with_context(
            logger,
            "error",
            "OPENWEATHER_API_KEY not configured",
            event_type="config_missing_api_key",
        )
        raise ServiceMisconfiguredException()

    params: dict[str, str] = {
        "q": query.city,
        "appid": settings.openweather_api_key or "",
        "units": "metric",
    }

    try:
        response = await client.get(settings.openweather_url, params=params)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        if status_code == 404:
            raise CityNotFoundException(details={"city": query.city}) from e
        raise UpstreamAPIException(
            _upstream_message(e.response),
            status_code=status_code,
            details={"city": query.city, "api_response": e.response.text},
        ) from e
    except httpx.HTTPError as e:
        raise UpstreamUnreachableException(
            details={"city": query.city, "error": str(e), "error_type": type(e).__name__},
        ) from e

    try:
        current = CurrentWeather.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise UpstreamPayloadException(
            details={"city": query.city, "error": str(e), "error_type": "parsing_error"},
        ) from e

    summary = WeatherSummary.from_openweather(current, timestamp=datetime.now(UTC))
    log_with_context(
        logger,
        "info",
        "Weather summary",
        event_type="weather_summary",
        **summary.model_dump(mode="json", by_alias=True),
    )
    return summary

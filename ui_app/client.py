"""HTTP client for the Weather Lookup backend."""

import httpx
from pydantic import ValidationError

from weather_lookup.models.weather import WeatherSummary

FALLBACK_ERROR = "Failed to fetch weather data"
TRANSPORT_ERROR = "Failed to fetch weather data. Please try again."


class LookupFailed(Exception):
    """A lookup could not produce a summary; ``message`` is shown to the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class WeatherAPIClient:
    """Calls ``GET {api_base_url}/weather`` and parses the result."""

    def __init__(
        self,
        api_base_url: str,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch_weather(self, city: str) -> WeatherSummary:
        """Fetch the weather summary for a city.

        Args:
            city: City name; URL-encoded as the ``city`` query parameter.

        Returns:
            WeatherSummary parsed from the backend response.

        Raises:
            LookupFailed: With the backend's ``error`` message, or a generic one.
        """
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(f"{self.api_base_url}/weather", params={"city": city})
        except httpx.HTTPError as e:
            raise LookupFailed(TRANSPORT_ERROR) from e

        if not response.is_success:
            raise LookupFailed(_error_message(response))

        try:
            return WeatherSummary.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise LookupFailed(FALLBACK_ERROR) from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR
    message = body.get("error") if isinstance(body, dict) else None
    if isinstance(message, str) and message:
        return message
    return FALLBACK_ERROR

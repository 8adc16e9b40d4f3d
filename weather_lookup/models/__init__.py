"""Weather Lookup models"""

from weather_lookup.models.base_models import ErrorResponse, HealthResponse
from weather_lookup.models.weather import CurrentWeather, WeatherQuery, WeatherSummary

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "CurrentWeather",
    "WeatherQuery",
    "WeatherSummary",
]

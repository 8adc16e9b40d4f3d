"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_lookup.config import OPENWEATHER_URL, Settings
from weather_lookup.core.app_factory import create_app
from weather_lookup.dependencies import get_http_client


@pytest.fixture
def mock_settings(tmp_path):
    """Settings with a configured provider key and no .env influence."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        port=3000,
        environment="test",
        openweather_api_key="test-weather-key",
        upstream_timeout_seconds=2.0,
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def unconfigured_settings(tmp_path):
    """Settings without a provider key."""
    return Settings(
        _env_file=None,
        environment="test",
        openweather_api_key=None,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for upstream API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def make_upstream_response() -> Callable[..., httpx.Response]:
    """Build real httpx responses as if returned by OpenWeatherMap."""

    def _make(status_code: int = 200, json: Any = None, text: str | None = None) -> httpx.Response:
        request = httpx.Request("GET", OPENWEATHER_URL)
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text or "", request=request)

    return _make


@pytest.fixture
def app(mock_settings, mock_http_client) -> FastAPI:
    """Application wired to the mocked upstream client."""
    application = create_app(mock_settings)
    application.dependency_overrides[get_http_client] = lambda: mock_http_client
    return application


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_weather_response():
    """Mock OpenWeatherMap current weather response."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": {
            "temp": 18.5,
            "feels_like": 17.9,
            "temp_min": 17.0,
            "temp_max": 19.6,
            "pressure": 1012,
            "humidity": 72,
        },
        "visibility": 10000,
        "wind": {"speed": 4.1, "deg": 230},
        "clouds": {"all": 75},
        "dt": 1792327800,
        "sys": {"country": "GB", "sunrise": 1792306000, "sunset": 1792344000},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }

"""Tests for the Streamlit page."""

from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from ui_app.client import LookupFailed, WeatherAPIClient
from ui_app.panel import EMPTY_CITY_ERROR
from weather_lookup.models.weather import WeatherSummary

APP_PATH = str(Path(__file__).resolve().parents[3] / "ui_app" / "app.py")


@pytest.fixture
def summary():
    return WeatherSummary(
        city="London",
        country="GB",
        temperature=18.5,
        feels_like=17.9,
        humidity=72,
        pressure=1012,
        wind_speed=4.1,
        description="light rain",
        icon="10d",
        timestamp=datetime(2026, 10, 18, 14, 30, tzinfo=UTC),
    )


def test_first_load_looks_up_default_city(summary):
    """Test the page pre-fills the default city and shows its weather."""
    at = AppTest.from_file(APP_PATH, default_timeout=30)

    with patch.object(WeatherAPIClient, "fetch_weather", return_value=summary) as fetch:
        at.run()

    assert not at.exception
    fetch.assert_called_once_with("London")
    assert at.text_input(key="city_input").value == "London"
    assert at.subheader[0].value == "London, GB"
    assert [metric.value for metric in at.metric] == ["18°C", "72%", "4.1 m/s", "1012 hPa"]
    assert len(at.error) == 0


def test_lookup_error_is_shown(summary):
    """Test a failed lookup replaces the card with the error message."""
    at = AppTest.from_file(APP_PATH, default_timeout=30)

    with patch.object(WeatherAPIClient, "fetch_weather", return_value=summary):
        at.run()

    with patch.object(WeatherAPIClient, "fetch_weather", side_effect=LookupFailed("City not found")) as fetch:
        at.text_input(key="city_input").input("Atlantis")
        at.button[0].click().run()

    fetch.assert_called_once_with("Atlantis")
    assert at.error[0].value == "City not found"
    assert len(at.subheader) == 0


def test_blank_city_is_rejected_without_lookup(summary):
    """Test submitting a blank city shows the validation message."""
    at = AppTest.from_file(APP_PATH, default_timeout=30)

    with patch.object(WeatherAPIClient, "fetch_weather", return_value=summary):
        at.run()

    with patch.object(WeatherAPIClient, "fetch_weather") as fetch:
        at.text_input(key="city_input").input("   ")
        at.button[0].click().run()

    fetch.assert_not_called()
    assert at.error[0].value == EMPTY_CITY_ERROR

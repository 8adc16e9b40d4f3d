"""Display state and formatting for the weather panel.

Kept free of Streamlit so the page behavior can be unit tested.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol

from ui_app.client import TRANSPORT_ERROR, LookupFailed
from weather_lookup.models.weather import WeatherSummary

EMPTY_CITY_ERROR = "Please enter a city name"


class DisplayState(str, Enum):
    """Which part of the panel is visible; exactly one at a time."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


class WeatherFetcher(Protocol):
    """Anything that can look up a city, such as WeatherAPIClient."""

    def fetch_weather(self, city: str) -> WeatherSummary: ...


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves towards +infinity (like JS Math.round)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0``: 4.0 -> '4', 4.1 -> '4.1'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_date_time(moment: datetime) -> str:
    """Long US-style date and time, e.g. 'Sunday, October 18, 2026 at 02:30 PM'."""
    return f"{moment:%A}, {moment:%B} {moment.day}, {moment:%Y} at {moment:%I:%M %p}"


@dataclass(frozen=True)
class WeatherCard:
    """Display-ready strings for the result card."""

    location: str
    date_time: str
    temperature: str
    description: str
    icon_url: str
    icon_alt: str
    feels_like: str
    humidity: str
    wind_speed: str
    pressure: str

    @classmethod
    def from_summary(cls, summary: WeatherSummary, now: datetime | None = None) -> "WeatherCard":
        """Format a summary for display.

        The date shown is the moment of rendering, not ``summary.timestamp``.
        """
        now = now or datetime.now().astimezone()
        return cls(
            location=f"{summary.city}, {summary.country}",
            date_time=format_date_time(now),
            temperature=str(round_half_up(summary.temperature)),
            description=summary.description,
            icon_url=summary.icon_url,
            icon_alt=summary.description,
            feels_like=f"{round_half_up(summary.feels_like)}°C",
            humidity=f"{summary.humidity}%",
            wind_speed=f"{format_number(summary.wind_speed)} m/s",
            pressure=f"{summary.pressure} hPa",
        )


class WeatherPanel:
    """One visible state at a time: loading, error, or the result card."""

    def __init__(self) -> None:
        self.state = DisplayState.IDLE
        self.error: str | None = None
        self.card: WeatherCard | None = None

    def show_loading(self) -> None:
        self.state = DisplayState.LOADING
        self.error = None
        self.card = None

    def show_error(self, message: str) -> None:
        self.state = DisplayState.ERROR
        self.error = message
        self.card = None

    def show_weather(self, card: WeatherCard) -> None:
        self.state = DisplayState.RESULT
        self.error = None
        self.card = card


def search_weather(
    panel: WeatherPanel,
    raw_city: str | None,
    client: WeatherFetcher,
    now: datetime | None = None,
) -> None:
    """Run one lookup and move the panel to its resulting state.

    Args:
        panel: Panel to update
        raw_city: Current input value; trimmed before use
        client: Backend client
        now: Render time for the card; defaults to the current local time
    """
    city = (raw_city or "").strip()
    if not city:
        panel.show_error(EMPTY_CITY_ERROR)
        return

    panel.show_loading()
    try:
        summary = client.fetch_weather(city)
    except LookupFailed as e:
        panel.show_error(e.message or TRANSPORT_ERROR)
        return

    panel.show_weather(WeatherCard.from_summary(summary, now))

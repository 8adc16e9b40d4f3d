"""Pydantic models for weather data."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weather_lookup.exceptions import InvalidInputException


class WeatherCondition(BaseModel):
    """Weather condition info from OpenWeatherMap."""

    description: str
    icon: str


class MainReadings(BaseModel):
    """Main weather metrics from OpenWeatherMap."""

    temp: float
    feels_like: float
    pressure: int
    humidity: int


class WindReadings(BaseModel):
    """Wind information from OpenWeatherMap."""

    speed: float


class SysInfo(BaseModel):
    """Country and sun times block from OpenWeatherMap."""

    country: str


class CurrentWeather(BaseModel):
    """Raw OpenWeatherMap current weather response.

    Only the fields a summary is built from are declared; the provider sends
    many more, which are ignored. Missing declared fields fail validation.
    """

    name: str
    sys: SysInfo
    main: MainReadings
    wind: WindReadings
    weather: list[WeatherCondition] = Field(min_length=1)


class WeatherQuery(BaseModel):
    """A single inbound weather lookup."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str = Field(min_length=1)

    @classmethod
    def from_param(cls, city: str | None) -> "WeatherQuery":
        """Build a query from the raw ``city`` query parameter.

        Raises:
            InvalidInputException: If the parameter is missing or blank
        """
        if city is None or not city.strip():
            raise InvalidInputException()
        return cls(city=city)


class WeatherSummary(BaseModel):
    """Simplified current conditions returned by the API and shown by the UI.

    Serialized with camelCase keys (``feelsLike``, ``windSpeed``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: str
    country: str
    temperature: float = Field(description="Temperature in °C")
    feels_like: float = Field(alias="feelsLike", description="Feels-like temperature in °C")
    humidity: int = Field(description="Relative humidity in percent")
    pressure: int = Field(description="Pressure in hPa")
    wind_speed: float = Field(alias="windSpeed", description="Wind speed in m/s")
    description: str
    icon: str = Field(description="OpenWeatherMap icon code")
    timestamp: datetime = Field(description="Time the lookup was served")

    @field_validator("timestamp", mode="after")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Read a timestamp without an offset as UTC so the ISO-8601 output is unambiguous."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def icon_url(self) -> str:
        """Get OpenWeatherMap icon URL from icon code."""
        return f"https://openweathermap.org/img/wn/{self.icon}@2x.png"

    @classmethod
    def from_openweather(cls, data: CurrentWeather, timestamp: datetime) -> "WeatherSummary":
        """Create WeatherSummary from OpenWeatherMap data.

        Args:
            data: Validated CurrentWeather payload
            timestamp: Time the request is being served

        Returns:
            WeatherSummary with the simplified fields
        """
        condition = data.weather[0]
        return cls(
            city=data.name,
            country=data.sys.country,
            temperature=data.main.temp,
            feels_like=data.main.feels_like,
            humidity=data.main.humidity,
            pressure=data.main.pressure,
            wind_speed=data.wind.speed,
            description=condition.description,
            icon=condition.icon,
            timestamp=timestamp,
        )

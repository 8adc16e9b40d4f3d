from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-lookup/

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Backend settings loaded from environment variables and the .env file.

    Nothing here is required: a missing provider credential is reported per
    request as a configuration error instead of failing the process at boot.
    """

    # API server settings
    api_host: str = Field(default="0.0.0.0", min_length=1, description="API server bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="API server port")
    environment: str = Field(default="development", min_length=1, description="Environment name")

    # Weather provider
    openweather_api_key: str | None = Field(default=None, description="OpenWeatherMap API key")
    openweather_url: str = Field(default=OPENWEATHER_URL, pattern=r"^https?://", description="Current weather endpoint")
    upstream_timeout_seconds: float = Field(default=10.0, gt=0, le=60, description="Upstream read timeout")

    # HTTP surface
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    # Logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for JSON log files")
    log_file: str = Field(
        default="weather_lookup.log",
        pattern=r"^[^/\\]+$",
        description="JSON log file name inside log_dir",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("openweather_api_key", mode="after")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only key as not configured."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {list(VALID_LOG_LEVELS)}")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def weather_configured(self) -> bool:
        return self.openweather_api_key is not None


# Built once at process start; request handlers read settings from AppContext
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the process Settings instance, creating it on first use.

    Only the entry point and the app factory call this. Route handlers get
    their settings from the injected AppContext so tests can supply their own.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

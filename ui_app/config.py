from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]  # weather-lookup/


class UISettings(BaseSettings):
    """Frontend settings, read once when the page module loads."""

    # Local backend by default; deployments point this at the public API path
    api_base_url: str = Field(default="http://localhost:3000/api", pattern=r"^https?://")
    default_city: str = Field(default="London", min_length=1)
    request_timeout_seconds: float = Field(default=15.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_prefix="UI_",
        case_sensitive=False,
        extra="ignore",
    )


ui_settings = UISettings()

"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from weather_lookup.config import get_settings
from weather_lookup.core.app_factory import create_app
from weather_lookup.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level, settings.log_dir, settings.log_file)

# Create application
app = create_app(settings)


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        server_header=False,
    )


if __name__ == "__main__":
    run()

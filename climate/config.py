# ABOUTME: Process configuration for the weather core, read from the environment and an optional .env file.
# ABOUTME: Holds the provider API keys and tunables; placeholder keys are treated as missing.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

PLACEHOLDER_KEYS = frozenset({"YOUR_WEATHERAPI_API_KEY", "YOUR_OPENCAGE_API_KEY"})


class Settings(BaseModel):
    """Runtime settings shared by the provider clients."""

    weatherapi_key: str | None = None
    opencage_key: str | None = None
    forecast_days: int = 7
    search_limit: int = 5
    log_level: str = "INFO"


def usable_key(key: str | None) -> str | None:
    """Return the key, or None when it is empty or an unfilled placeholder."""
    if not key or not key.strip() or key.strip() in PLACEHOLDER_KEYS:
        return None
    return key.strip()


def load_settings() -> Settings:
    """Load settings from the environment after merging in a local .env file."""
    load_dotenv()
    return Settings(
        weatherapi_key=os.environ.get("WEATHERAPI_API_KEY"),
        opencage_key=os.environ.get("OPENCAGE_API_KEY"),
        forecast_days=max(2, int(os.environ.get("CLIMATE_FORECAST_DAYS", "7"))),
        search_limit=int(os.environ.get("CLIMATE_SEARCH_LIMIT", "5")),
        log_level=os.environ.get("CLIMATE_LOG_LEVEL", "INFO"),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

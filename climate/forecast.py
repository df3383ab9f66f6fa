# ABOUTME: Client for the WeatherAPI.com forecast endpoint.
# ABOUTME: Fetches current conditions plus multi-day hourly forecast and fails fast on any provider problem.

import logging
from collections.abc import Callable
from datetime import datetime, timezone

import httpx
from pydantic import ValidationError

from climate.config import usable_key
from climate.errors import ConfigurationError, DataShapeError, NetworkError, ProviderError
from climate.models import CurrentWeather, ForecastPayload
from climate.normalize import build_current_weather

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.weatherapi.com/v1/forecast.json"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _provider_message(resp: httpx.Response) -> str | None:
    """Extract the message from a WeatherAPI error body: {"error": {"code": ..., "message": ...}}."""
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return data["error"].get("message")
    return None


class ForecastClient:
    """Fetches and validates forecast payloads. Never retries and never caches."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str | None,
        forecast_days: int = 7,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.http_client = http_client
        self.api_key = usable_key(api_key)
        self.forecast_days = max(2, forecast_days)
        self.clock = clock

    async def fetch_payload(self, lat: float, lon: float) -> ForecastPayload:
        """Request current conditions and the hourly forecast for the coordinates in one call.

        Raises:
            ConfigurationError: No forecast API key is configured; no request is sent.
            NetworkError: The request never produced a response.
            ProviderError: Non-success status or an error payload from the provider.
            DataShapeError: A success response without current/location/forecast data.
        """
        if self.api_key is None:
            logger.error("WeatherAPI key missing, refusing to request forecast")
            raise ConfigurationError("WEATHERAPI_API_KEY is not configured")

        try:
            resp = await self.http_client.get(
                FORECAST_URL,
                params={
                    "key": self.api_key,
                    "q": f"{lat},{lon}",
                    "days": self.forecast_days,
                    "aqi": "yes",
                    "alerts": "no",
                },
            )
        except httpx.RequestError as e:
            logger.error("WeatherAPI transport error for %s,%s: %s", lat, lon, e)
            raise NetworkError(f"Forecast request failed: {e}") from e

        message = _provider_message(resp)
        if resp.is_error or message is not None:
            logger.error("WeatherAPI error %s: %s", resp.status_code, message or resp.reason_phrase)
            raise ProviderError(message or f"HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            return ForecastPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.error("WeatherAPI response missing expected data structure: %s", e)
            raise DataShapeError("Forecast response missing expected data", status_code=resp.status_code) from e

    async def fetch_current(self, lat: float, lon: float) -> CurrentWeather:
        """Fetch and normalize current weather for the coordinates."""
        payload = await self.fetch_payload(lat, lon)
        return build_current_weather(payload, self.clock())

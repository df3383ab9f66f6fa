# ABOUTME: Orchestrates the forecast fetch and normalization into a single CurrentWeather.
# ABOUTME: Propagates every provider failure; reverse geocoding stays a separate path.

import logging
from collections.abc import Callable
from datetime import datetime

from climate.forecast import ForecastClient
from climate.models import CurrentWeather
from climate.normalize import build_current_weather

logger = logging.getLogger(__name__)


class WeatherAggregator:
    """Produces the CurrentWeather consumed by presentation.

    The hourly window is anchored with the forecast client's clock unless another one is given.
    """

    def __init__(self, forecast: ForecastClient, clock: Callable[[], datetime] | None = None):
        self.forecast = forecast
        self.clock = clock or forecast.clock

    async def fetch_weather_data(self, lat: float, lon: float, name: str | None = None) -> CurrentWeather:
        """Fetch and normalize weather for the coordinates.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees.
            name: Display name from a prior search or favorite; replaces the provider's location name.
        """
        payload = await self.forecast.fetch_payload(lat, lon)
        weather = build_current_weather(payload, self.clock(), location_name=name)
        logger.debug(
            "Built weather for %s: %s, %d hourly, %d daily",
            weather.location_name,
            weather.condition.value,
            len(weather.hourly),
            len(weather.daily),
        )
        return weather

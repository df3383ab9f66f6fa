# ABOUTME: Dependency container for the weather core using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and settings, and builds the provider clients from them.

import httpx
from pydantic import BaseModel, ConfigDict

from climate.aggregator import WeatherAggregator
from climate.config import Settings
from climate.forecast import ForecastClient
from climate.geocoding import GeocodingClient


class ClimateDeps(BaseModel):
    """Dependencies injected into the web handlers."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings

    @property
    def forecast(self) -> ForecastClient:
        return ForecastClient(self.http_client, self.settings.weatherapi_key, self.settings.forecast_days)

    @property
    def geocoding(self) -> GeocodingClient:
        return GeocodingClient(self.http_client, self.settings.opencage_key)

    @property
    def aggregator(self) -> WeatherAggregator:
        return WeatherAggregator(self.forecast)


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client.

    No retry transport is installed: a transient failure surfaces as exactly one error per call.
    """
    return httpx.AsyncClient()

# ABOUTME: Pydantic BaseModels for the normalized weather domain and raw provider payloads.
# ABOUTME: Defines GeoLocation, WeatherCondition, hourly/daily samples, CurrentWeather and WeatherAPI/OpenCage shapes.

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeatherCondition(str, Enum):
    """Closed set of semantic conditions used for icon and theme selection."""

    SUNNY = "sunny"
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    STORMY = "stormy"
    WINDY = "windy"


class DomainModel(BaseModel):
    """Immutable base for domain objects, serialized with camelCase aliases."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GeoLocation(DomainModel):
    """A resolved place with both coordinates present."""

    name: str
    lat: float
    lon: float
    country: str = ""
    state: str | None = None
    formatted: str = ""

    @property
    def key(self) -> tuple[float, float]:
        return (self.lat, self.lon)

    def same_place(self, other: "GeoLocation") -> bool:
        """Favorites treat two locations as equal when their coordinates match exactly."""
        return self.key == other.key


class HourlySample(DomainModel):
    time: str
    timestamp: datetime
    condition: WeatherCondition
    is_day: bool
    temperature_c: int


class DailySample(DomainModel):
    day: str
    date: date
    condition: WeatherCondition
    high_c: int
    low_c: int


class CurrentWeather(DomainModel):
    """Aggregate root handed to presentation; rebuilt on every fetch."""

    location_name: str
    temperature_c: int
    condition_text: str
    condition: WeatherCondition
    is_day: bool
    high_c: int
    low_c: int
    wind_speed_ms: int = Field(alias="windSpeedMS")
    humidity_pct: int
    feels_like_c: int
    uv_index: int
    visibility_km: float
    air_quality_index: int | None = None
    timezone_id: str
    hourly: list[HourlySample] = []
    daily: list[DailySample] = []


# --- WeatherAPI.com forecast payload ---


class ProviderCondition(BaseModel):
    text: str = ""
    code: int | None = None


class ProviderCurrent(BaseModel):
    temp_c: float
    is_day: int = 1
    wind_kph: float = 0.0
    humidity: int = 0
    feelslike_c: float | None = None
    uv: float = 0.0
    vis_km: float = 0.0
    condition: ProviderCondition = ProviderCondition()
    air_quality: dict | None = None


class ProviderLocation(BaseModel):
    name: str | None = None
    tz_id: str = "UTC"


class ProviderHour(BaseModel):
    time_epoch: int
    temp_c: float
    is_day: int = 1
    condition: ProviderCondition = ProviderCondition()


class ProviderDay(BaseModel):
    maxtemp_c: float
    mintemp_c: float
    condition: ProviderCondition = ProviderCondition()


class ProviderForecastDay(BaseModel):
    date: date
    day: ProviderDay
    hour: list[ProviderHour] = []


class ProviderForecast(BaseModel):
    forecastday: list[ProviderForecastDay]


class ForecastPayload(BaseModel):
    """Validated WeatherAPI.com forecast.json response."""

    location: ProviderLocation
    current: ProviderCurrent
    forecast: ProviderForecast


# --- OpenCage geocoding payload ---


class GeocodeComponents(BaseModel):
    city: str | None = None
    town: str | None = None
    village: str | None = None
    county: str | None = None
    state: str | None = None
    country: str | None = None


class GeocodeGeometry(BaseModel):
    lat: float | None = None
    lng: float | None = None


class GeocodeResult(BaseModel):
    """One OpenCage result; coordinates may be missing and are checked by the client."""

    components: GeocodeComponents = GeocodeComponents()
    geometry: GeocodeGeometry = GeocodeGeometry()
    formatted: str = ""

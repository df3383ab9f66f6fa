# ABOUTME: Classifies WeatherAPI.com condition codes into the closed WeatherCondition set.
# ABOUTME: Also owns the km/h to m/s conversion and the strong-wind override rule.

import math
from types import MappingProxyType

from climate.models import WeatherCondition

CLEAR_CODE = 1000

WIND_OVERRIDE_THRESHOLD_MS = 10

# Conditions that outrank a wind-based reclassification.
SEVERE_CONDITIONS = frozenset({WeatherCondition.STORMY, WeatherCondition.RAINY, WeatherCondition.SNOWY})

# https://www.weatherapi.com/docs/weather_conditions.json
CONDITION_CODES = MappingProxyType(
    {
        1000: WeatherCondition.SUNNY,  # Sunny / Clear
        1003: WeatherCondition.PARTLY_CLOUDY,
        1006: WeatherCondition.CLOUDY,
        1009: WeatherCondition.CLOUDY,  # Overcast
        1030: WeatherCondition.CLOUDY,  # Mist
        1063: WeatherCondition.RAINY,  # Patchy rain possible
        1066: WeatherCondition.SNOWY,  # Patchy snow possible
        1069: WeatherCondition.RAINY,  # Patchy sleet possible
        1072: WeatherCondition.RAINY,  # Patchy freezing drizzle possible
        1087: WeatherCondition.STORMY,  # Thundery outbreaks possible
        1114: WeatherCondition.SNOWY,  # Blowing snow
        1117: WeatherCondition.SNOWY,  # Blizzard
        1135: WeatherCondition.CLOUDY,  # Fog
        1147: WeatherCondition.CLOUDY,  # Freezing fog
        1150: WeatherCondition.RAINY,
        1153: WeatherCondition.RAINY,
        1168: WeatherCondition.RAINY,
        1171: WeatherCondition.RAINY,
        1180: WeatherCondition.RAINY,
        1183: WeatherCondition.RAINY,
        1186: WeatherCondition.RAINY,
        1189: WeatherCondition.RAINY,
        1192: WeatherCondition.RAINY,
        1195: WeatherCondition.RAINY,
        1198: WeatherCondition.RAINY,  # Light freezing rain
        1201: WeatherCondition.RAINY,
        1204: WeatherCondition.RAINY,  # Light sleet
        1207: WeatherCondition.RAINY,
        1210: WeatherCondition.SNOWY,
        1213: WeatherCondition.SNOWY,
        1216: WeatherCondition.SNOWY,
        1219: WeatherCondition.SNOWY,
        1222: WeatherCondition.SNOWY,
        1225: WeatherCondition.SNOWY,
        1237: WeatherCondition.SNOWY,  # Ice pellets
        1240: WeatherCondition.RAINY,
        1243: WeatherCondition.RAINY,
        1246: WeatherCondition.RAINY,  # Torrential rain shower
        1249: WeatherCondition.RAINY,
        1252: WeatherCondition.RAINY,
        1255: WeatherCondition.SNOWY,
        1258: WeatherCondition.SNOWY,
        1261: WeatherCondition.SNOWY,
        1264: WeatherCondition.SNOWY,
        1273: WeatherCondition.STORMY,
        1276: WeatherCondition.STORMY,
        1279: WeatherCondition.STORMY,
        1282: WeatherCondition.STORMY,
    }
)

DEFAULT_CONDITION = WeatherCondition.CLOUDY


def classify(code: int | None, is_day: bool) -> WeatherCondition:
    """Map a provider condition code to a WeatherCondition, falling back to cloudy.

    Only CLEAR_CODE depends on the day/night flag: sunny by day, clear by night.
    """
    if code == CLEAR_CODE and not is_day:
        return WeatherCondition.CLEAR
    return CONDITION_CODES.get(code, DEFAULT_CONDITION)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def kph_to_ms(kph: float) -> int:
    """Convert km/h to whole metres per second."""
    return round_half_up(kph / 3.6)


def apply_wind_override(condition: WeatherCondition, wind_speed_ms: float) -> WeatherCondition:
    """Reclassify as windy above the threshold unless precipitation or storms already apply."""
    if wind_speed_ms > WIND_OVERRIDE_THRESHOLD_MS and condition not in SEVERE_CONDITIONS:
        return WeatherCondition.WINDY
    return condition

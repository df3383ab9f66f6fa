# ABOUTME: Normalizes a WeatherAPI.com forecast payload into the CurrentWeather domain object.
# ABOUTME: Classifies every condition code, windows the hourly samples, and maps daily samples 1:1.

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from climate.conditions import apply_wind_override, classify, kph_to_ms, round_half_up
from climate.hourly import build_window
from climate.models import (
    CurrentWeather,
    DailySample,
    ForecastPayload,
    HourlySample,
    ProviderForecastDay,
    ProviderHour,
)

DEFAULT_LOCATION_NAME = "Current Location"
MAX_DAILY_SAMPLES = 7
WINDOW_DAYS = 2


def location_zone(tz_id: str) -> tzinfo:
    try:
        return ZoneInfo(tz_id)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def hour_label(moment: datetime) -> str:
    """12-hour clock label without minutes, e.g. "3 PM"."""
    hour = moment.hour % 12 or 12
    return f"{hour} {'AM' if moment.hour < 12 else 'PM'}"


def to_hourly_sample(hour: ProviderHour, zone: tzinfo) -> HourlySample:
    moment = datetime.fromtimestamp(hour.time_epoch, tz=zone)
    is_day = hour.is_day == 1
    return HourlySample(
        time=hour_label(moment),
        timestamp=moment,
        condition=classify(hour.condition.code, is_day),
        is_day=is_day,
        temperature_c=round_half_up(hour.temp_c),
    )


def to_daily_sample(entry: ProviderForecastDay) -> DailySample:
    # Future days carry no day/night flag, so they always get the daytime icon.
    return DailySample(
        day=entry.date.strftime("%a"),
        date=entry.date,
        condition=classify(entry.day.condition.code, True),
        high_c=round_half_up(entry.day.maxtemp_c),
        low_c=round_half_up(entry.day.mintemp_c),
    )


def air_quality_index(air_quality: dict | None) -> int | None:
    """US EPA index (1-6) when the provider reported a usable one."""
    if not air_quality:
        return None
    value = air_quality.get("us-epa-index")
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 6:
        return None
    return value


def build_current_weather(
    payload: ForecastPayload,
    now: datetime,
    location_name: str | None = None,
) -> CurrentWeather:
    """Assemble CurrentWeather from a validated forecast payload.

    Args:
        payload: Validated forecast.json response.
        now: Aware reference time used to anchor the hourly window.
        location_name: Caller-supplied display name that wins over the provider's name.
    """
    current = payload.current
    days = payload.forecast.forecastday
    zone = location_zone(payload.location.tz_id)

    is_day = current.is_day == 1
    wind_speed_ms = kph_to_ms(current.wind_kph)
    condition = apply_wind_override(classify(current.condition.code, is_day), wind_speed_ms)

    recent_days = [[to_hourly_sample(h, zone) for h in day.hour] for day in days[:WINDOW_DAYS]]
    today = days[0].day if days else None
    feels_like = current.feelslike_c if current.feelslike_c is not None else current.temp_c

    return CurrentWeather(
        location_name=location_name or payload.location.name or DEFAULT_LOCATION_NAME,
        temperature_c=round_half_up(current.temp_c),
        condition_text=current.condition.text or "N/A",
        condition=condition,
        is_day=is_day,
        high_c=round_half_up(today.maxtemp_c) if today else 0,
        low_c=round_half_up(today.mintemp_c) if today else 0,
        wind_speed_ms=wind_speed_ms,
        humidity_pct=current.humidity,
        feels_like_c=round_half_up(feels_like),
        uv_index=round_half_up(current.uv),
        visibility_km=current.vis_km,
        air_quality_index=air_quality_index(current.air_quality),
        timezone_id=payload.location.tz_id,
        hourly=build_window(recent_days, now.astimezone(zone)),
        daily=[to_daily_sample(d) for d in days[:MAX_DAILY_SAMPLES]],
    )

# ABOUTME: Shared test fixtures for the weather core test suite.
# ABOUTME: Provides mock HTTP client factories and a WeatherAPI.com forecast payload builder.

from datetime import datetime, timedelta
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import httpx
import pytest

FIRST_DAY = (2025, 1, 15)


def _hours(day_start: datetime, code: int = 1003) -> list[dict]:
    return [
        {
            "time_epoch": int((day_start + timedelta(hours=h)).timestamp()),
            "time": (day_start + timedelta(hours=h)).strftime("%Y-%m-%d %H:%M"),
            "temp_c": 10.0 + h / 2,
            "is_day": 1 if 7 <= h < 17 else 0,
            "condition": {"text": "Partly cloudy", "code": code},
        }
        for h in range(24)
    ]


def _forecast_day(day_start: datetime, code: int, high: float, low: float) -> dict:
    return {
        "date": day_start.date().isoformat(),
        "date_epoch": int(day_start.timestamp()),
        "day": {"maxtemp_c": high, "mintemp_c": low, "condition": {"text": "Day", "code": code}},
        "hour": _hours(day_start),
    }


@pytest.fixture
def forecast_payload():
    """Factory for a WeatherAPI.com forecast.json body covering consecutive local days from 2025-01-15."""

    def build(
        code: int = 1003,
        is_day: int = 1,
        wind_kph: float = 7.2,
        temp_c: float = 18.0,
        days: int = 3,
        air_quality: dict | None = None,
        name: str | None = "Copenhagen",
        tz_id: str = "UTC",
    ) -> dict:
        day_codes = [1000, 1195, 1087, 1213, 1006, 1003, 1000, 1009]
        day_one = datetime(*FIRST_DAY, tzinfo=ZoneInfo(tz_id))
        return {
            "location": {"name": name, "tz_id": tz_id},
            "current": {
                "temp_c": temp_c,
                "is_day": is_day,
                "wind_kph": wind_kph,
                "humidity": 71,
                "feelslike_c": temp_c - 1.6,
                "uv": 3.4,
                "vis_km": 10.0,
                "condition": {"text": "Clear", "code": code},
                "air_quality": air_quality if air_quality is not None else {"us-epa-index": 2, "pm2_5": 8.1},
            },
            "forecast": {
                "forecastday": [
                    _forecast_day(day_one + timedelta(days=i), day_codes[i % len(day_codes)], 20.6, 4.4 + i)
                    for i in range(days)
                ]
            },
        }

    return build


@pytest.fixture
def mock_client():
    """Factory for a mock httpx.AsyncClient whose get() returns the given JSON response."""

    def build(json_data=None, status_code: int = 200) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.return_value = httpx.Response(
            status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test")
        )
        return mock

    return build

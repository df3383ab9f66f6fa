# ABOUTME: Tests for environment-driven settings.
# ABOUTME: Validates key loading, placeholder handling and tunable defaults.

import pytest

from climate.config import load_settings, usable_key


class TestUsableKey:
    @pytest.mark.parametrize("key", [None, "", "  ", "YOUR_WEATHERAPI_API_KEY", "YOUR_OPENCAGE_API_KEY"])
    def test_missing_or_placeholder_is_none(self, key):
        """Empty and placeholder keys count as absent.

        Implementation: Passes unusable key values.
        Passing implies: Unfilled config templates never reach a provider.
        """
        assert usable_key(key) is None

    def test_real_key_is_trimmed(self):
        assert usable_key(" abc123\n") == "abc123"


class TestLoadSettings:
    def test_reads_environment(self, monkeypatch):
        """load_settings reads keys and tunables from the environment.

        Implementation: Sets every variable with monkeypatch.
        Passing implies: Process configuration flows into Settings.
        """
        monkeypatch.setenv("WEATHERAPI_API_KEY", "w")
        monkeypatch.setenv("OPENCAGE_API_KEY", "o")
        monkeypatch.setenv("CLIMATE_FORECAST_DAYS", "3")
        monkeypatch.setenv("CLIMATE_SEARCH_LIMIT", "8")
        monkeypatch.setenv("CLIMATE_LOG_LEVEL", "debug")
        settings = load_settings()

        assert settings.weatherapi_key == "w"
        assert settings.opencage_key == "o"
        assert settings.forecast_days == 3
        assert settings.search_limit == 8
        assert settings.log_level == "debug"

    def test_defaults(self, monkeypatch):
        """Unset tunables fall back to a week of forecast and five search results.

        Implementation: Removes the tunable variables.
        Passing implies: The defaults match the documented behavior.
        """
        for name in ("CLIMATE_FORECAST_DAYS", "CLIMATE_SEARCH_LIMIT", "CLIMATE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = load_settings()

        assert settings.forecast_days == 7
        assert settings.search_limit == 5
        assert settings.log_level == "INFO"

    def test_forecast_days_floor_is_two(self, monkeypatch):
        monkeypatch.setenv("CLIMATE_FORECAST_DAYS", "1")
        assert load_settings().forecast_days == 2

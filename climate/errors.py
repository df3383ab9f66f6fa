# ABOUTME: Error taxonomy for the forecast and geocoding providers.
# ABOUTME: Forecast failures propagate as these types; geocoding logs them and degrades to empty results.


class ClimateError(Exception):
    """Base class for every failure raised by the weather core."""


class ConfigurationError(ClimateError):
    """A required API key is absent or still set to its placeholder."""


class ProviderError(ClimateError):
    """The provider answered with a non-success status or an embedded error payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DataShapeError(ProviderError):
    """A successful response was missing fields the normalization needs."""


class NetworkError(ClimateError):
    """Transport-level failure: DNS, connect, timeout, reset."""

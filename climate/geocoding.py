# ABOUTME: Client for the OpenCage forward and reverse geocoding API.
# ABOUTME: Never raises: every failure is logged and collapses to an empty list or None.

import logging

import httpx
from pydantic import ValidationError

from climate.config import usable_key
from climate.errors import ClimateError, ConfigurationError, DataShapeError, NetworkError, ProviderError
from climate.models import GeocodeResult, GeoLocation

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://api.opencagedata.com/geocode/v1/json"

MIN_QUERY_LENGTH = 2


def resolve_name(result: GeocodeResult) -> str:
    """Pick the display name: city, town, village, county, then the first segment of the address."""
    c = result.components
    return c.city or c.town or c.village or c.county or result.formatted.split(",")[0].strip()


def to_location(raw) -> GeoLocation | None:
    """Convert one raw result, or return None when it is malformed or missing a coordinate."""
    try:
        result = GeocodeResult.model_validate(raw)
    except ValidationError as e:
        logger.info("Skipping malformed geocoding result: %s", e)
        return None
    if result.geometry.lat is None or result.geometry.lng is None:
        return None
    return GeoLocation(
        name=resolve_name(result),
        lat=result.geometry.lat,
        lon=result.geometry.lng,
        country=result.components.country or "",
        state=result.components.state,
        formatted=result.formatted,
    )


class GeocodingClient:
    def __init__(self, http_client: httpx.AsyncClient, api_key: str | None):
        self.http_client = http_client
        self.api_key = usable_key(api_key)

    async def search(self, query: str, limit: int = 5) -> list[GeoLocation]:
        """Search places by name in provider relevance order."""
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            return []
        results = await self._fetch_results(query.strip(), limit)
        return [loc for loc in map(to_location, results or []) if loc is not None]

    async def reverse_geocode(self, lat: float, lon: float) -> GeoLocation | None:
        """Resolve coordinates to the provider's best matching place."""
        results = await self._fetch_results(f"{lat},{lon}", 1)
        return to_location(results[0]) if results else None

    async def _fetch_results(self, q: str, limit: int) -> list | None:
        """Run one geocoding request, returning None on any failure after logging it."""
        try:
            return await self._request(q, limit)
        except ClimateError as e:
            logger.warning("Geocoding failed for %r (%s): %s", q, type(e).__name__, e)
            return None

    async def _request(self, q: str, limit: int) -> list:
        if self.api_key is None:
            raise ConfigurationError("OPENCAGE_API_KEY is not configured")

        try:
            resp = await self.http_client.get(
                GEOCODING_URL,
                params={"q": q, "key": self.api_key, "limit": limit, "no_annotations": 1},
            )
        except httpx.RequestError as e:
            raise NetworkError(f"Geocoding request failed: {e}") from e

        if resp.status_code in (401, 402):
            raise ProviderError("Unauthorized or quota exceeded for OpenCage", status_code=resp.status_code)
        if resp.is_error:
            raise ProviderError(f"OpenCage HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise DataShapeError(f"Malformed OpenCage response: {e}", status_code=resp.status_code) from e
        results = data.get("results") if isinstance(data, dict) else None
        if results is None:
            return []
        if not isinstance(results, list):
            raise DataShapeError("OpenCage 'results' is not a list", status_code=resp.status_code)
        # Individual records are validated in to_location.
        return results

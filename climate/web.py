# ABOUTME: ASGI JSON API exposing weather lookup, place search and reverse geocoding to UI clients.
# ABOUTME: Maps the forecast error taxonomy onto HTTP statuses; geocoding endpoints never fail upstream.

import logging
import math
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from climate.config import configure_logging, load_settings
from climate.deps import ClimateDeps, create_http_client
from climate.errors import ConfigurationError, NetworkError, ProviderError

logger = logging.getLogger(__name__)

# OpenCage caps limit at 100.
MAX_SEARCH_LIMIT = 100


def _coordinate(request: Request, name: str, bound: float) -> float:
    """Parse a required coordinate query parameter within [-bound, bound]."""
    raw = request.query_params.get(name)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise HTTPException(400, detail=f"'{name}' must be a number")
    if math.isnan(value) or not -bound <= value <= bound:
        raise HTTPException(400, detail=f"'{name}' must be between -{bound} and {bound}")
    return value


async def weather(request: Request) -> JSONResponse:
    deps: ClimateDeps = request.app.state.deps
    lat = _coordinate(request, "lat", 90)
    lon = _coordinate(request, "lon", 180)
    result = await deps.aggregator.fetch_weather_data(lat, lon, name=request.query_params.get("name") or None)
    return JSONResponse(result.model_dump(mode="json", by_alias=True))


async def search(request: Request) -> JSONResponse:
    deps: ClimateDeps = request.app.state.deps
    try:
        limit = int(request.query_params.get("limit", deps.settings.search_limit))
    except ValueError:
        raise HTTPException(400, detail="'limit' must be an integer")
    if not 1 <= limit <= MAX_SEARCH_LIMIT:
        raise HTTPException(400, detail=f"'limit' must be between 1 and {MAX_SEARCH_LIMIT}")
    results = await deps.geocoding.search(request.query_params.get("q", ""), limit=limit)
    return JSONResponse([loc.model_dump(mode="json", by_alias=True) for loc in results])


async def reverse(request: Request) -> JSONResponse:
    deps: ClimateDeps = request.app.state.deps
    location = await deps.geocoding.reverse_geocode(_coordinate(request, "lat", 90), _coordinate(request, "lon", 180))
    return JSONResponse(location.model_dump(mode="json", by_alias=True) if location else None)


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def _http_error(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)


async def _configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Weather request rejected, server misconfigured: %s", exc)
    return JSONResponse({"detail": "Weather service is not configured"}, status_code=500)


async def _provider_error(request: Request, exc: ProviderError) -> JSONResponse:
    logger.error("Weather provider failed (status %s): %s", exc.status_code, exc.message)
    return JSONResponse({"detail": exc.message, "providerStatus": exc.status_code}, status_code=502)


async def _network_error(request: Request, exc: NetworkError) -> JSONResponse:
    logger.error("Weather provider unreachable: %s", exc)
    return JSONResponse({"detail": "Weather provider unreachable"}, status_code=504)


def create_app(deps: ClimateDeps | None = None) -> Starlette:
    """Build the ASGI app. Without explicit deps, settings and the HTTP client are created at startup."""

    @asynccontextmanager
    async def lifespan(app: Starlette):
        if deps is not None:
            yield
            return
        settings = load_settings()
        configure_logging(settings)
        app.state.deps = ClimateDeps(http_client=create_http_client(), settings=settings)
        try:
            yield
        finally:
            await app.state.deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/api/weather", weather),
            Route("/api/search", search),
            Route("/api/reverse", reverse),
            Route("/health", health),
        ],
        exception_handlers={
            HTTPException: _http_error,
            ConfigurationError: _configuration_error,
            ProviderError: _provider_error,
            NetworkError: _network_error,
        },
        lifespan=lifespan,
    )
    if deps is not None:
        app.state.deps = deps
    return app


app = create_app()

# ABOUTME: Starlette web entry point serving weather lookups as JSON.
# ABOUTME: Routes GET /forecast to the weather service and decorates days with display labels.

import contextlib
import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse
from starlette.routing import Route

from src.config import load_settings
from src.deps import WeatherDeps, create_deps
from src.display import day_name, format_date, weather_description, weather_icon
from src.models import ForecastLookup
from src.weather_service import lookup_forecast

logger = logging.getLogger(__name__)


def render_lookup(lookup: ForecastLookup) -> dict:
    """Build the JSON body for a lookup, adding display labels to each forecast day."""
    body = {"address": lookup.address, "weather": None, "alert": lookup.alert, "from_cache": False}
    if lookup.weather is None:
        return body

    weather = lookup.weather.model_dump(mode="json")
    current = weather["current"]
    current["description"] = weather_description(current["weather_code"])
    current["icon"] = weather_icon(current["weather_code"])
    for i, day in enumerate(weather["extended_forecast"]):
        day["day_name"] = day_name(day["date"], i)
        day["display_date"] = format_date(day["date"])
        day["description"] = weather_description(day["weather_code"])
        day["icon"] = weather_icon(day["weather_code"])

    body["weather"] = weather
    body["from_cache"] = lookup.weather.from_cache
    return body


async def forecast(request: Request) -> JSONResponse:
    """GET /forecast?address=...

    Always answers 200; an unavailable forecast is reported through "alert"
    for the client to show.
    """
    deps: WeatherDeps = request.app.state.deps
    lookup = await lookup_forecast(deps, request.query_params.get("address"))
    return JSONResponse(render_lookup(lookup))


async def index(request: Request) -> RedirectResponse:
    return RedirectResponse("/forecast", status_code=302)


def create_app(deps: WeatherDeps | None = None) -> Starlette:
    """Build the Starlette app. Without deps, settings are loaded from the environment,
    which raises ConfigurationError if a provider URL is missing.
    """
    if deps is None:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level)
        deps = create_deps(settings)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/forecast", forecast, methods=["GET"]),
        ],
        lifespan=lifespan,
    )
    app.state.deps = deps
    logger.info(
        "Forecast app ready (geocoding=%s, forecast=%s)",
        deps.settings.geocoding_base_url,
        deps.settings.forecast_base_url,
    )
    return app

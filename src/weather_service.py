# ABOUTME: Service layer that geocodes a location query, fetches its forecast, and caches the result.
# ABOUTME: Handles Nominatim-style geocoding, Open-Meteo forecast retrieval, and snapshot assembly.

import logging

from pydantic import ValidationError

from src.cache import cache_key
from src.deps import WeatherDeps
from src.fetch import FetchFailure, fetch_json
from src.models import (
    CurrentConditions,
    DailyForecast,
    ForecastLookup,
    ForecastPayload,
    GeoLocation,
    LocationSummary,
    TodaySummary,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "Tampa, FL"
UNAVAILABLE_ALERT = "Unable to fetch weather data for the given address."

GEOCODING_CONTEXT = "Geocoding error"
FORECAST_CONTEXT = "Weather fetch error"

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,apparent_temperature,weather_code,wind_speed_10m"
DAILY_PARAMS = "temperature_2m_max,temperature_2m_min,weather_code,precipitation_probability_max"

# Most specific first.
NAME_FIELDS = ("city", "town", "village", "municipality", "county")


async def get_weather_data(deps: WeatherDeps, query: str) -> WeatherSnapshot | None:
    """Return the weather snapshot for a location query, from cache when possible.

    On a miss the geocode -> forecast -> assemble pipeline runs once and its
    result is cached for the configured TTL. Returns None when any upstream
    step fails; no partial snapshots are produced.
    """
    key = cache_key(query)
    cached = await _read_cache(deps, key)
    if cached is not None:
        logger.debug("Cache hit for %s", key)
        return cached.model_copy(update={"from_cache": True})

    logger.debug("Cache miss for %s", key)
    snapshot = await _fetch_weather_data(deps, query)
    if snapshot is None:
        return None

    await deps.cache.set(
        key,
        snapshot.model_dump_json(exclude={"from_cache"}),
        deps.settings.cache_ttl_seconds,
    )
    logger.info("Cached weather for %s (ttl=%ss)", key, deps.settings.cache_ttl_seconds)
    return snapshot.model_copy(update={"from_cache": False})


async def _read_cache(deps: WeatherDeps, key: str) -> WeatherSnapshot | None:
    raw = await deps.cache.get(key)
    if raw is None:
        return None
    try:
        return WeatherSnapshot.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Ignoring unreadable cache entry %s: %s", key, e)
        return None


async def _fetch_weather_data(deps: WeatherDeps, query: str) -> WeatherSnapshot | None:
    location = await resolve_location(deps, query)
    if location is None:
        return None

    forecast = await fetch_forecast(deps, location.latitude, location.longitude)
    if forecast is None:
        return None

    try:
        return assemble(forecast, location)
    except ValidationError as e:
        logger.error("%s: forecast values do not fit the snapshot: %s", FORECAST_CONTEXT, e)
        return None


async def resolve_location(deps: WeatherDeps, query: str) -> GeoLocation | None:
    """Geocode a free-text query using the provider's first (most relevant) match."""
    data = await fetch_json(
        deps.http_client,
        deps.settings.geocoding_base_url,
        GEOCODING_CONTEXT,
        params={"q": query, "format": "json", "limit": 1, "addressdetails": 1},
    )
    if isinstance(data, FetchFailure):
        return None
    if not isinstance(data, list) or not data or not isinstance(data[0], dict) or not data[0]:
        return None

    return normalize_geo_result(data[0])


def normalize_geo_result(result: dict) -> GeoLocation | None:
    """Map a raw geocoding record to a GeoLocation.

    Coordinates arrive as strings. A record without usable coordinates is
    treated as no match.
    """
    address = result.get("address") or {}
    try:
        latitude = float(result["lat"])
        longitude = float(result["lon"])
    except (KeyError, TypeError, ValueError):
        logger.warning("%s: result has no usable coordinates: %r", GEOCODING_CONTEXT, result)
        return None

    return GeoLocation(
        latitude=latitude,
        longitude=longitude,
        name=extract_location_name(result, address),
        country=address.get("country") or extract_country_from_display(result.get("display_name")),
    )


def extract_location_name(result: dict, address: dict) -> str:
    for field in NAME_FIELDS:
        if address.get(field):
            return address[field]
    return _display_segment(result.get("display_name"), 0) or "Unknown"


def extract_country_from_display(display_name: str | None) -> str:
    return _display_segment(display_name, -1) or "Unknown"


def _display_segment(display_name: str | None, index: int) -> str | None:
    """Return a trimmed comma segment of a display name, or None if there is none.

    Trailing empty fields are dropped before indexing, so "Tampa," counts as one segment.
    """
    if not display_name:
        return None
    segments = display_name.split(",")
    while segments and not segments[-1]:
        segments.pop()
    if not segments:
        return None
    return segments[index].strip() or None


async def fetch_forecast(deps: WeatherDeps, latitude: float, longitude: float) -> ForecastPayload | None:
    """Fetch current conditions and the daily forecast for coordinates, in Fahrenheit."""
    data = await fetch_json(
        deps.http_client,
        deps.settings.forecast_base_url,
        FORECAST_CONTEXT,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_PARAMS,
            "daily": DAILY_PARAMS,
            "temperature_unit": "fahrenheit",
            "timezone": "auto",
        },
    )
    if isinstance(data, FetchFailure):
        return None
    try:
        return ForecastPayload.model_validate(data)
    except ValidationError as e:
        logger.error("%s: unexpected payload shape: %s", FORECAST_CONTEXT, e)
        return None


def assemble(forecast: ForecastPayload, location: GeoLocation) -> WeatherSnapshot:
    """Reshape a raw forecast payload and its location into a WeatherSnapshot.

    Pure mapping. Missing fields come through as None rather than raising.
    """
    return WeatherSnapshot(
        location=LocationSummary(name=location.name, country=location.country),
        current=build_current_weather(forecast.current or {}),
        today=build_today_forecast(forecast.daily or {}),
        extended_forecast=build_extended_forecast(forecast.daily),
        units=forecast.daily_units,
    )


def build_current_weather(current: dict) -> CurrentConditions:
    return CurrentConditions(
        temperature=current.get("temperature_2m"),
        apparent_temperature=current.get("apparent_temperature"),
        humidity=current.get("relative_humidity_2m"),
        wind_speed=current.get("wind_speed_10m"),
        weather_code=current.get("weather_code"),
    )


def build_today_forecast(daily: dict) -> TodaySummary:
    return TodaySummary(
        high=_get_at(daily, "temperature_2m_max", 0),
        low=_get_at(daily, "temperature_2m_min", 0),
        precipitation_probability=_get_at(daily, "precipitation_probability_max", 0),
    )


def build_extended_forecast(daily: dict | None) -> list[DailyForecast]:
    """Zip the column-oriented daily arrays into one row per date, in provider order."""
    if not daily:
        return []

    result = []
    for i, d in enumerate(daily.get("time") or []):
        result.append(
            DailyForecast(
                date=d,
                high=_get_at(daily, "temperature_2m_max", i),
                low=_get_at(daily, "temperature_2m_min", i),
                weather_code=_get_at(daily, "weather_code", i),
                precipitation_probability=_get_at(daily, "precipitation_probability_max", i),
            )
        )
    return result


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]


def resolve_address(raw: str | None) -> str:
    """Return the address to look up, falling back to the default for blank input."""
    if raw is None or not raw.strip():
        return DEFAULT_ADDRESS
    return raw


async def lookup_forecast(deps: WeatherDeps, raw_address: str | None) -> ForecastLookup:
    """Consumer entry point: resolve the address and fetch its snapshot or an alert."""
    address = resolve_address(raw_address)
    weather = await get_weather_data(deps, address)
    if weather is None:
        return ForecastLookup(address=address, alert=UNAVAILABLE_ALERT)
    return ForecastLookup(address=address, weather=weather)

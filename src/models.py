# ABOUTME: Pydantic BaseModels for geocoding results, raw forecast payloads, and weather snapshots.
# ABOUTME: Defines the typed records passed between the clients, the assembler, and the cache.

from typing import Any

from pydantic import BaseModel


class GeoLocation(BaseModel):
    """Geocoded location normalized from the first provider match."""

    latitude: float
    longitude: float
    name: str
    country: str


class ForecastPayload(BaseModel):
    """Raw forecast provider response. Daily values are parallel arrays indexed by day offset."""

    current: dict[str, Any] | None = None
    daily: dict[str, list] | None = None
    daily_units: dict[str, str] | None = None


class LocationSummary(BaseModel):
    name: str | None = None
    country: str | None = None


class CurrentConditions(BaseModel):
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    weather_code: int | None = None


class TodaySummary(BaseModel):
    high: float | None = None
    low: float | None = None
    precipitation_probability: float | None = None


class DailyForecast(BaseModel):
    """One day of the extended forecast."""

    date: str
    high: float | None = None
    low: float | None = None
    weather_code: int | None = None
    precipitation_probability: float | None = None


class WeatherSnapshot(BaseModel):
    """Display-ready weather result. This is what gets cached, minus from_cache."""

    location: LocationSummary
    current: CurrentConditions
    today: TodaySummary
    extended_forecast: list[DailyForecast] = []
    units: dict[str, str] | None = None
    from_cache: bool = False


class ForecastLookup(BaseModel):
    """Outcome of a consumer lookup: the address used and the snapshot, or an alert."""

    address: str
    weather: WeatherSnapshot | None = None
    alert: str | None = None

# ABOUTME: Test helpers for building mocked httpx clients and canned provider payloads.
# ABOUTME: Shared by the fetch, service, and web test modules.

from unittest.mock import AsyncMock

import httpx

GEOCODING_URL = "https://geocode.test/search"
FORECAST_URL = "https://forecast.test/v1/forecast"


def json_response(json_data, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response carrying the given JSON body."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def mock_client(*responses) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient returning the given responses (or raising given exceptions) in order."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.side_effect = list(responses)
    return mock


TAMPA_GEOCODE = [
    {
        "lat": "27.9",
        "lon": "-82.5",
        "address": {"city": "Tampa"},
        "display_name": "Tampa, FL, United States",
    }
]

TAMPA_FORECAST = {
    "current": {
        "temperature_2m": 75.0,
        "relative_humidity_2m": 65,
        "apparent_temperature": 77.0,
        "weather_code": 1,
        "wind_speed_10m": 10.0,
    },
    "daily": {
        "time": ["2024-01-15"],
        "temperature_2m_max": [82.0],
        "temperature_2m_min": [68.0],
        "weather_code": [1],
        "precipitation_probability_max": [20],
    },
    "daily_units": {
        "time": "iso8601",
        "temperature_2m_max": "°F",
        "temperature_2m_min": "°F",
        "weather_code": "wmo code",
        "precipitation_probability_max": "%",
    },
}

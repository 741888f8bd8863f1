# ABOUTME: Presentation lookups for weather snapshots: WMO code text/icons and date labels.
# ABOUTME: Used by the web entry point to decorate extended forecast days for display.

from datetime import date

# WMO weather interpretation codes as returned by Open-Meteo.
WEATHER_CODES: dict[int, tuple[str, str]] = {
    0: ("Clear sky", "☀️"),
    1: ("Mainly clear", "🌤️"),
    2: ("Partly cloudy", "⛅"),
    3: ("Overcast", "☁️"),
    45: ("Foggy", "🌫️"),
    48: ("Depositing rime fog", "🌫️"),
    51: ("Light drizzle", "🌧️"),
    53: ("Moderate drizzle", "🌧️"),
    55: ("Dense drizzle", "🌧️"),
    61: ("Slight rain", "🌧️"),
    63: ("Moderate rain", "🌧️"),
    65: ("Heavy rain", "🌧️"),
    66: ("Light freezing rain", "🌨️"),
    67: ("Heavy freezing rain", "🌨️"),
    71: ("Slight snow", "❄️"),
    73: ("Moderate snow", "❄️"),
    75: ("Heavy snow", "❄️"),
    77: ("Snow grains", "❄️"),
    80: ("Slight rain showers", "🌦️"),
    81: ("Moderate rain showers", "🌦️"),
    82: ("Violent rain showers", "🌦️"),
    85: ("Slight snow showers", "🌨️"),
    86: ("Heavy snow showers", "🌨️"),
    95: ("Thunderstorm", "⛈️"),
    96: ("Thunderstorm with slight hail", "⛈️"),
    99: ("Thunderstorm with heavy hail", "⛈️"),
}

UNKNOWN_ICON = "🌡️"


def weather_description(code: int | None) -> str:
    entry = WEATHER_CODES.get(code)
    return entry[0] if entry else "Unknown"


def weather_icon(code: int | None) -> str:
    entry = WEATHER_CODES.get(code)
    return entry[1] if entry else UNKNOWN_ICON


def format_date(date_string: str) -> str:
    """Format an ISO date for display, e.g. "2024-01-15" -> "Mon, Jan 15"."""
    return date.fromisoformat(date_string).strftime("%a, %b %d")


def day_name(date_string: str, index: int) -> str:
    """Label a forecast day by position: "Today", "Tomorrow", then the weekday name."""
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return date.fromisoformat(date_string).strftime("%A")

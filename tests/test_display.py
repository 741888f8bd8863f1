# ABOUTME: Contract tests for presentation lookups.
# ABOUTME: Validates WMO code descriptions/icons and forecast date labels.

import pytest

from src.display import UNKNOWN_ICON, day_name, format_date, weather_description, weather_icon


class TestWeatherCodes:
    @pytest.mark.parametrize(
        "code, description",
        [(0, "Clear sky"), (3, "Overcast"), (63, "Moderate rain"), (75, "Heavy snow"), (99, "Thunderstorm with heavy hail")],
    )
    def test_known_codes(self, code, description):
        assert weather_description(code) == description

    def test_unknown_code(self):
        assert weather_description(999) == "Unknown"
        assert weather_description(None) == "Unknown"
        assert weather_icon(999) == UNKNOWN_ICON

    def test_icons(self):
        assert weather_icon(0) == "☀️"
        assert weather_icon(71) == "❄️"
        assert weather_icon(95) == "⛈️"


class TestDates:
    def test_format_date(self):
        assert format_date("2024-01-15") == "Mon, Jan 15"
        assert format_date("2024-12-25") == "Wed, Dec 25"

    def test_day_name(self):
        """The first two days are relative labels; later days use the weekday name."""
        assert day_name("2024-01-15", 0) == "Today"
        assert day_name("2024-01-16", 1) == "Tomorrow"
        assert day_name("2024-01-17", 2) == "Wednesday"

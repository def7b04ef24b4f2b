"""Tests for formatted sunrise/sunset lookups."""

import re
from datetime import date
from unittest.mock import patch

import pytest

from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions, SuntimesResult
from suntimes.service import suntimes, suntimes_for

CLOCK_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2} (AM|PM)$")


class TestSuntimes:
    """Tests for the suntimes lookup."""

    def test_equator_equinox(self, equator_coordinates: Coordinates, march_equinox: date):
        """Test about twelve hours of daylight at the equator on the equinox."""
        options = SuntimesOptions.from_coordinates(equator_coordinates, march_equinox, timezone=0)
        result = suntimes(options)

        assert result.sunrise.startswith("06:")
        assert result.sunrise.endswith(" AM")
        assert result.sunset.startswith("06:")
        assert result.sunset.endswith(" PM")
        assert result.daytime.startswith("12:")

    def test_normal_day_format(self, nyc_summer_options: SuntimesOptions):
        """Test that a normal day gives clock strings and a duration."""
        result = suntimes(nyc_summer_options)

        assert CLOCK_PATTERN.match(result.sunrise)
        assert CLOCK_PATTERN.match(result.sunset)
        assert re.match(r"^\d{2}:\d{2}:\d{2}$", result.daytime)
        # Local values 19.5659 and 10.6598
        assert result.sunrise.startswith("07:33:")
        assert result.sunrise.endswith("PM")
        assert result.sunset.startswith("10:39:")
        assert result.sunset.endswith("AM")
        assert result.daytime.startswith("08:54:")

    def test_prime_meridian_day(self, london_coordinates: Coordinates, summer_solstice: date):
        """Test a long summer day in London."""
        options = SuntimesOptions.from_coordinates(london_coordinates, summer_solstice, timezone=1)
        result = suntimes(options)

        assert result.sunrise.startswith("04:")
        assert result.sunrise.endswith("AM")
        assert result.sunset.startswith("09:")
        assert result.sunset.endswith("PM")
        assert result.daytime.startswith("16:")

    def test_wrapped_sunrise_formats_as_evening(self):
        """Test that a sunrise before local midnight prints as a PM clock time."""
        result = suntimes_for(65, 180, date(2024, 6, 10), timezone=-14)

        assert CLOCK_PATTERN.match(result.sunrise)
        assert result.sunrise.startswith("11:19:")
        assert result.sunrise.endswith("PM")

    def test_never_rises(self, arctic_coordinates: Coordinates, winter_solstice: date):
        """Test the polar night mapping."""
        options = SuntimesOptions.from_coordinates(arctic_coordinates, winter_solstice, timezone=1)
        result = suntimes(options)

        assert result == SuntimesResult(sunrise="Never", sunset="", daytime="")

    def test_never_sets(self, arctic_coordinates: Coordinates, summer_solstice: date):
        """Test the midnight sun mapping."""
        options = SuntimesOptions.from_coordinates(arctic_coordinates, summer_solstice, timezone=1)
        result = suntimes(options)

        assert result == SuntimesResult(sunrise="", sunset="Never", daytime="")

    def test_unexpected_result(self, nyc_summer_options: SuntimesOptions):
        """Test that an unknown calculator result is reported as N/A."""
        with patch("suntimes.service.compute_solar_times", return_value=object()):
            result = suntimes(nyc_summer_options)

        assert result == SuntimesResult(sunrise="N/A", sunset="N/A", daytime="N/A")

    def test_tz_provider_passed_through(self, sample_coordinates: Coordinates):
        """Test that an injected provider localizes a naive date."""
        options = SuntimesOptions.from_coordinates(sample_coordinates, date(2024, 6, 21))

        injected = suntimes(options, tz_provider=lambda day: -4)
        explicit = suntimes(
            SuntimesOptions.from_coordinates(sample_coordinates, date(2024, 6, 21), timezone=-4)
        )

        assert injected == explicit

    def test_configured_default_offset(
        self, monkeypatch: pytest.MonkeyPatch, sample_coordinates: Coordinates
    ):
        """Test that the configured default offset is used for naive dates."""
        from suntimes.config import get_settings

        monkeypatch.setenv("SUNTIMES_DEFAULT_TIMEZONE_OFFSET", "-4")
        get_settings.cache_clear()

        configured = suntimes(SuntimesOptions.from_coordinates(sample_coordinates, date(2024, 6, 21)))
        explicit = suntimes(
            SuntimesOptions.from_coordinates(sample_coordinates, date(2024, 6, 21), timezone=-4)
        )

        assert configured == explicit

    def test_deterministic(self, nyc_summer_options: SuntimesOptions):
        """Test that repeated calls give identical results."""
        assert suntimes(nyc_summer_options) == suntimes(nyc_summer_options)


class TestSuntimesFor:
    """Tests for the keyword shortcut."""

    def test_matches_suntimes(self, nyc_summer_options: SuntimesOptions):
        result = suntimes_for(40.7128, -74.0060, date(2024, 6, 21), timezone=-4)
        assert result == suntimes(nyc_summer_options)

    def test_timezone_shift(self):
        """Test that a -8 offset moves sunrise eight hours earlier."""
        utc = suntimes_for(40.7128, -74.0060, date(2024, 6, 21), timezone=0)
        pacific = suntimes_for(40.7128, -74.0060, date(2024, 6, 21), timezone=-8)

        assert utc.sunrise == "11:33:57 PM"
        assert pacific.sunrise.startswith("03:33:")
        assert pacific.sunrise.endswith("PM")

    def test_daytime_across_midnight(self):
        """Test that daytime is the plain difference of the two local clock values.

        With a zero offset the local sunset is earlier in the day than sunrise.
        """
        utc = suntimes_for(40.7128, -74.0060, date(2024, 6, 21), timezone=0)

        assert utc.sunset == "02:39:35 PM"
        assert utc.daytime.startswith("08:54:")

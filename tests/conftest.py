"""Pytest fixtures for suntimes tests.

This module provides test fixtures that ensure:
1. Configuration is read fresh for every test
2. No host timezone leaks into results unless a test asks for it
3. astropy never downloads Earth orientation data during tests
"""

import os
from datetime import date

import pytest

# Set test environment BEFORE importing application modules
os.environ.pop("SUNTIMES_DEFAULT_TIMEZONE_OFFSET", None)
os.environ.setdefault("SUNTIMES_LOG_LEVEL", "DEBUG")

from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from suntimes.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def offline_astropy():
    """Keep astropy on its bundled IERS tables."""
    from astropy.utils import iers

    with iers.conf.set_temp("auto_download", False), \
         iers.conf.set_temp("iers_degraded_accuracy", "warn"):
        yield


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """New York City coordinates."""
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def london_coordinates() -> Coordinates:
    """London, placed on the prime meridian."""
    return Coordinates(latitude=51.5, longitude=0)


@pytest.fixture
def equator_coordinates() -> Coordinates:
    """Equator on the prime meridian."""
    return Coordinates(latitude=0, longitude=0)


@pytest.fixture
def arctic_coordinates() -> Coordinates:
    """Far north, inside the Arctic Circle."""
    return Coordinates(latitude=80, longitude=15)


@pytest.fixture
def summer_solstice() -> date:
    return date(2024, 6, 21)


@pytest.fixture
def winter_solstice() -> date:
    return date(2024, 12, 21)


@pytest.fixture
def march_equinox() -> date:
    return date(2024, 3, 20)


@pytest.fixture
def nyc_summer_options(sample_coordinates: Coordinates, summer_solstice: date) -> SuntimesOptions:
    """NYC on the summer solstice, in Eastern Daylight Time."""
    return SuntimesOptions.from_coordinates(sample_coordinates, summer_solstice, timezone=-4)

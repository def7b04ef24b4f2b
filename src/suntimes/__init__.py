"""Local sunrise, sunset and daylight duration for any location and date."""

from suntimes.astronomy.calculator import (
    NeverRises,
    NeverSets,
    Rises,
    SolarResult,
    compute_solar_times,
    solar_time_pair,
)
from suntimes.formatting.clock import format_clock, format_duration
from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions, SuntimesResult
from suntimes.service import suntimes, suntimes_for

__version__ = "0.1.0"

__all__ = [
    "Coordinates",
    "NeverRises",
    "NeverSets",
    "Rises",
    "SolarResult",
    "SuntimesOptions",
    "SuntimesResult",
    "compute_solar_times",
    "format_clock",
    "format_duration",
    "solar_time_pair",
    "suntimes",
    "suntimes_for",
]

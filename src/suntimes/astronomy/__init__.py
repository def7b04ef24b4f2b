"""Solar event calculations for sunrise, sunset and solar noon."""

from suntimes.astronomy.calculator import (
    NeverRises,
    NeverSets,
    Rises,
    SolarEvents,
    SolarResult,
    compute_solar_times,
    julian_day_number,
    solar_events,
    solar_time_pair,
)
from suntimes.astronomy.timezones import (
    FixedOffsetProvider,
    LocalTimezoneProvider,
    TimezoneProvider,
    resolve_timezone_offset,
)

__all__ = [
    "NeverRises",
    "NeverSets",
    "Rises",
    "SolarEvents",
    "SolarResult",
    "compute_solar_times",
    "julian_day_number",
    "solar_events",
    "solar_time_pair",
    "FixedOffsetProvider",
    "LocalTimezoneProvider",
    "TimezoneProvider",
    "resolve_timezone_offset",
]

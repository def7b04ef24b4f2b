"""Sunrise, sunset and daylight lookup for a location and date.

Combines the solar calculator with the clock formatters:

```python
from datetime import date
from suntimes import SuntimesOptions, suntimes

result = suntimes(
    SuntimesOptions(latitude=40.7128, longitude=-74.0060, date=date(2024, 6, 21), timezone=-4)
)
print(result.sunrise, result.sunset, result.daytime)
```
"""

from __future__ import annotations

import logging
from datetime import date as date_type

from suntimes.astronomy.calculator import (
    NeverRises,
    NeverSets,
    Rises,
    compute_solar_times,
)
from suntimes.astronomy.timezones import TimezoneProvider
from suntimes.formatting.clock import format_clock, format_duration
from suntimes.models.suntimes import SuntimesOptions, SuntimesResult

logger = logging.getLogger(__name__)

NEVER = "Never"
NOT_AVAILABLE = "N/A"


def suntimes(
    options: SuntimesOptions,
    *,
    tz_provider: TimezoneProvider | None = None,
) -> SuntimesResult:
    """Compute formatted sunrise, sunset and daytime duration.

    If the sun never rises, sunrise is "Never" and the other fields are
    empty; if it never sets, sunset is "Never". Any other unexpected result
    is reported as "N/A" in every field.
    """
    result = compute_solar_times(
        options.latitude,
        options.longitude,
        options.date,
        options.timezone,
        tz_provider=tz_provider,
    )

    if isinstance(result, NeverRises):
        return SuntimesResult(sunrise=NEVER, sunset="", daytime="")
    if isinstance(result, NeverSets):
        return SuntimesResult(sunrise="", sunset=NEVER, daytime="")
    if isinstance(result, Rises):
        return SuntimesResult(
            sunrise=format_clock(result.sunrise),
            sunset=format_clock(result.sunset),
            daytime=format_duration(result.sunrise, result.sunset),
        )

    logger.warning(f"Unexpected solar result: {result!r}")
    return SuntimesResult(
        sunrise=NOT_AVAILABLE,
        sunset=NOT_AVAILABLE,
        daytime=NOT_AVAILABLE,
    )


def suntimes_for(
    latitude: float,
    longitude: float,
    date: date_type,
    timezone: float | None = None,
) -> SuntimesResult:
    """Keyword shortcut for ``suntimes(SuntimesOptions(...))``."""
    return suntimes(
        SuntimesOptions(
            latitude=latitude,
            longitude=longitude,
            date=date,
            timezone=timezone,
        )
    )

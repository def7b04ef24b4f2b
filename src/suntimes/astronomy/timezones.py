"""UTC offset resolution for localizing solar events.

The offset used to convert UTC event times to local clock times is resolved
in this order:

1. An explicit offset passed by the caller
2. The ``utcoffset()`` of a timezone-aware datetime
3. A ``TimezoneProvider`` (injected, or the configured default)

The default provider is a fixed offset when ``SUNTIMES_DEFAULT_TIMEZONE_OFFSET``
is set, otherwise the host's local offset for the date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime
from typing import Callable

from suntimes.config import get_settings

logger = logging.getLogger(__name__)

# Any callable mapping a calendar date to a UTC offset in hours (east positive)
TimezoneProvider = Callable[[date_type], float]


@dataclass(frozen=True)
class FixedOffsetProvider:
    """Always returns the same UTC offset."""

    offset_hours: float

    def __call__(self, date: date_type) -> float:
        return self.offset_hours


class LocalTimezoneProvider:
    """UTC offset of the host's local timezone at noon on the given date.

    Noon is used so that a daylight saving transition in the small hours
    does not change the answer for the rest of the day.
    """

    def __call__(self, date: date_type) -> float:
        local_noon = datetime(date.year, date.month, date.day, 12).astimezone()
        offset = local_noon.utcoffset()
        return offset.total_seconds() / 3600 if offset else 0.0


def default_provider() -> TimezoneProvider:
    """Build the provider selected by configuration."""
    settings = get_settings()
    if settings.default_timezone_offset is not None:
        return FixedOffsetProvider(settings.default_timezone_offset)
    return LocalTimezoneProvider()


def aware_offset_hours(date: date_type) -> float | None:
    """UTC offset of an aware datetime in hours, or None for naive values."""
    if not isinstance(date, datetime) or date.tzinfo is None:
        return None
    offset = date.utcoffset()
    if offset is None:
        return None
    return offset.total_seconds() / 3600


def resolve_timezone_offset(
    date: date_type,
    timezone: float | None = None,
    provider: TimezoneProvider | None = None,
) -> float:
    """Resolve the UTC offset in hours to localize events on ``date``."""
    if timezone is not None:
        return timezone

    offset = aware_offset_hours(date)
    if offset is not None:
        logger.debug(f"Using offset {offset} from aware datetime {date.isoformat()}")
        return offset

    if provider is None:
        provider = default_provider()
    offset = provider(date)
    logger.debug(f"Using offset {offset} from {type(provider).__name__}")
    return offset

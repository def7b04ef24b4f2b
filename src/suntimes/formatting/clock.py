"""Clock and duration formatting for fractional-hour values."""

from __future__ import annotations

import math


def split_decimal_hours(decimal_hours: float) -> tuple[int, int, int]:
    """Split fractional hours into whole hours, minutes and seconds.

    Each component is truncated, never rounded: 6.9999 is 06:59:59.
    """
    hours = math.floor(decimal_hours)
    minutes = math.floor((decimal_hours - hours) * 60)
    seconds = math.floor(((decimal_hours - hours) * 60 - minutes) * 60)
    return hours, minutes, seconds


def format_clock(decimal_hours: float) -> str:
    """Format fractional hours as a 12-hour clock string.

    Examples:
        0 -> '12:00:00 AM'
        12 -> '12:00:00 PM'
        13.5 -> '01:30:00 PM'

    Values outside [0, 24) are not wrapped.
    """
    hours, minutes, seconds = split_decimal_hours(decimal_hours)

    ampm = "PM" if hours >= 12 else "AM"

    display_hours = hours
    if hours > 12:
        display_hours = hours - 12
    elif hours == 0:
        display_hours = 12

    return f"{display_hours:02d}:{minutes:02d}:{seconds:02d} {ampm}"


def format_duration(decimal_hours1: float, decimal_hours2: float) -> str:
    """Format the absolute time between two fractional-hour values as HH:MM:SS.

    Both values are truncated to whole seconds before subtracting, and the
    result is elapsed time, so it is never wrapped to a 12-hour clock.
    """
    seconds1 = math.floor(decimal_hours1 * 3600)
    seconds2 = math.floor(decimal_hours2 * 3600)
    diff_seconds = abs(seconds1 - seconds2)

    hours, minutes, seconds = split_decimal_hours(diff_seconds / 3600)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

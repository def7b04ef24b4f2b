"""Human-readable formatting of fractional-hour times."""

from suntimes.formatting.clock import format_clock, format_duration, split_decimal_hours

__all__ = [
    "format_clock",
    "format_duration",
    "split_decimal_hours",
]

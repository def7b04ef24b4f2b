"""Domain models for sunrise and sunset lookups."""

from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions, SuntimesResult

__all__ = [
    "Coordinates",
    "SuntimesOptions",
    "SuntimesResult",
]

"""Observer location for sunrise and sunset calculations."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, Field

_DEGREES = r"[-+]?(?:\d+\.?\d*|\.\d+)"

# "LAT,LON" or "LAT LON" in signed decimal degrees
LOCATION_PATTERN = re.compile(
    rf"^(?P<lat>{_DEGREES})\s*[,\s]\s*(?P<lon>{_DEGREES})$"
)


class Coordinates(BaseModel):
    """Observer position in signed decimal degrees.

    South latitudes and west longitudes are negative. Values outside
    -90..90 and -180..180 are accepted as-is; the solar calculations return
    meaningless numbers for them rather than failing.
    """

    latitude: float = Field(..., description="Degrees north of the equator")
    longitude: float = Field(..., description="Degrees east of the prime meridian")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Read an observer location typed on the command line.

        Examples:
            '51.5,-0.13' -> London
            '40.7128 -74.0060' -> New York City
        """
        match = LOCATION_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Cannot read location '{value}': expected LAT,LON in decimal "
                "degrees with south and west negative (e.g., '51.5,-0.13')"
            )
        return cls(
            latitude=float(match.group("lat")),
            longitude=float(match.group("lon")),
        )

    def __str__(self) -> str:
        north_south = "N" if self.latitude >= 0 else "S"
        east_west = "E" if self.longitude >= 0 else "W"
        return (
            f"{abs(self.latitude):.4f}°{north_south} "
            f"{abs(self.longitude):.4f}°{east_west}"
        )

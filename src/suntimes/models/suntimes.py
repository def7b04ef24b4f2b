"""Request and result models for sunrise/sunset lookups."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from suntimes.models.location import Coordinates


class SuntimesOptions(BaseModel):
    """Location, date and optional UTC offset for a sunrise/sunset lookup.

    The date may be a plain date or a datetime. Only its year, month and
    day are used, plus its UTC offset when it is timezone-aware and no
    explicit ``timezone`` is given.
    """

    latitude: float = Field(..., description="Latitude in decimal degrees (south negative)")
    longitude: float = Field(..., description="Longitude in decimal degrees (west negative)")
    date: dt.datetime | dt.date = Field(..., description="Calendar date of the lookup")
    timezone: float | None = Field(
        default=None,
        description="UTC offset in hours, east positive (e.g., -8 for PST)",
    )

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Coordinates,
        date: dt.date,
        timezone: float | None = None,
    ) -> SuntimesOptions:
        """Create options from a Coordinates value."""
        return cls(
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            date=date,
            timezone=timezone,
        )


class SuntimesResult(BaseModel):
    """Formatted sunrise, sunset and daylight duration.

    Each field is a clock string, "Never", "N/A" or empty.
    """

    sunrise: str
    sunset: str
    daytime: str

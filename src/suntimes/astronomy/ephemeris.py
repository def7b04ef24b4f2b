"""Sun altitude cross-check using astropy.

The closed-form calculator targets the instant when the sun's centre is at
-0.83° (geometric). This module computes the precise altitude at those
instants so the approximation error can be inspected. The error grows
away from the prime meridian, where the longitude term of mean solar noon
shifts the computed transit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from astropy import units as u
from astropy.coordinates import AltAz, EarthLocation, get_sun
from astropy.time import Time

from suntimes.astronomy.calculator import HORIZON_ALTITUDE_DEG, SolarEvents, solar_events
from suntimes.models.location import Coordinates
from suntimes.models.suntimes import SuntimesOptions


@dataclass
class EventCheck:
    """Precise sun altitude at a computed solar event."""

    event: Literal["sunrise", "solar_noon", "sunset"]
    time: datetime  # UTC instant of the event
    altitude_deg: float

    @property
    def horizon_error_deg(self) -> float:
        """Distance from the targeted horizon altitude."""
        return self.altitude_deg - HORIZON_ALTITUDE_DEG


def _coords_to_earth_location(coords: Coordinates) -> EarthLocation:
    """Convert our Coordinates to astropy EarthLocation."""
    return EarthLocation(lat=coords.latitude * u.deg, lon=coords.longitude * u.deg)


def get_sun_altitude(coords: Coordinates, time: datetime) -> float:
    """Calculate the sun's altitude in degrees at a given UTC instant.

    Args:
        coords: Geographic coordinates
        time: Time to calculate the altitude for (should be timezone-aware)

    Returns:
        Altitude above the horizon in degrees (negative = below)
    """
    location = _coords_to_earth_location(coords)
    obs_time = Time(time)

    altaz_frame = AltAz(obstime=obs_time, location=location)
    sun_altaz = get_sun(obs_time).transform_to(altaz_frame)

    return float(sun_altaz.alt.deg)


def julian_to_datetime(julian_date: float) -> datetime:
    """Convert a UTC Julian date to an aware datetime."""
    return Time(julian_date, format="jd", scale="utc").to_datetime(timezone=timezone.utc)


def check_solar_times(options: SuntimesOptions) -> list[EventCheck]:
    """Compute precise sun altitudes at the day's computed solar events.

    Event instants come from the Julian dates of the calculation, before any
    local-clock wrapping, so they do not depend on the UTC offset. Returns
    an empty list when the sun never rises or never sets.
    """
    events = solar_events(options.latitude, options.longitude, options.date)
    if not isinstance(events, SolarEvents):
        return []

    coords = options.coordinates
    checks = []
    for event, julian_date in (
        ("sunrise", events.rise),
        ("solar_noon", events.transit),
        ("sunset", events.set),
    ):
        when = julian_to_datetime(julian_date)
        checks.append(
            EventCheck(
                event=event,
                time=when,
                altitude_deg=get_sun_altitude(coords, when),
            )
        )
    return checks

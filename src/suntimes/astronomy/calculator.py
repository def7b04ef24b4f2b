"""Closed-form sunrise and sunset calculations.

This module implements the sunrise equation:
- Julian Day Number of the calendar date
- Mean solar noon, mean anomaly and equation of the center
- Ecliptic longitude, solar transit and declination
- Hour angle of the sun at the horizon (-0.83°, refraction and solar disc)

References:
- https://en.wikipedia.org/wiki/Julian_day#Converting_Julian_or_Gregorian_calendar_date_to_Julian_Day_Number
- https://en.wikipedia.org/wiki/Sunrise_equation#Complete_calculation_on_Earth

Results are local fractional hours (6.5 = 06:30), or one of the polar
variants when the sun stays below or above the horizon all day.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date as date_type
from typing import Union

from suntimes.astronomy.timezones import TimezoneProvider, resolve_timezone_offset

logger = logging.getLogger(__name__)

J2000 = 2451545.0009  # Julian date of mean solar noon at the J2000 epoch
HORIZON_ALTITUDE_DEG = -0.83  # Sun's upper limb on the horizon, with refraction
OBLIQUITY_DEG = 23.45  # Axial tilt of the Earth


@dataclass(frozen=True)
class Rises:
    """Sun rises and sets on the given date.

    All values are local time in fractional hours, in the range [0, 24).
    """

    sunrise: float
    sunset: float
    solar_noon: float

    def as_pair(self) -> tuple[float | None, float | None]:
        return (self.sunrise, self.sunset)


@dataclass(frozen=True)
class NeverRises:
    """Sun stays below the horizon all day (polar night)."""

    def as_pair(self) -> tuple[float | None, float | None]:
        return (None, -1)


@dataclass(frozen=True)
class NeverSets:
    """Sun stays above the horizon all day (midnight sun)."""

    def as_pair(self) -> tuple[float | None, float | None]:
        return (-1, None)


SolarResult = Union[Rises, NeverRises, NeverSets]


def julian_day_number(year: int, month: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian calendar date.

    Month is 1-indexed (January = 1).
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


@dataclass(frozen=True)
class SolarEvents:
    """Julian dates (UTC) of the day's sunrise, transit and sunset."""

    julian_day: int  # Julian Day Number of the requested calendar date
    rise: float
    transit: float
    set: float


def _polar_result(latitude: float, declination: float) -> SolarResult:
    """Result at the geographic poles, where the hour angle is undefined.

    The sun circles the sky at a constant altitude equal to the declination
    (negated in the southern hemisphere).
    """
    altitude = math.copysign(1.0, latitude) * declination
    if altitude > HORIZON_ALTITUDE_DEG:
        return NeverSets()
    return NeverRises()


def _hour_angle_cosine(latitude: float, declination: float) -> float:
    """Cosine of the hour angle at which the sun crosses the horizon."""
    return (
        _sin(HORIZON_ALTITUDE_DEG) - _sin(latitude) * _sin(declination)
    ) / (_cos(latitude) * _cos(declination))


def solar_events(
    latitude: float,
    longitude: float,
    date: date_type,
) -> SolarEvents | NeverRises | NeverSets:
    """Julian dates of sunrise, transit and sunset, or a polar variant.

    Only the year, month and day of ``date`` are used.
    """
    jdn = julian_day_number(date.year, date.month, date.day)

    # Mean solar noon, rounded half up to a whole day count
    n_star = jdn - J2000 - longitude / 360
    n = math.floor(n_star + 0.5)
    solar_noon = J2000 + longitude / 360 + n

    mean_anomaly = 356.047 + 0.9856002585 * n
    center = (
        1.9148 * _sin(mean_anomaly)
        + 0.02 * _sin(2 * mean_anomaly)
        + 0.0003 * _sin(3 * mean_anomaly)
    )
    ecliptic_longitude = math.fmod(mean_anomaly + 102.9372 + center + 180, 360)
    j_transit = (
        solar_noon
        + 0.0053 * _sin(mean_anomaly)
        - 0.0069 * _sin(2 * ecliptic_longitude)
    )
    declination = math.degrees(
        math.asin(_sin(ecliptic_longitude) * _sin(OBLIQUITY_DEG))
    )

    # cos(90°) is not exactly zero in floating point, so test the pole directly
    if abs(latitude) == 90 or _cos(latitude) * _cos(declination) == 0:
        result = _polar_result(latitude, declination)
        logger.debug(f"Pole at latitude {latitude}: {type(result).__name__}")
        return result

    cos_omega = _hour_angle_cosine(latitude, declination)
    if cos_omega > 1:
        logger.debug(f"Sun never rises at {latitude},{longitude} on {date}")
        return NeverRises()
    if cos_omega < -1:
        logger.debug(f"Sun never sets at {latitude},{longitude} on {date}")
        return NeverSets()

    omega = math.degrees(math.acos(cos_omega))
    return SolarEvents(
        julian_day=jdn,
        rise=j_transit - omega / 360,
        transit=j_transit,
        set=j_transit + omega / 360,
    )


def compute_solar_times(
    latitude: float,
    longitude: float,
    date: date_type,
    timezone: float | None = None,
    *,
    tz_provider: TimezoneProvider | None = None,
) -> SolarResult:
    """Calculate the local sunrise and sunset for a date and location.

    Args:
        latitude: Latitude in degrees (south is negative)
        longitude: Longitude in degrees (west is negative)
        date: Calendar date; only year, month and day are used, plus the
            UTC offset of an aware datetime when no timezone is given
        timezone: UTC offset in hours (e.g. -8 for PST)
        tz_provider: Offset provider used when neither ``timezone`` nor an
            aware datetime supplies the offset

    Returns:
        Rises with local fractional hours, NeverRises or NeverSets
    """
    events = solar_events(latitude, longitude, date)
    if not isinstance(events, SolarEvents):
        return events

    tz = resolve_timezone_offset(date, timezone, tz_provider)

    return Rises(
        sunrise=_localize(events.rise, events.julian_day, tz),
        sunset=_localize(events.set, events.julian_day, tz),
        solar_noon=_localize(events.transit, events.julian_day, tz),
    )


def _localize(julian_date: float, julian_day: int, tz: float) -> float:
    utc_hours = 24 * (julian_date - julian_day) + 12
    return (utc_hours + tz + 24) % 24


def solar_time_pair(
    latitude: float,
    longitude: float,
    date: date_type,
    timezone: float | None = None,
) -> tuple[float | None, float | None]:
    """Sunrise and sunset as a raw pair.

    ``(None, -1)`` means the sun never rises, ``(-1, None)`` that it never
    sets; otherwise both values are local fractional hours.
    """
    return compute_solar_times(latitude, longitude, date, timezone).as_pair()

"""Solar position layer — Julian Day, low-precision solar ephemeris, and hour-angle solving."""

import logging
import math
from datetime import datetime

from prayertimes.models import SolarGeometry, normalize_hours

logger = logging.getLogger(__name__)

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Refraction (0.5667°) plus solar semi-diameter (0.2667°)
SUNRISE_ALTITUDE = -0.8333

_TWO_PI = 2.0 * math.pi


def date_to_julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0,
) -> float:
    """Convert a proleptic Gregorian civil date-time to a Julian Day.

    Args:
        year: Gregorian year (astronomical numbering).
        month: Month 1-12.
        day: Day of month.
        hour: Hour of day, treated as UT.
        minute: Minute of hour.
        second: Second of minute.

    Returns:
        Julian Day as a float; 2000-01-01 12:00 maps to 2451545.0.
    """
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    jd = (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )
    return jd + (hour + minute / 60.0 + second / 3600.0) / 24.0


def julian_day_from_datetime(dt: datetime) -> float:
    """Julian Day for the wall-clock fields of dt (tzinfo is ignored)."""
    return date_to_julian_day(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second + dt.microsecond / 1e6,
    )


def hour_angle(latitude: float, declination: float, altitude: float) -> float:
    """Hour angle (degrees) at which the sun reaches a target altitude.

    Solves cos(H) = (sin(alt) - sin(lat)·sin(dec)) / (cos(lat)·cos(dec)).
    Where the altitude is never reached the cosine leaves [-1, 1] and the
    result saturates instead of raising: 0.0 when the sun never gets that
    low, 180.0 when it never gets that high.

    Args:
        latitude: Observer latitude in degrees.
        declination: Solar declination in radians.
        altitude: Target altitude in degrees (negative = below horizon).

    Returns:
        Hour angle in degrees, within [0, 180].
    """
    lat = math.radians(latitude)
    cos_h = (math.sin(math.radians(altitude)) - math.sin(lat) * math.sin(declination)) / (
        math.cos(lat) * math.cos(declination)
    )
    if cos_h > 1:
        logger.debug(
            "altitude %.4f° unreachable at lat %.4f (cos H = %.6f); hour angle clamped to 0",
            altitude,
            latitude,
            cos_h,
        )
        return 0.0
    if cos_h < -1:
        logger.debug(
            "altitude %.4f° unreachable at lat %.4f (cos H = %.6f); hour angle clamped to 180",
            altitude,
            latitude,
            cos_h,
        )
        return 180.0
    return math.degrees(math.acos(cos_h))


def _wrap_signed(angle: float) -> float:
    """Wrap radians into [-π, π)."""
    return (angle + math.pi) % _TWO_PI - math.pi


def solar_position(jd: float, latitude: float, longitude: float) -> SolarGeometry:
    """Compute the sun's geometry for one instant and observer.

    Low-precision solar coordinates (mean anomaly, equation of center,
    obliquity of the ecliptic) good to a few arcseconds over the modern era.
    Transit, sunrise and sunset are fractional hours counted from the
    instant jd describes, so pass 0h UT of a date to read them as UT.

    Args:
        jd: Julian Day of the instant.
        latitude: Observer latitude in degrees.
        longitude: Observer longitude in degrees, east positive.

    Returns:
        SolarGeometry for the given instant and observer.
    """
    lat = math.radians(latitude)
    lng = math.radians(longitude)

    d = jd - J2000
    t = d / DAYS_PER_CENTURY

    eps = math.radians(
        23.43929111 - (46.8150 * t + 0.00059 * t * t - 0.001813 * t * t * t) / 3600.0
    )
    m = math.radians(
        357.52910 + 35999.05030 * t - 0.0001559 * t * t - 0.00000048 * t * t * t
    )
    l0 = math.radians(280.46645 + 36000.76983 * t + 0.0003032 * t * t)
    c = math.radians(
        (1.914600 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
        + (0.019993 - 0.000101 * t) * math.sin(2 * m)
        + 0.000290 * math.sin(3 * m)
    )
    true_lng = l0 + c

    ra = math.atan2(math.cos(eps) * math.sin(true_lng), math.cos(true_lng))
    if ra < 0:
        ra += _TWO_PI
    dec = math.asin(math.sin(eps) * math.sin(true_lng))

    gmst = math.radians(
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )

    h = _wrap_signed(gmst + lng - ra)
    h0 = gmst + lng + math.pi - ra
    transit = normalize_hours(12.0 - math.degrees(h0) / 15.0)

    sin_alt = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(h)
    rise_set = hour_angle(latitude, dec, SUNRISE_ALTITUDE) / 15.0

    return SolarGeometry(
        julian_day=jd,
        declination=dec,
        right_ascension=ra,
        equation_of_time=math.degrees(_wrap_signed(l0 - ra)) * 4.0,
        transit=transit,
        sunrise=normalize_hours(transit - rise_set),
        sunset=normalize_hours(transit + rise_set),
        hour_angle=h,
        sun_altitude=math.asin(max(-1.0, min(1.0, sin_alt))),
        sun_azimuth=math.atan2(
            -math.sin(h), math.cos(lat) * math.tan(dec) - math.sin(lat) * math.cos(h)
        ),
    )

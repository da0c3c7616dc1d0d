"""Prayer-time derivation — turns solar geometry and a Method into the nine daily time points."""

import math

from prayertimes.models import (
    FixedOffsetMinutes,
    Method,
    MidnightPolicy,
    PrayerTimeSet,
    SolarGeometry,
    normalize_hours,
)
from prayertimes.solar import hour_angle

IMSAK_MINUTES = 10.0


def elevation_correction(elevation: float) -> float:
    """Extra horizon dip in degrees seen from an elevated observer."""
    if elevation > 0:
        return 0.0347 * math.sqrt(elevation)
    return 0.0


def asr_altitude(latitude: float, declination: float, factor: float) -> float:
    """Sun altitude (degrees) at which shadows reach factor × height + noon shadow.

    Args:
        latitude: Observer latitude in degrees.
        declination: Solar declination in radians.
        factor: Shadow-length factor (1 standard, 2 Hanafi).

    Returns:
        Positive altitude in degrees.
    """
    zenith_at_noon = abs(math.radians(latitude) - declination)
    return math.degrees(math.atan(1.0 / (factor + math.tan(zenith_at_noon))))


def night_midpoint(sunset: float, morning: float) -> float:
    """Midpoint between sunset and a morning time point, across midnight if needed."""
    if morning > sunset:
        return (sunset + morning) / 2.0
    return normalize_hours((sunset + morning + 24.0) / 2.0)


def derive_prayer_times(
    geometry: SolarGeometry,
    latitude: float,
    method: Method,
    elevation: float = 0.0,
    midnight: MidnightPolicy = MidnightPolicy.STANDARD,
) -> PrayerTimeSet:
    """Derive the daily time points from one day's solar geometry.

    Sunrise, Dhuhr and Sunset are taken from the geometry unchanged. Fajr,
    Asr, Maghrib and Isha solve the hour angle for the method's target
    altitude around the transit; the elevation correction deepens the Fajr
    and angular Isha depressions only.

    Args:
        geometry: Output of solar_position for the day.
        latitude: Observer latitude in degrees.
        method: Calculation convention.
        elevation: Observer elevation in metres.
        midnight: Which morning time point closes the night.

    Returns:
        PrayerTimeSet with every value in [0, 24), in the same clock as the geometry.
    """
    dec = geometry.declination
    transit = geometry.transit
    corr = elevation_correction(elevation)

    fajr = transit - hour_angle(latitude, dec, -(method.fajr_angle + corr)) / 15.0

    asr_alt = asr_altitude(latitude, dec, method.asr_factor)
    asr = transit + hour_angle(latitude, dec, asr_alt) / 15.0

    if method.maghrib_angle > 0:
        maghrib = transit + hour_angle(latitude, dec, -method.maghrib_angle) / 15.0
    else:
        maghrib = geometry.sunset

    if isinstance(method.isha, FixedOffsetMinutes):
        isha = maghrib + method.isha.minutes / 60.0
    else:
        isha = transit + hour_angle(latitude, dec, -(method.isha.degrees + corr)) / 15.0

    fajr = normalize_hours(fajr)
    if midnight is MidnightPolicy.JAFARI:
        night_end = geometry.sunrise
    else:
        night_end = fajr

    return PrayerTimeSet(
        imsak=normalize_hours(fajr - IMSAK_MINUTES / 60.0),
        fajr=fajr,
        sunrise=normalize_hours(geometry.sunrise),
        dhuhr=normalize_hours(transit),
        asr=normalize_hours(asr),
        sunset=normalize_hours(geometry.sunset),
        maghrib=normalize_hours(maghrib),
        isha=normalize_hours(isha),
        midnight=night_midpoint(geometry.sunset, night_end),
    )

"""Facade layer — input validation, timezone resolution, and the prayer-time pipeline."""

import logging
import math
from datetime import date, datetime, time, tzinfo

from pytz import FixedOffset, UnknownTimeZoneError, timezone
from timezonefinder import TimezoneFinder

from prayertimes.derive import derive_prayer_times
from prayertimes.errors import (
    InvalidCoordinateError,
    InvalidDateError,
    InvalidElevationError,
    InvalidMidnightPolicyError,
    PrayerTimesError,
    TimezoneResolutionError,
)
from prayertimes.methods import DEFAULT_METHOD, get_method
from prayertimes.models import (
    Method,
    MidnightPolicy,
    ObserverContext,
    PrayerDay,
    PrayerStatus,
    PrayerTimeSet,
    QueryInput,
)
from prayertimes.solar import date_to_julian_day, solar_position

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()

# Prayers that open a window, in daily order. Sunrise closes the Fajr window.
_WINDOWS: tuple[str, ...] = ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha")


def validate_coordinates(lat: float, lng: float) -> None:
    """Reject coordinates the solar engine must never see.

    Raises:
        InvalidCoordinateError: On non-finite values or values out of range.
    """
    if not isinstance(lat, (int, float)) or not math.isfinite(lat) or not -90 <= lat <= 90:
        raise InvalidCoordinateError(f"Invalid latitude: {lat!r}")
    if not isinstance(lng, (int, float)) or not math.isfinite(lng) or not -180 <= lng <= 180:
        raise InvalidCoordinateError(f"Invalid longitude: {lng!r}")


def _parse_offset(value: str | float) -> float | None:
    """Numeric hour offset from a number or numeric string, else None."""
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value.strip())
    except ValueError:
        return None


def _format_offset(hours: float) -> str:
    sign = "+" if hours >= 0 else "-"
    total = round(abs(hours) * 60)
    return f"UTC{sign}{total // 60:02d}:{total % 60:02d}"


def resolve_timezone(tz: str | float | None, lat: float, lng: float) -> tzinfo:
    """Resolve a timezone given as an IANA name, an hour offset, or nothing.

    Args:
        tz: IANA name ("Africa/Casablanca"), numeric offset in hours (3, -4.5,
            "+5.5"), or None to look the zone up from the coordinates.
        lat: Latitude used for the coordinate lookup.
        lng: Longitude used for the coordinate lookup.

    Returns:
        A pytz tzinfo supporting localize().

    Raises:
        TimezoneResolutionError: When the zone is unknown, the offset is out
            of range, or no zone covers the coordinates.
    """
    if tz is None:
        tz_str = _tf.timezone_at(lat=lat, lng=lng)
        if tz_str is None:
            raise TimezoneResolutionError(f"Timezone not found: lat={lat}, lng={lng}")
        return timezone(tz_str)

    offset = _parse_offset(tz)
    if offset is not None:
        if not math.isfinite(offset) or not -12 <= offset <= 14:
            raise TimezoneResolutionError(f"UTC offset out of range: {tz!r}")
        return FixedOffset(round(offset * 60))

    try:
        return timezone(tz.strip())
    except UnknownTimeZoneError:
        raise TimezoneResolutionError(f"Unknown timezone: {tz!r}") from None


def resolve_context(query: QueryInput) -> ObserverContext:
    """Validate a QueryInput and resolve it to an ObserverContext.

    The UTC offset is the one in effect at local noon, so DST transitions
    in the small hours do not shift the day's times.

    Raises:
        InvalidCoordinateError: On out-of-range coordinates.
        InvalidElevationError: On a non-finite elevation.
        InvalidDateError: When query.when is not "YYYY-MM-DD".
        TimezoneResolutionError: When the timezone cannot be resolved.
    """
    validate_coordinates(query.lat, query.lng)
    elevation = query.elevation or 0.0
    if not isinstance(elevation, (int, float)) or not math.isfinite(elevation):
        raise InvalidElevationError(f"Invalid elevation: {query.elevation!r}")
    try:
        local_date = datetime.strptime(query.when.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise InvalidDateError(f"Invalid date (expected YYYY-MM-DD): {query.when!r}") from None

    local_tz = resolve_timezone(query.timezone, query.lat, query.lng)
    noon = local_tz.localize(datetime.combine(local_date, time(12)), is_dst=False)
    offset_hours = noon.utcoffset().total_seconds() / 3600.0
    zone_name = getattr(local_tz, "zone", None) or _format_offset(offset_hours)

    context = ObserverContext(
        lat=float(query.lat),
        lng=float(query.lng),
        elevation=max(0.0, float(elevation)),
        local_date=local_date,
        timezone_name=zone_name,
        utc_offset_hours=offset_hours,
    )
    logger.debug("resolved context: %s", context)
    return context


def _coerce_method(method: str | Method) -> Method:
    if isinstance(method, Method):
        return method
    return get_method(method)


def _coerce_midnight(midnight: str | MidnightPolicy) -> MidnightPolicy:
    if isinstance(midnight, MidnightPolicy):
        return midnight
    try:
        return MidnightPolicy(str(midnight).strip().lower())
    except ValueError:
        raise InvalidMidnightPolicyError(f"Invalid midnight policy: {midnight!r}") from None


def compute_prayer_times(
    context: ObserverContext,
    method: str | Method = DEFAULT_METHOD,
    midnight: str | MidnightPolicy = MidnightPolicy.STANDARD,
    adjustments: dict[str, float] | None = None,
) -> PrayerDay:
    """Compute one day of prayer times in the context's local clock.

    The solar geometry is taken at 0h UT of the local date, derived in UT,
    then shifted by the UTC offset and tuned.

    Args:
        context: Resolved observer and date.
        method: Built-in method name or a custom Method.
        midnight: Midnight policy or its value ("standard", "jafari").
        adjustments: Minutes to add per time point, keyed by display name.

    Returns:
        PrayerDay with local times in [0, 24).

    Raises:
        UnknownMethodError: On an unknown method name.
        InvalidMidnightPolicyError: On an unknown midnight policy.
        PrayerTimesError: On an adjustment for an unknown time point or a
            non-finite number of minutes.
    """
    calc_method = _coerce_method(method)
    policy = _coerce_midnight(midnight)

    d: date = context.local_date
    jd = date_to_julian_day(d.year, d.month, d.day)
    geometry = solar_position(jd, context.lat, context.lng)
    utc_times = derive_prayer_times(
        geometry, context.lat, calc_method, context.elevation, policy
    )
    times = utc_times.shifted(context.utc_offset_hours)

    if adjustments:
        for name, minutes in adjustments.items():
            if not isinstance(minutes, (int, float)) or not math.isfinite(minutes):
                raise PrayerTimesError(f"Invalid adjustment for {name!r}: {minutes!r}")
        try:
            times = times.adjusted(adjustments)
        except KeyError as e:
            raise PrayerTimesError(f"Cannot adjust unknown time point: {e.args[0]!r}") from None

    logger.debug(
        "%s %s method=%s midnight=%s transit=%.4f UT",
        d.isoformat(),
        context.timezone_name,
        calc_method.name,
        policy.value,
        geometry.transit,
    )
    return PrayerDay(context=context, method=calc_method, midnight=policy, times=times)


def current_prayer(times: PrayerTimeSet, now: float | datetime) -> PrayerStatus:
    """Find the prayer window containing now and the time left until the next one.

    Args:
        times: Local prayer times.
        now: Local clock as fractional hours, or a datetime whose wall-clock
            fields are in the same zone as times.

    Returns:
        PrayerStatus. After Isha the next prayer is tomorrow's Fajr.
    """
    if isinstance(now, datetime):
        now = now.hour + now.minute / 60.0 + now.second / 3600.0
    values = times.as_dict()

    # Hours since Fajr, so an Isha past midnight still follows Maghrib.
    fajr = values["Fajr"]
    since_fajr = {name: (values[name] - fajr) % 24.0 for name in _WINDOWS}
    elapsed = (now - fajr) % 24.0

    current, upcoming, next_at = "Isha", "Fajr", 24.0
    for prev, name in zip(_WINDOWS, _WINDOWS[1:]):
        if elapsed < since_fajr[name]:
            current, upcoming, next_at = prev, name, since_fajr[name]
            break

    remaining = round((next_at - elapsed) * 60)
    return PrayerStatus(
        current=current,
        next=upcoming,
        minutes_remaining=remaining,
        time_remaining=f"{remaining // 60:02d}:{remaining % 60:02d}",
    )


def run(
    query: QueryInput,
    method: str | Method = DEFAULT_METHOD,
    midnight: str | MidnightPolicy = MidnightPolicy.STANDARD,
    adjustments: dict[str, float] | None = None,
) -> PrayerDay:
    """Top-level entry point: takes a QueryInput and returns a PrayerDay.

    Args:
        query: User input (coordinates, date, timezone, elevation).
        method: Built-in method name or a custom Method.
        midnight: Midnight policy or its value.
        adjustments: Minutes to add per time point, keyed by display name.

    Returns:
        Fully computed PrayerDay.
    """
    context = resolve_context(query)
    return compute_prayer_times(context, method, midnight, adjustments)

"""Clock-string renderer: fractional hours to 24h, 12h, float, or ISO-8601 output."""

from prayertimes.models import PrayerDay, TimeFormat


def _split(hours: float) -> tuple[int, int, int]:
    """Truncate fractional hours into (hours, minutes, seconds)."""
    h = int(hours)
    minutes_f = (hours - h) * 60
    m = int(minutes_f)
    s = int((minutes_f - m) * 60)
    return h, m, s


def _offset_designator(utc_offset_hours: float | None) -> str:
    if not utc_offset_hours:
        return "Z"
    sign = "+" if utc_offset_hours > 0 else "-"
    total = round(abs(utc_offset_hours) * 60)
    return f"{sign}{total // 60:02d}:{total % 60:02d}"


def format_time(
    hours: float,
    fmt: TimeFormat = TimeFormat.H24,
    utc_offset_hours: float | None = None,
) -> str | float:
    """Format one time point.

    Minutes and seconds are truncated, not rounded, so a value never rolls
    over into the next hour.

    Args:
        hours: Fractional hours in [0, 24).
        fmt: Output format.
        utc_offset_hours: Zone offset for ISO-8601 output; None or 0 renders "Z".

    Returns:
        "HH:MM", "h:MM AM", the unchanged float, or "THH:MM:SS±HH:MM".
    """
    if fmt is TimeFormat.FLOAT:
        return hours

    h, m, s = _split(hours)
    if fmt is TimeFormat.H12:
        suffix = "PM" if h >= 12 else "AM"
        return f"{h % 12 or 12}:{m:02d} {suffix}"
    if fmt is TimeFormat.ISO8601:
        return f"T{h:02d}:{m:02d}:{s:02d}{_offset_designator(utc_offset_hours)}"
    return f"{h:02d}:{m:02d}"


def format_times(day: PrayerDay, fmt: TimeFormat = TimeFormat.H24) -> dict[str, str | float]:
    """Format every time point of a PrayerDay, in display order."""
    offset = day.context.utc_offset_hours
    return {
        name: format_time(value, fmt, offset)
        for name, value in day.times.as_dict().items()
    }

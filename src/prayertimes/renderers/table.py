"""Plain-text table renderer for terminal output."""

from prayertimes.models import PrayerDay, PrayerStatus, TimeFormat
from prayertimes.renderers.clock import format_times


def render_table(
    day: PrayerDay,
    fmt: TimeFormat = TimeFormat.H24,
    status: PrayerStatus | None = None,
) -> str:
    """Render a PrayerDay as a header plus one aligned line per time point.

    Args:
        day: Fully computed prayer times.
        fmt: Clock format for the values.
        status: Optional current/next prayer line appended at the end.

    Returns:
        Multi-line string without a trailing newline.
    """
    ctx = day.context
    lines = [
        f"Prayer times for {ctx.local_date.isoformat()} "
        f"({ctx.lat:.4f}, {ctx.lng:.4f}) {ctx.timezone_name}",
        f"Method: {day.method.name}"
        + (f" — {day.method.description}" if day.method.description else "")
        + f" · midnight: {day.midnight.value}",
        "",
    ]
    formatted = format_times(day, fmt)
    width = max(len(name) for name in formatted)
    for name, value in formatted.items():
        shown = value if isinstance(value, str) else f"{value:.4f}"
        lines.append(f"{name:<{width}}  {shown}")
    if status is not None:
        lines.append("")
        lines.append(
            f"Now: {status.current} · next: {status.next} in {status.time_remaining}"
        )
    return "\n".join(lines)

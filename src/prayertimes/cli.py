"""CLI entry point for printing one day of prayer times.

    prayertimes 33.5733 -7.6454 --date 2025-01-01 --timezone Africa/Casablanca
    uv run python -m prayertimes.cli 21.4225 39.8262 --method makkah --format 12h
"""

import argparse
import logging
import math
import sys
from datetime import datetime, timezone

from dotenv import load_dotenv

from prayertimes.compute import current_prayer, resolve_timezone, run, validate_coordinates
from prayertimes.config import load_settings
from prayertimes.errors import PrayerTimesError
from prayertimes.methods import available_methods
from prayertimes.models import TIME_NAMES, MidnightPolicy, QueryInput, TimeFormat
from prayertimes.renderers.table import render_table

logger = logging.getLogger(__name__)


def _parse_tune(items: list[str]) -> dict[str, float]:
    """Parse NAME=MINUTES pairs ("fajr=2", "Isha=-3") into display-name keys."""
    by_lower = {name.lower(): name for name in TIME_NAMES}
    adjustments: dict[str, float] = {}
    for item in items:
        name, sep, minutes = item.partition("=")
        key = by_lower.get(name.strip().lower())
        if not sep or key is None:
            raise PrayerTimesError(f"Invalid --tune value: {item!r} (expected NAME=MINUTES)")
        try:
            value = float(minutes)
        except ValueError:
            raise PrayerTimesError(f"Invalid --tune minutes: {item!r}") from None
        if not math.isfinite(value):
            raise PrayerTimesError(f"Invalid --tune minutes: {item!r}")
        adjustments[key] = value
    return adjustments


def _today_in(tz: str | None, lat: float, lng: float) -> str:
    """Today's date, as YYYY-MM-DD, in the zone the query will resolve to."""
    validate_coordinates(lat, lng)
    return datetime.now(resolve_timezone(tz, lat, lng)).date().isoformat()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prayertimes",
        description="Compute the daily Islamic prayer times for a location.",
    )
    parser.add_argument("lat", type=float, help="latitude in decimal degrees")
    parser.add_argument("lng", type=float, help="longitude in decimal degrees (east positive)")
    parser.add_argument("--date", help="local date YYYY-MM-DD (default: today)")
    parser.add_argument(
        "--timezone",
        help="IANA zone or hour offset (default: looked up from the coordinates)",
    )
    parser.add_argument("--elevation", type=float, help="elevation in metres")
    parser.add_argument(
        "--method",
        help=f"calculation method: {', '.join(available_methods())}",
    )
    parser.add_argument(
        "--midnight",
        choices=[p.value for p in MidnightPolicy],
        help="midnight policy",
    )
    parser.add_argument(
        "--format",
        dest="time_format",
        choices=[f.value for f in TimeFormat],
        help="output clock format",
    )
    parser.add_argument(
        "--tune",
        action="append",
        default=[],
        metavar="NAME=MIN",
        help="per-prayer minute adjustment, repeatable, e.g. --tune fajr=2 --tune isha=-3",
    )
    parser.add_argument(
        "--now",
        action="store_true",
        help="also show the current and next prayer",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        tz = args.timezone or settings.timezone
        query = QueryInput(
            lat=args.lat,
            lng=args.lng,
            when=args.date or _today_in(tz, args.lat, args.lng),
            timezone=tz,
            elevation=args.elevation if args.elevation is not None else settings.elevation,
        )
        day = run(
            query,
            method=args.method or settings.method,
            midnight=args.midnight or settings.midnight,
            adjustments=_parse_tune(args.tune),
        )
        try:
            fmt = TimeFormat(args.time_format or settings.time_format)
        except ValueError:
            raise PrayerTimesError(
                f"Invalid time format: {settings.time_format!r}"
            ) from None

        status = None
        if args.now:
            status = current_prayer(day.times, _local_now(day.context.utc_offset_hours))
    except PrayerTimesError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("computed %s for %s", day.method.name, day.context)
    print(render_table(day, fmt, status))
    return 0


def _local_now(utc_offset_hours: float) -> float:
    """Current wall-clock hour in the zone of the computed day."""
    now = datetime.now(timezone.utc)
    hours = now.hour + now.minute / 60.0 + now.second / 3600.0 + utc_offset_hours
    return hours % 24.0


if __name__ == "__main__":
    sys.exit(main())

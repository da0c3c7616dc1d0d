"""Data model definitions — explicit boundaries between input, solar, derive, and render layers."""

import dataclasses
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from prayertimes.errors import InvalidMethodError

# Display order of the nine time points.
TIME_NAMES: tuple[str, ...] = (
    "Imsak",
    "Fajr",
    "Sunrise",
    "Dhuhr",
    "Asr",
    "Sunset",
    "Maghrib",
    "Isha",
    "Midnight",
)


def normalize_hours(value: float) -> float:
    """Reduce an hour value into [0, 24)."""
    h = value % 24.0
    if h < 0:
        h += 24.0
    # -1e-17 % 24.0 rounds up to exactly 24.0
    return 0.0 if h >= 24.0 else h


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    when: str  # "YYYY-MM-DD" local civil date
    timezone: str | float | None = None  # IANA name, hour offset, or None to look up
    elevation: float = 0.0  # Metres above sea level


@dataclass(frozen=True)
class ObserverContext:
    """Result of validation + timezone resolution. Input to the solar engine."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    elevation: float  # Metres, never negative
    local_date: date  # Civil date the times are computed for
    timezone_name: str  # Resolved zone ("Africa/Casablanca", "UTC+03:00", ...)
    utc_offset_hours: float  # Offset in effect at local noon of local_date


@dataclass(frozen=True)
class SolarGeometry:
    """Sun position for one (Julian Day, latitude, longitude) triple."""

    julian_day: float
    declination: float  # Radians
    right_ascension: float  # Radians, [0, 2π)
    equation_of_time: float  # Minutes (apparent minus mean solar time)
    transit: float  # Solar noon, hours after the julian_day instant, [0, 24)
    sunrise: float  # Fractional hours, [0, 24)
    sunset: float  # Fractional hours, [0, 24)
    hour_angle: float  # Local hour angle at julian_day, radians, [-π, π)
    sun_altitude: float  # Radians
    sun_azimuth: float  # Radians, from north, positive eastward


@dataclass(frozen=True)
class FixedAngle:
    """Twilight defined by the sun's depression below the horizon."""

    degrees: float


@dataclass(frozen=True)
class FixedOffsetMinutes:
    """Twilight defined as a fixed interval after Maghrib."""

    minutes: float


IshaRule = FixedAngle | FixedOffsetMinutes


@dataclass(frozen=True)
class Method:
    """A calculation convention: twilight angles plus the Asr shadow factor."""

    name: str
    fajr_angle: float  # Degrees below the horizon
    isha: IshaRule
    maghrib_angle: float = 0.0  # 0 = Maghrib at sunset
    asr_factor: float = 1.0  # Shadow length / object height (1 standard, 2 Hanafi)
    description: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.asr_factor) or self.asr_factor <= 0:
            raise InvalidMethodError(
                f"asr_factor must be a positive number, got {self.asr_factor!r}"
            )

    def with_changes(self, **changes) -> "Method":
        """Return a copy with the given fields replaced (name defaults to CUSTOM)."""
        changes.setdefault("name", "CUSTOM")
        return dataclasses.replace(self, **changes)


class MidnightPolicy(Enum):
    """How the Midnight time point splits the night."""

    STANDARD = "standard"  # Midpoint of Sunset → Fajr
    JAFARI = "jafari"  # Midpoint of Sunset → Sunrise


class TimeFormat(Enum):
    H24 = "24h"
    H12 = "12h"
    FLOAT = "float"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class PrayerTimeSet:
    """The nine time points as fractional hours in [0, 24)."""

    imsak: float
    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    sunset: float
    maghrib: float
    isha: float
    midnight: float

    def as_dict(self) -> dict[str, float]:
        """Ordered mapping keyed by display name ("Fajr", "Dhuhr", ...)."""
        return {name: getattr(self, name.lower()) for name in TIME_NAMES}

    def shifted(self, hours: float) -> "PrayerTimeSet":
        """Move every time point by the same number of hours, wrapping into [0, 24)."""
        return PrayerTimeSet(
            **{
                name.lower(): normalize_hours(value + hours)
                for name, value in self.as_dict().items()
            }
        )

    def adjusted(self, minutes: dict[str, float]) -> "PrayerTimeSet":
        """Apply per-prayer minute offsets keyed by display name.

        Raises:
            KeyError: If a key is not one of TIME_NAMES.
        """
        values = self.as_dict()
        for name, delta in minutes.items():
            if name not in values:
                raise KeyError(name)
            values[name] = normalize_hours(values[name] + delta / 60.0)
        return PrayerTimeSet(**{name.lower(): value for name, value in values.items()})


@dataclass(frozen=True)
class PrayerDay:
    """The sole input to renderers. Fully computed state."""

    context: ObserverContext
    method: Method
    midnight: MidnightPolicy
    times: PrayerTimeSet  # Local clock hours


@dataclass(frozen=True)
class PrayerStatus:
    """Which prayer window a moment falls in and how long until the next one."""

    current: str
    next: str
    minutes_remaining: int
    time_remaining: str  # "HH:MM"

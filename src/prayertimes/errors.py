"""Exceptions raised at the validation boundary, before any solar computation."""


class PrayerTimesError(Exception):
    """Base class for every error this package raises."""


class InvalidCoordinateError(PrayerTimesError):
    """Latitude outside [-90, 90] or longitude outside [-180, 180]."""


class UnknownMethodError(PrayerTimesError):
    """Named calculation method is not in the registry."""


class InvalidDateError(PrayerTimesError):
    """Date string is not a valid "YYYY-MM-DD" civil date."""


class TimezoneResolutionError(PrayerTimesError):
    """Timezone name, offset, or coordinate lookup could not be resolved."""


class InvalidMidnightPolicyError(PrayerTimesError):
    """Midnight policy is neither "standard" nor "jafari"."""


class ConfigError(PrayerTimesError):
    """Malformed environment configuration."""


class InvalidElevationError(PrayerTimesError):
    """Elevation is not a finite number of metres."""


class InvalidMethodError(PrayerTimesError):
    """Custom method parameters outside the range the solar rules accept."""

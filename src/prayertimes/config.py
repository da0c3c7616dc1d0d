"""Runtime settings read from environment variables (and a .env file via the CLI)."""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from prayertimes.errors import ConfigError
from prayertimes.methods import DEFAULT_METHOD

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI. Command-line flags override every field."""

    method: str = DEFAULT_METHOD  # PRAYERTIMES_METHOD
    midnight: str = "standard"  # PRAYERTIMES_MIDNIGHT
    time_format: str = "24h"  # PRAYERTIMES_FORMAT
    timezone: str | None = None  # PRAYERTIMES_TIMEZONE; None = look up from coordinates
    elevation: float = 0.0  # PRAYERTIMES_ELEVATION (metres)
    log_level: str = "WARNING"  # LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of os.environ.

    Returns:
        Settings with unset or blank variables left at their defaults.

    Raises:
        ConfigError: When PRAYERTIMES_ELEVATION is not a finite number or LOG_LEVEL
            is not a logging level name.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    def get(key: str, default: str | None) -> str | None:
        value = env.get(key, "").strip()
        return value or default

    raw_elevation = get("PRAYERTIMES_ELEVATION", None)
    elevation = defaults.elevation
    if raw_elevation is not None:
        try:
            elevation = float(raw_elevation)
        except ValueError:
            raise ConfigError(
                f"PRAYERTIMES_ELEVATION must be a number, got {raw_elevation!r}"
            ) from None
        if not math.isfinite(elevation):
            raise ConfigError(f"PRAYERTIMES_ELEVATION must be finite, got {raw_elevation!r}")

    log_level = get("LOG_LEVEL", defaults.log_level).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        method=get("PRAYERTIMES_METHOD", defaults.method),
        midnight=get("PRAYERTIMES_MIDNIGHT", defaults.midnight),
        time_format=get("PRAYERTIMES_FORMAT", defaults.time_format),
        timezone=get("PRAYERTIMES_TIMEZONE", defaults.timezone),
        elevation=elevation,
        log_level=log_level,
    )

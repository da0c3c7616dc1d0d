# tests/test_config.py
import pytest

from prayertimes.config import Settings, load_settings
from prayertimes.errors import ConfigError, PrayerTimesError


def test_defaults_from_empty_environment() -> None:
    assert load_settings({}) == Settings()


def test_reads_environment() -> None:
    settings = load_settings(
        {
            "PRAYERTIMES_METHOD": "ISNA",
            "PRAYERTIMES_MIDNIGHT": "jafari",
            "PRAYERTIMES_FORMAT": "12h",
            "PRAYERTIMES_TIMEZONE": "America/Chicago",
            "PRAYERTIMES_ELEVATION": "250",
            "LOG_LEVEL": "debug",
        }
    )
    assert settings.method == "ISNA"
    assert settings.midnight == "jafari"
    assert settings.time_format == "12h"
    assert settings.timezone == "America/Chicago"
    assert settings.elevation == 250.0
    assert settings.log_level == "DEBUG"


def test_blank_values_keep_defaults() -> None:
    assert load_settings({"PRAYERTIMES_METHOD": "  ", "PRAYERTIMES_TIMEZONE": ""}) == Settings()


def test_reads_os_environ(monkeypatch) -> None:
    monkeypatch.setenv("PRAYERTIMES_METHOD", "KARACHI")
    assert load_settings().method == "KARACHI"


@pytest.mark.parametrize(
    "env",
    [
        {"PRAYERTIMES_ELEVATION": "high"},
        {"PRAYERTIMES_ELEVATION": "inf"},
        {"PRAYERTIMES_ELEVATION": "nan"},
        {"LOG_LEVEL": "LOUD"},
    ],
)
def test_malformed_values(env) -> None:
    with pytest.raises(ConfigError) as exc:
        load_settings(env)
    assert isinstance(exc.value, PrayerTimesError)

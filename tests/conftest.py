# tests/conftest.py
"""
Pytest configuration for the prayertimes suite.

- Registers Hypothesis profiles for local dev and CI.
- Shared fixtures: Casablanca on 2025-01-01 0h UT, the reference scenario.
"""

import os

import pytest
from hypothesis import HealthCheck, settings

from prayertimes.models import TIME_NAMES
from prayertimes.solar import date_to_julian_day, solar_position

# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=100,
        suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=400,
        suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────
CASABLANCA_LAT = 33.5733
CASABLANCA_LNG = -7.6454


@pytest.fixture(scope="session")
def casablanca_jd() -> float:
    return date_to_julian_day(2025, 1, 1, 0, 0, 0)


@pytest.fixture(scope="session")
def casablanca_geometry(casablanca_jd):
    return solar_position(casablanca_jd, CASABLANCA_LAT, CASABLANCA_LNG)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer shells and .env files out of config-dependent tests."""
    for key in (
        "PRAYERTIMES_METHOD",
        "PRAYERTIMES_MIDNIGHT",
        "PRAYERTIMES_FORMAT",
        "PRAYERTIMES_TIMEZONE",
        "PRAYERTIMES_ELEVATION",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


def assert_in_day(times) -> None:
    for name in TIME_NAMES:
        value = times.as_dict()[name]
        assert 0.0 <= value < 24.0, f"{name}={value!r} outside [0, 24)"

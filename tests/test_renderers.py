# tests/test_renderers.py
import re

import pytest

from conftest import CASABLANCA_LAT, CASABLANCA_LNG
from prayertimes.compute import run
from prayertimes.models import TIME_NAMES, PrayerStatus, QueryInput, TimeFormat
from prayertimes.renderers.clock import format_time, format_times
from prayertimes.renderers.table import render_table


@pytest.fixture(scope="module")
def day():
    return run(
        QueryInput(lat=CASABLANCA_LAT, lng=CASABLANCA_LNG, when="2025-01-01", timezone=1),
        method="makkah",
    )


@pytest.mark.parametrize(
    "hours, expected",
    [(0.0, "00:00"), (5.5, "05:30"), (13.25, "13:15"), (23.999, "23:59"), (5.9999, "05:59")],
)
def test_24h(hours, expected) -> None:
    assert format_time(hours, TimeFormat.H24) == expected


@pytest.mark.parametrize(
    "hours, expected",
    [(0.0, "12:00 AM"), (0.5, "12:30 AM"), (11.75, "11:45 AM"), (12.0, "12:00 PM"), (13.25, "1:15 PM")],
)
def test_12h(hours, expected) -> None:
    assert format_time(hours, TimeFormat.H12) == expected


def test_float_passthrough() -> None:
    assert format_time(7.123456, TimeFormat.FLOAT) == 7.123456


@pytest.mark.parametrize(
    "offset, expected",
    [(None, "T13:30:00Z"), (0.0, "T13:30:00Z"), (1.0, "T13:30:00+01:00"), (-4.5, "T13:30:00-04:30")],
)
def test_iso8601(offset, expected) -> None:
    assert format_time(13.5, TimeFormat.ISO8601, offset) == expected


def test_format_times_order_and_pattern(day) -> None:
    formatted = format_times(day)
    assert list(formatted) == list(TIME_NAMES)
    for name, value in formatted.items():
        assert re.fullmatch(r"([01][0-9]|2[0-3]):[0-5][0-9]", value), f"{name}: {value}"


def test_format_times_iso_uses_context_offset(day) -> None:
    for value in format_times(day, TimeFormat.ISO8601).values():
        assert value.endswith("+01:00")


def test_table(day) -> None:
    text = render_table(day, TimeFormat.H24)
    assert "2025-01-01" in text
    assert "MAKKAH" in text
    assert "Umm Al-Qura" in text
    for name in TIME_NAMES:
        assert re.search(rf"^{name}\s+\d\d:\d\d$", text, re.MULTILINE), name
    assert "Now:" not in text


def test_table_float_and_status(day) -> None:
    status = PrayerStatus(current="Asr", next="Maghrib", minutes_remaining=42, time_remaining="00:42")
    text = render_table(day, TimeFormat.FLOAT, status)
    assert re.search(r"^Dhuhr\s+\d+\.\d{4}$", text, re.MULTILINE)
    assert text.endswith("Now: Asr · next: Maghrib in 00:42")

from datetime import datetime, time, timedelta

import pytest

from app_cracks.utils.normalizers import (
    cell_text,
    format_hms,
    parse_time,
    round_half_up,
    time_to_seconds,
    to_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, "12:00:00"),
        (0.25, "06:00:00"),
        (1.5, "12:00:00"),
        (227 / 86400, "00:03:47"),
        ("3 min 47 sec", "00:03:47"),
        ("1h 2m 3s", "01:02:03"),
        ("2 hours 5 min", "02:05:00"),
        ("25:30", "00:25:30"),
        ("10:30", "10:30:00"),
        ("1:02:03", "01:02:03"),
        ("01:02:03", "01:02:03"),
        ("227", "00:03:47"),
        ("  227  ", "00:03:47"),
        (time(1, 2, 3), "01:02:03"),
        (datetime(2024, 5, 1, 13, 45, 10), "13:45:10"),
        (timedelta(minutes=3, seconds=47), "00:03:47"),
    ],
)
def test_parse_time(value, expected):
    assert parse_time(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "abc", "12:3", "1.5.6", True, float("nan")])
def test_parse_time_rejects(value):
    assert parse_time(value) is None


@pytest.mark.parametrize("canonical", ["00:00:00", "00:03:47", "01:00:00", "12:34:56", "23:59:59"])
def test_plain_seconds_round_trip(canonical):
    assert parse_time(str(time_to_seconds(canonical))) == canonical


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.2) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(0.49) == 0


def test_format_hms_past_a_day():
    assert format_hms(90061) == "25:01:01"


def test_cell_text():
    assert cell_text(None) is None
    assert cell_text("  ") is None
    assert cell_text(" A1 ") == "A1"
    assert cell_text(0) == "0"
    assert cell_text(12.0) == "12"
    assert cell_text(12.5) == "12.5"


def test_to_number():
    assert to_number(None) is None
    assert to_number("") is None
    assert to_number("abc") is None
    assert to_number(True) is None
    assert to_number(float("inf")) is None
    assert to_number(0) == 0.0
    assert to_number(" 1.5 ") == 1.5
    assert to_number(150) == 150.0

"""Tests for time code formatting and parsing."""

import math

import pytest

from ytsections.tools import format_seconds, format_timecode, parse_time_value, parse_timecode


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "00:00:00.00"),
        (3661.5, "01:01:01.50"),
        (59.999, "00:00:59.99"),
        (0.29, "00:00:00.29"),
        (86399.99, "23:59:59.99"),
        (360000, "100:00:00.00"),
    ],
)
def test_format_timecode(seconds: float, expected: str) -> None:
    assert format_timecode(seconds) == expected


@pytest.mark.parametrize("seconds", [-1, math.inf, math.nan])
def test_format_timecode_rejects_invalid(seconds: float) -> None:
    with pytest.raises(ValueError):
        format_timecode(seconds)


def test_parse_timecode() -> None:
    assert parse_timecode("00:00:00.00") == 0
    assert parse_timecode("01:01:01.50") == pytest.approx(3661.5)
    assert parse_timecode("99:59:59.99") == pytest.approx(359999.99)


@pytest.mark.parametrize(
    "text",
    ["bad", "", "1:01:01.50", "00:00:00", "00:00:00.0", "00:00:00.000", "100:00:00.00", " 00:00:01.00", "00-00-01.00"],
)
def test_parse_timecode_rejects_other_shapes(text: str) -> None:
    with pytest.raises(ValueError):
        parse_timecode(text)


@pytest.mark.parametrize("seconds", [0, 0.01, 0.125, 1.994, 59.5, 61.25, 3599.99, 3661.5, 86399.99, 359999.99])
def test_parse_of_format_is_within_a_centisecond(seconds: float) -> None:
    assert abs(parse_timecode(format_timecode(seconds)) - seconds) <= 0.01 + 1e-9


def test_hundred_hours_formats_but_does_not_parse() -> None:
    text = format_timecode(100 * 3600)
    with pytest.raises(ValueError):
        parse_timecode(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("00:01:30.50", 90.5),
        ("90.5", 90.5),
        ("10", 10.0),
        ("1m30s", 90.0),
        ("01:30", 90.0),
    ],
)
def test_parse_time_value(text: str, expected: float) -> None:
    assert parse_time_value(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "notatime", "-5"])
def test_parse_time_value_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        parse_time_value(text)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(10, "10"), (10.0, "10"), (10.5, "10.5"), (0.1 + 0.2, "0.3"), (3661.25, "3661.25")],
)
def test_format_seconds(value: float, expected: str) -> None:
    assert format_seconds(value) == expected

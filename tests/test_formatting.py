from datetime import date, datetime, timedelta, timezone

import pytest

from src.utils.formatting import format_day, format_minute, format_number, format_time, format_time_range


def test_format_day_uses_long_british_style():
    assert format_day(date(2024, 5, 1)) == "Wednesday, 1 May 2024"


@pytest.mark.parametrize(
    ("minute", "expected"),
    [
        pytest.param(0, "00:00", id="midnight"),
        pytest.param(9 * 60, "09:00", id="morning"),
        pytest.param(16 * 60 + 5, "16:05", id="afternoon"),
    ],
)
def test_format_minute(minute, expected):
    assert format_minute(minute) == expected


def test_format_time_keeps_published_wall_clock():
    start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_time(start) == "09:00"


def test_format_time_range():
    assert format_time_range(datetime(2024, 5, 1, 9, 0), datetime(2024, 5, 1, 13, 30)) == "09:00 – 13:30"


def test_format_number():
    assert format_number(1234) == "1,234"
    assert format_number(None) == "–"

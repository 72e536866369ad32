"""
Utility helpers for formatting dates, times and counts the way the schedule
page shows them (British English, 24-hour clock).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_day(day: date) -> str:
    """Long date label, e.g. ``Wednesday, 1 May 2024``."""
    return f"{day:%A}, {day.day} {day:%B %Y}"


def format_minute(start_minute: int) -> str:
    hours, minutes = divmod(int(start_minute), 60)
    return f"{hours:02d}:{minutes:02d}"


def format_time(value: datetime) -> str:
    # wall-clock time as published, no timezone conversion
    return f"{value:%H:%M}"


def format_time_range(start: datetime, end: datetime) -> str:
    return f"{format_time(start)} – {format_time(end)}"

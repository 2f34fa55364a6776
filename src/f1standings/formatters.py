"""Display formatting helpers."""

from __future__ import annotations

import math
from datetime import UTC, datetime


def format_time(seconds: float | None) -> str:
    """Format seconds as m:ss.mmm using floor at every step, or 'N/A'."""
    if not seconds:
        return "N/A"
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    millis = math.floor((seconds % 1) * 1000)
    return f"{minutes}:{secs:02d}.{millis:03d}"


def format_date(date_string: str) -> str:
    """Format an ISO-8601 timestamp as e.g. 'Mar 15, 2024, 02:15 PM' (UTC)."""
    moment = datetime.fromisoformat(date_string)
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return f"{moment:%b} {moment.day}, {moment:%Y, %I:%M %p}"


def number_suffix(number: int | None) -> str:
    """Return the English ordinal suffix for *number* ('' when falsy)."""
    if not number:
        return ""
    last_two_digits = number % 100
    if 11 <= last_two_digits <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def format_ordinal(number: int | None) -> str:
    """Format 1 as '1st', 22 as '22nd'; None or 0 as 'N/A'."""
    if not number:
        return "N/A"
    return f"{number}{number_suffix(number)}"


def ms_to_seconds(ms: float) -> float:
    return ms / 1000


def seconds_to_ms(seconds: float) -> float:
    return seconds * 1000

"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

import re

from ..constants import F1_RED, SPEED_FIELDS
from ..data.types import LapData

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3,8}$")


def normalize_team_color(team_color: str | None) -> str:
    """Return a validated '#'-prefixed hex color, defaulting to F1_RED."""
    if team_color:
        candidate = f"#{team_color.lstrip('#')}"
        if _HEX_COLOR_RE.match(candidate):
            return candidate
    return F1_RED


def lap_time_series(laps: list[LapData]) -> list[dict]:
    """Chart rows of lap and sector times, one per lap."""
    return [
        {
            "lap": lap.lap_number,
            "lap_time": lap.lap_duration,
            "sector_1": lap.sector_1_time,
            "sector_2": lap.sector_2_time,
            "sector_3": lap.sector_3_time,
        }
        for lap in laps
    ]


def speed_series(laps: list[LapData]) -> list[dict]:
    """Chart rows of the three speed trap readings, one per lap."""
    return [
        {"lap": lap.lap_number, **{field: getattr(lap, field) for field, _ in SPEED_FIELDS}}
        for lap in laps
    ]


def parse_driver_id(raw: str | None) -> int | None:
    """Parse a driver number from a URL query value; None if not numeric."""
    if raw is None:
        return None
    raw = raw.strip()
    return int(raw) if raw.isdigit() else None


def resolve_driver_id(query_value: str | None, session_value: int | None) -> int | None:
    """Pick the driver to show: an explicit ``?driver=`` link beats session state."""
    from_query = parse_driver_id(query_value)
    return from_query if from_query is not None else session_value

"""Shared constants for the standings dashboard."""

from __future__ import annotations

from datetime import UTC, datetime

F1_RED = "#E10600"

DEFAULT_SEASON = 2024

# Session key carried by every synthetic record
MOCK_SESSION_KEY = 9001

# Reference start of the synthetic race; generated timestamps fall after it
SESSION_START = datetime(2024, 3, 15, 14, 0, 0, tzinfo=UTC)

PLACEHOLDER_AUDIO_URL = "https://example.com/audio/placeholder.mp3"

SPEED_FIELDS: list[tuple[str, str]] = [
    ("i1_speed", "Intermediate 1"),
    ("i2_speed", "Intermediate 2"),
    ("st_speed", "Speed Trap"),
]

SECTOR_COLORS: dict[str, str] = {
    "sector_1": "#FF3333",
    "sector_2": "#FFC700",
    "sector_3": "#9933FF",
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

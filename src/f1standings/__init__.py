"""F1 standings dashboard: OpenF1 data layer, formatters and services."""

# --- Constants & formatting ---
from .constants import F1_RED, MOCK_SESSION_KEY, PLOTLY_LAYOUT_DEFAULTS, SESSION_START
from .formatters import format_date, format_ordinal, format_time, number_suffix

# --- Data layer ---
from .data import (
    DataOrigin,
    DataSettings,
    Driver,
    F1Repository,
    FetchResult,
    LapData,
    MockDataGenerator,
    PitStop,
    Standing,
    TeamRadio,
    get_repository,
)

# --- Service layer ---
from .services import DriverDetailService, StandingsService, sort_by_championship_position

__all__ = [
    "F1_RED",
    "MOCK_SESSION_KEY",
    "PLOTLY_LAYOUT_DEFAULTS",
    "SESSION_START",
    "DataOrigin",
    "DataSettings",
    "Driver",
    "DriverDetailService",
    "F1Repository",
    "FetchResult",
    "LapData",
    "MockDataGenerator",
    "PitStop",
    "Standing",
    "StandingsService",
    "TeamRadio",
    "format_date",
    "format_ordinal",
    "format_time",
    "get_repository",
    "number_suffix",
    "sort_by_championship_position",
]

__version__ = "0.1.0"

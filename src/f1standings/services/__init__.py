"""Service layer: presentation-facing logic for the dashboard."""

from .common import (
    lap_time_series,
    normalize_team_color,
    parse_driver_id,
    resolve_driver_id,
    speed_series,
)
from .driver_detail import DRIVER_NOT_FOUND, DriverDetail, DriverDetailService
from .standings import StandingsService, StandingsView, sort_by_championship_position

__all__ = [
    "DRIVER_NOT_FOUND",
    "DriverDetail",
    "DriverDetailService",
    "StandingsService",
    "StandingsView",
    "lap_time_series",
    "normalize_team_color",
    "parse_driver_id",
    "resolve_driver_id",
    "sort_by_championship_position",
    "speed_series",
]

"""Data layer: OpenF1 retrieval with synthetic fallback, plus re-exports."""

from __future__ import annotations

from .config import DataSettings
from .errors import F1DataError
from .mock import MOCK_DRIVERS, MockDataGenerator
from .repository import F1Repository
from .result import BranchOutcome, DataOrigin, FetchResult
from .types import Driver, LapData, PitStop, Standing, TeamRadio


def get_repository(settings: DataSettings | None = None) -> F1Repository:
    """Return a repository configured from *settings* or the environment."""
    return F1Repository(settings if settings is not None else DataSettings())


__all__ = [
    "MOCK_DRIVERS",
    "BranchOutcome",
    "DataOrigin",
    "DataSettings",
    "Driver",
    "F1DataError",
    "F1Repository",
    "FetchResult",
    "LapData",
    "MockDataGenerator",
    "PitStop",
    "Standing",
    "TeamRadio",
    "get_repository",
]

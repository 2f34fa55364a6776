"""Result wrappers that record which path of the fallback policy produced data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class DataOrigin(str, Enum):
    """Where a FetchResult's data came from."""

    LIVE = "live"
    MOCK = "mock"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a data-layer operation.

    ``error`` is set for FALLBACK and EMPTY and describes the remote failure.
    """

    data: T
    origin: DataOrigin
    error: str | None = None

    @property
    def is_live(self) -> bool:
        return self.origin is DataOrigin.LIVE

    @property
    def used_synthetic(self) -> bool:
        return self.origin in (DataOrigin.MOCK, DataOrigin.FALLBACK)


@dataclass(frozen=True)
class BranchOutcome(Generic[T]):
    """Tagged result of one branch of a concurrent fan-out."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

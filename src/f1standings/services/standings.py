"""Driver standings service."""

from __future__ import annotations

from dataclasses import dataclass

from ..api_logging import log_service_call
from ..data.repository import F1Repository
from ..data.result import DataOrigin
from ..data.types import Driver


def sort_by_championship_position(drivers: list[Driver]) -> list[Driver]:
    """Order drivers by position ascending; unknown positions go last.

    The sort is stable, so ties keep their input order.
    """
    return sorted(
        drivers,
        key=lambda d: (d.championship_position is None, d.championship_position or 0),
    )


@dataclass(frozen=True)
class StandingsView:
    drivers: list[Driver]
    origin: DataOrigin
    season: int


class StandingsService:
    """Loads the driver list for the standings page."""

    def __init__(self, repo: F1Repository) -> None:
        self._repo = repo

    @log_service_call
    async def load_standings(self) -> StandingsView:
        result = await self._repo.list_drivers()
        return StandingsView(
            drivers=sort_by_championship_position(result.data),
            origin=result.origin,
            season=self._repo.settings.season,
        )

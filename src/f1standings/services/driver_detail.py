"""Single-driver detail service: roster lookup plus parallel telemetry fetch."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from ..api_logging import log_service_call
from ..data.repository import F1Repository
from ..data.types import Driver, LapData, PitStop, TeamRadio

DRIVER_NOT_FOUND = "Driver not found"


@dataclass(frozen=True)
class DriverDetail:
    driver: Driver | None
    laps: list[LapData] = field(default_factory=list)
    pit_stops: list[PitStop] = field(default_factory=list)
    team_radio: list[TeamRadio] = field(default_factory=list)
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.driver is not None

    @property
    def best_lap(self) -> float | None:
        return min((lap.lap_duration for lap in self.laps), default=None)


class DriverDetailService:
    """Encapsulates the data loading for the driver detail page."""

    def __init__(self, repo: F1Repository) -> None:
        self._repo = repo

    @log_service_call
    async def load(self, driver_number: int) -> DriverDetail:
        """Find the driver in the roster, then fetch laps, pits and radio together.

        A driver missing from the roster is the only error surfaced here.
        """
        drivers = (await self._repo.list_drivers()).data
        driver = next((d for d in drivers if d.driver_number == driver_number), None)
        if driver is None:
            return DriverDetail(driver=None, error=DRIVER_NOT_FOUND)

        laps, pit_stops, team_radio = await asyncio.gather(
            self._repo.get_lap_data(driver_number),
            self._repo.get_pit_stops(driver_number),
            self._repo.get_team_radio(driver_number),
        )
        return DriverDetail(
            driver=driver,
            laps=laps.data,
            pit_stops=sorted(pit_stops.data, key=lambda stop: stop.lap_number),
            team_radio=team_radio.data,
        )

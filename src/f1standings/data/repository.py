"""OpenF1-backed repository with a synthetic-data fallback policy.

Every operation follows the same discipline:

1. ``use_mock_data`` set: return synthetic data, no remote call.
2. Otherwise run the remote path. A failure, or a response with zero
   records, yields synthetic data when ``mock_data_on_failure`` is set and
   the empty value otherwise.

Operations never raise for remote failures; the returned ``FetchResult``
records which of the paths produced the data.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable

from typing import TypeVar

import httpx

from ..api_logging import get_logger, log_api_call
from ..client import AsyncOpenF1Client, OpenF1Error
from ..client import models as api
from ..formatters import format_time
from .config import DataSettings
from .errors import F1DataError
from .mock import MockDataGenerator
from .result import BranchOutcome, DataOrigin, FetchResult
from .types import Driver, LapData, PitStop, Standing, TeamRadio

T = TypeVar("T")
R = TypeVar("R")

# Failures the fallback policy absorbs; anything else is a bug and propagates.
RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (OpenF1Error, F1DataError, httpx.HTTPError)


# ── Fan-out helpers ──────────────────────────────────────────────────────────


async def gather_outcomes(aws: Iterable[Awaitable[T]]) -> list[BranchOutcome[T]]:
    """Await all branches concurrently and tag each as success or failure."""
    results = await asyncio.gather(*aws, return_exceptions=True)
    outcomes: list[BranchOutcome[T]] = []
    for result in results:
        if isinstance(result, RECOVERABLE_ERRORS):
            outcomes.append(BranchOutcome(error=result))
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes.append(BranchOutcome(value=result))
    return outcomes


def raise_first_failure(outcomes: list[BranchOutcome]) -> None:
    """Re-raise the first failed branch; there is no partial-success merge."""
    for outcome in outcomes:
        if outcome.error is not None:
            raise outcome.error


def dedupe_drivers(drivers: Iterable[Driver]) -> list[Driver]:
    """Keep one record per driver number; the last one seen wins."""
    unique: dict[int, Driver] = {}
    for driver in drivers:
        unique[driver.driver_number] = driver
    return list(unique.values())


# ── Remote record normalisation ──────────────────────────────────────────────


def _speed(value: float | None) -> int:
    return int(value) if value is not None and value >= 0 else 0


def driver_from_api(record: api.Driver, session_key: int) -> Driver | None:
    if record.driver_number is None:
        return None
    return Driver(
        driver_number=record.driver_number,
        name_acronym=record.name_acronym or "",
        first_name=record.first_name or "",
        last_name=record.last_name or "",
        team_name=record.team_name or "",
        team_color=f"#{record.team_colour.lstrip('#')}" if record.team_colour else None,
        headshot_url=record.headshot_url,
        country_code=record.country_code,
        session_key=record.session_key or session_key,
    )


def lap_from_api(record: api.Lap, driver_number: int, session_key: int) -> LapData | None:
    """Convert an API lap; laps without a number or duration are dropped."""
    if record.lap_number is None or record.lap_number < 1 or record.lap_duration is None:
        return None
    return LapData(
        driver_number=record.driver_number or driver_number,
        session_key=record.session_key or session_key,
        lap_number=record.lap_number,
        lap_duration=record.lap_duration,
        lap_time=format_time(record.lap_duration),
        sector_1_time=record.duration_sector_1,
        sector_2_time=record.duration_sector_2,
        sector_3_time=record.duration_sector_3,
        i1_speed=_speed(record.i1_speed),
        i2_speed=_speed(record.i2_speed),
        st_speed=_speed(record.st_speed),
    )


def pit_from_api(record: api.Pit, driver_number: int, session_key: int) -> PitStop | None:
    if (
        record.lap_number is None
        or record.date is None
        or record.pit_duration is None
        or record.pit_duration <= 0
    ):
        return None
    return PitStop(
        driver_number=record.driver_number or driver_number,
        session_key=record.session_key or session_key,
        lap_number=record.lap_number,
        pit_duration=record.pit_duration,
        timestamp=record.date.isoformat(),
    )


def radio_from_api(record: api.TeamRadio, driver_number: int, session_key: int) -> TeamRadio | None:
    if record.recording_url is None or record.date is None:
        return None
    return TeamRadio(
        driver_number=record.driver_number or driver_number,
        session_key=record.session_key or session_key,
        audio_url=record.recording_url,
        timestamp=record.date.isoformat(),
    )


# ── Repository ───────────────────────────────────────────────────────────────


class F1Repository:
    """Data-access layer for standings and per-driver telemetry.

    Usage:
        async with F1Repository(DataSettings(use_mock_data=False)) as repo:
            drivers = (await repo.list_drivers()).data
    """

    def __init__(
        self,
        settings: DataSettings | None = None,
        *,
        generator: MockDataGenerator | None = None,
        client: AsyncOpenF1Client | None = None,
    ) -> None:
        self._settings = settings if settings is not None else DataSettings()
        self._generator = generator if generator is not None else MockDataGenerator()
        self._client = client
        self._owns_client = client is None

    @property
    def settings(self) -> DataSettings:
        return self._settings

    async def __aenter__(self) -> F1Repository:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this repository created it."""
        if self._client is not None and self._owns_client:
            await self._client.close()
            self._client = None

    @property
    def client(self) -> AsyncOpenF1Client:
        if self._client is None:
            self._client = AsyncOpenF1Client(
                base_url=self._settings.base_url,
                timeout=self._settings.timeout,
                min_request_interval=self._settings.min_request_interval,
            )
        return self._client

    # ── Policy ───────────────────────────────────────────────

    async def _resolve(
        self,
        operation: str,
        remote: Callable[[], Awaitable[T]],
        synthetic: Callable[[], T],
        empty: Callable[[], T],
        *,
        always_fallback: bool = False,
    ) -> FetchResult[T]:
        if self._settings.use_mock_data:
            return FetchResult(synthetic(), DataOrigin.MOCK)

        try:
            data = await remote()
        except RECOVERABLE_ERRORS as exc:
            reason = f"{type(exc).__name__}: {exc}"
            logger = get_logger()
            if always_fallback or self._settings.mock_data_on_failure:
                logger.warning("FALLBACK: %s -> %s", operation, reason)
                return FetchResult(synthetic(), DataOrigin.FALLBACK, reason)
            logger.warning("EMPTY: %s -> %s", operation, reason)
            return FetchResult(empty(), DataOrigin.EMPTY, reason)
        return FetchResult(data, DataOrigin.LIVE)

    async def _require_session_keys(self) -> list[int]:
        session_keys = (await self.list_session_keys()).data
        if not session_keys:
            raise F1DataError("No session keys available")
        return session_keys

    async def _fan_out(
        self,
        fetch: Callable[[int], Awaitable[list[R]]],
        convert: Callable[[R, int], T | None],
        what: str,
    ) -> list[T]:
        """Fetch one batch per session key, convert and concatenate them."""
        session_keys = await self._require_session_keys()
        outcomes = await gather_outcomes(fetch(key) for key in session_keys)
        raise_first_failure(outcomes)
        records = [
            item
            for outcome, key in zip(outcomes, session_keys, strict=True)
            for record in outcome.value or []
            if (item := convert(record, key)) is not None
        ]
        if not records:
            raise F1DataError(f"No {what} available")
        return records

    # ── Operations ───────────────────────────────────────────

    @log_api_call
    async def list_session_keys(self) -> FetchResult[list[int]]:
        """Session keys for the configured season."""

        async def remote() -> list[int]:
            sessions = await self.client.sessions(year=self._settings.season)
            keys = list(dict.fromkeys(
                s.session_key for s in sessions if s.session_key is not None
            ))
            if not keys:
                raise F1DataError(f"No sessions found for {self._settings.season}")
            return keys

        return await self._resolve(
            "list_session_keys", remote, self._generator.session_keys, list,
        )

    @log_api_call
    async def list_drivers(self) -> FetchResult[list[Driver]]:
        """Drivers for the season, joined with standings and fastest laps."""

        async def remote() -> list[Driver]:
            drivers = dedupe_drivers(await self._fan_out(
                lambda key: self.client.drivers(session_key=key),
                driver_from_api,
                "drivers",
            ))
            standings, *fastest_laps = await asyncio.gather(
                self.get_championship_standings(),
                *(self.get_fastest_lap(d.driver_number) for d in drivers),
            )
            positions = {s.driver_number: s.position for s in standings.data}
            return [
                driver.model_copy(update={
                    "championship_position": positions.get(driver.driver_number),
                    "fastest_lap_time": fastest.data,
                })
                for driver, fastest in zip(drivers, fastest_laps, strict=True)
            ]

        return await self._resolve("list_drivers", remote, self._generator.drivers, list)

    @log_api_call
    async def get_championship_standings(self) -> FetchResult[list[Standing]]:
        """Drivers' championship positions for the season.

        A failure always falls back to the roster positions, whatever
        ``mock_data_on_failure`` says.
        """

        async def remote() -> list[Standing]:
            rows = await self.client.championship_drivers(year=self._settings.season)
            standings = [
                Standing(driver_number=row.driver_number, position=row.position)
                for row in rows
                if row.driver_number is not None and row.position is not None
            ]
            if not standings:
                raise F1DataError("No championship standings available")
            return standings

        return await self._resolve(
            "get_championship_standings",
            remote,
            self._generator.standings,
            list,
            always_fallback=True,
        )

    @log_api_call
    async def get_fastest_lap(self, driver_number: int) -> FetchResult[float | None]:
        """Fastest lap duration in seconds across all sessions."""

        async def remote() -> float | None:
            laps = await self._fan_out(
                lambda key: self.client.laps(session_key=key, driver_number=driver_number),
                lambda record, key: record.lap_duration,
                f"laps for driver {driver_number}",
            )
            return min(laps)

        return await self._resolve(
            f"get_fastest_lap({driver_number})",
            remote,
            lambda: self._generator.fastest_lap(driver_number),
            lambda: None,
        )

    @log_api_call
    async def get_lap_data(self, driver_number: int) -> FetchResult[list[LapData]]:
        async def remote() -> list[LapData]:
            return await self._fan_out(
                lambda key: self.client.laps(session_key=key, driver_number=driver_number),
                lambda record, key: lap_from_api(record, driver_number, key),
                f"lap data for driver {driver_number}",
            )

        return await self._resolve(
            f"get_lap_data({driver_number})",
            remote,
            lambda: self._generator.lap_data(driver_number),
            list,
        )

    @log_api_call
    async def get_pit_stops(self, driver_number: int) -> FetchResult[list[PitStop]]:
        """Pit stops ordered by lap number."""

        async def remote() -> list[PitStop]:
            stops = await self._fan_out(
                lambda key: self.client.pit(session_key=key, driver_number=driver_number),
                lambda record, key: pit_from_api(record, driver_number, key),
                f"pit stop data for driver {driver_number}",
            )
            return sorted(stops, key=lambda stop: stop.lap_number)

        return await self._resolve(
            f"get_pit_stops({driver_number})",
            remote,
            lambda: self._generator.pit_stops(driver_number),
            list,
        )

    @log_api_call
    async def get_team_radio(self, driver_number: int) -> FetchResult[list[TeamRadio]]:
        async def remote() -> list[TeamRadio]:
            return await self._fan_out(
                lambda key: self.client.team_radio(session_key=key, driver_number=driver_number),
                lambda record, key: radio_from_api(record, driver_number, key),
                f"team radio for driver {driver_number}",
            )

        return await self._resolve(
            f"get_team_radio({driver_number})",
            remote,
            lambda: self._generator.team_radio(driver_number),
            list,
        )

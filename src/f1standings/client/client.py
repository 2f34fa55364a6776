"""Typed async client for the OpenF1 endpoints used by the dashboard."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ._http import DEFAULT_BASE_URL, DEFAULT_MIN_REQUEST_INTERVAL, DEFAULT_TIMEOUT, AsyncTransport
from ._params import build_query_params
from .exceptions import OpenF1ValidationError
from .models import ChampionshipDriver, Driver, Lap, Pit, Session, TeamRadio

T = TypeVar("T")


def _validate_list(model_type: type[T], data: Any) -> list[T]:
    """Validate a JSON payload as a list of ``model_type`` records."""
    try:
        return TypeAdapter(list[model_type]).validate_python(data)
    except ValidationError as exc:
        raise OpenF1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class AsyncOpenF1Client:
    """Rate-limited async client for the OpenF1 endpoints behind the dashboard.

    Every method returns validated, frozen records and raises an
    ``OpenF1Error`` subclass on transport, status or payload failures.

    Usage:
        async with AsyncOpenF1Client(min_request_interval=0) as f1:
            rows = await f1.championship_drivers(year=2024)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        min_request_interval: float = DEFAULT_MIN_REQUEST_INTERVAL,
    ) -> None:
        self._transport = AsyncTransport(
            base_url=base_url,
            timeout=timeout,
            min_request_interval=min_request_interval,
        )

    async def __aenter__(self) -> AsyncOpenF1Client:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._transport.close()

    async def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = await self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    async def sessions(self, *, year: int | None = None) -> list[Session]:
        """Sessions of every type for a season."""
        return await self._get("/sessions", Session, year=year)

    async def drivers(self, *, session_key: int) -> list[Driver]:
        return await self._get("/drivers", Driver, session_key=session_key)

    async def laps(self, *, session_key: int, driver_number: int | None = None) -> list[Lap]:
        """Timed laps with sector durations and speed trap readings."""
        return await self._get(
            "/laps", Lap, session_key=session_key, driver_number=driver_number,
        )

    async def pit(self, *, session_key: int, driver_number: int | None = None) -> list[Pit]:
        return await self._get(
            "/pit", Pit, session_key=session_key, driver_number=driver_number,
        )

    async def team_radio(
        self, *, session_key: int, driver_number: int | None = None,
    ) -> list[TeamRadio]:
        """Radio recordings; the API serves audio only, never a transcript."""
        return await self._get(
            "/team_radio", TeamRadio, session_key=session_key, driver_number=driver_number,
        )

    async def championship_drivers(self, *, year: int) -> list[ChampionshipDriver]:
        """Drivers' championship rows for a season."""
        return await self._get("/championship_drivers", ChampionshipDriver, year=year)

"""Async HTTP transport wrapping httpx.AsyncClient."""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from .exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MIN_REQUEST_INTERVAL = 0.35  # OpenF1 allows 3 req/s; 350ms keeps us safe


class RateLimiter:
    """Spaces out coroutine requests by a minimum interval."""

    def __init__(self, min_interval: float = DEFAULT_MIN_REQUEST_INTERVAL) -> None:
        self._min_interval = min_interval
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()

    async def wait(self) -> None:
        """Sleep if needed so consecutive requests keep their spacing."""
        if self._min_interval <= 0:
            return
        async with self._lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()


def _handle_response(response: httpx.Response, endpoint: str) -> list[dict[str, Any]]:
    """Reject any non-2xx status and return the parsed JSON body."""
    if not response.is_success:
        raise OpenF1APIError(
            status_code=response.status_code,
            message=response.text,
            endpoint=endpoint,
        )
    try:
        return response.json()  # type: ignore[no-any-return]
    except ValueError as exc:
        raise OpenF1ValidationError(f"{endpoint} returned a non-JSON body") from exc


class AsyncTransport:
    """Asynchronous, rate-limited HTTP transport."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        min_request_interval: float = DEFAULT_MIN_REQUEST_INTERVAL,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )
        self._limiter = RateLimiter(min_request_interval)

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Perform a GET request and return parsed JSON."""
        await self._limiter.wait()
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise OpenF1TimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        return _handle_response(response, endpoint)

    async def close(self) -> None:
        await self._client.aclose()

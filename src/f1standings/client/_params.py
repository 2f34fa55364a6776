"""Query parameter builder for OpenF1 requests."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build (key, value) query pairs from keyword arguments.

    ``None`` values are dropped, booleans are lowercased to match the API's
    expectations, and everything else is stringified.

    Example:
        build_query_params(session_key=9161, driver_number=None)
        # [("session_key", "9161")]
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params.append((key, str(value).lower()))
        else:
            params.append((key, str(value)))
    return params

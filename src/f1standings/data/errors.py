"""Data-layer error for remote fetches that come back with nothing usable."""

from __future__ import annotations


class F1DataError(Exception):
    """A remote fetch succeeded at the transport level but yielded no data."""

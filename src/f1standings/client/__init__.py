"""Typed async client for the OpenF1 API."""

from .client import AsyncOpenF1Client
from .exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

__all__ = [
    "AsyncOpenF1Client",
    "OpenF1APIError",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
]

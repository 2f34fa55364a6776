"""Custom exceptions for the OpenF1 client."""

from __future__ import annotations


class OpenF1Error(Exception):
    """Base exception for all OpenF1 client errors."""


class OpenF1ConnectionError(OpenF1Error):
    """Raised when the client cannot connect to the API."""


class OpenF1TimeoutError(OpenF1Error):
    """Raised when a request to the API times out."""


class OpenF1APIError(OpenF1Error):
    """Raised when the API returns a non-2xx response.

    ``endpoint`` names the failing path so repository fallback logs say
    which of the fanned-out requests failed.
    """

    def __init__(self, status_code: int, message: str, endpoint: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        where = f" from {endpoint}" if endpoint else ""
        super().__init__(f"HTTP {status_code}{where}: {message}")


class OpenF1ValidationError(OpenF1Error):
    """Raised when API response data fails model validation."""

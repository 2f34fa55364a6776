"""Configuration for the data-access layer."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..client._http import DEFAULT_BASE_URL, DEFAULT_MIN_REQUEST_INTERVAL, DEFAULT_TIMEOUT
from ..constants import DEFAULT_SEASON


class DataSettings(BaseSettings):
    """Flags and connection settings, read from ``F1_*`` env vars or ``.env``.

    Build one explicitly and hand it to ``F1Repository`` so that each caller
    (and each test) gets its own policy.
    """

    model_config = SettingsConfigDict(
        env_prefix="F1_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    use_mock_data: bool = True
    mock_data_on_failure: bool = True
    season: int = DEFAULT_SEASON
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    min_request_interval: float = Field(default=DEFAULT_MIN_REQUEST_INTERVAL, ge=0)

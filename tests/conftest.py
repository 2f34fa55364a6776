"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
import random

import pytest

import f1standings.api_logging as api_logging
from f1standings.data import DataSettings, MockDataGenerator

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_SESSION = {
    "circuit_short_name": "Sakhir",
    "country_code": "BRN",
    "date_end": "2024-03-02T17:00:00+00:00",
    "date_start": "2024-03-02T15:00:00+00:00",
    "location": "Sakhir",
    "meeting_key": 1229,
    "session_key": 9472,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2024,
}

SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1229,
    "name_acronym": "VER",
    "session_key": 9472,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_LAP = {
    "date_start": "2024-03-02T15:10:00+00:00",
    "driver_number": 1,
    "duration_sector_1": 30.1,
    "duration_sector_2": 40.2,
    "duration_sector_3": 27.5,
    "i1_speed": 292.0,
    "i2_speed": 268.0,
    "is_pit_out_lap": False,
    "lap_duration": 97.8,
    "lap_number": 5,
    "meeting_key": 1229,
    "session_key": 9472,
    "st_speed": 301.0,
}

SAMPLE_PIT = {
    "date": "2024-03-02T15:40:12.500000+00:00",
    "driver_number": 1,
    "lap_number": 17,
    "meeting_key": 1229,
    "pit_duration": 22.9,
    "session_key": 9472,
}

SAMPLE_TEAM_RADIO = {
    "date": "2024-03-02T15:20:00+00:00",
    "driver_number": 1,
    "meeting_key": 1229,
    "recording_url": "https://livetiming.formula1.com/radio/VER_01.mp3",
    "session_key": 9472,
}

SAMPLE_CHAMPIONSHIP_DRIVER = {
    "driver_number": 1,
    "meeting_key": 1229,
    "points": 26.0,
    "position": 1,
    "session_key": 9472,
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def sample_session() -> dict:
    return dict(SAMPLE_SESSION)


@pytest.fixture
def sample_driver() -> dict:
    return dict(SAMPLE_DRIVER)


@pytest.fixture
def sample_lap() -> dict:
    return dict(SAMPLE_LAP)


@pytest.fixture
def sample_pit() -> dict:
    return dict(SAMPLE_PIT)


@pytest.fixture
def sample_team_radio() -> dict:
    return dict(SAMPLE_TEAM_RADIO)


@pytest.fixture
def sample_championship_driver() -> dict:
    return dict(SAMPLE_CHAMPIONSHIP_DRIVER)


@pytest.fixture
def live_settings():
    """Factory for settings that hit the (mocked) remote API, no rate limit."""

    def _make(**overrides) -> DataSettings:
        values = dict(
            use_mock_data=False,
            mock_data_on_failure=True,
            min_request_interval=0,
            _env_file=None,
        )
        values.update(overrides)
        return DataSettings(**values)

    return _make


@pytest.fixture
def seeded_generator() -> MockDataGenerator:
    return MockDataGenerator(random.Random(2024))


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path, monkeypatch):
    """Redirect the API log file to tmp_path and reset the cached logger."""
    log_dir = tmp_path / "logs"
    named_logger = logging.getLogger("f1standings.api")
    named_logger.handlers.clear()

    monkeypatch.setattr(api_logging, "_logger", None)
    monkeypatch.setattr(api_logging, "_LOG_DIR", str(log_dir))
    monkeypatch.setattr(api_logging, "_LOG_FILE", str(log_dir / "api_calls.log"))

    yield log_dir

    # Close file handlers to release file locks (important on Windows)
    for handler in named_logger.handlers[:]:
        handler.close()
        named_logger.removeHandler(handler)

"""OpenF1 response models for the endpoints the dashboard consumes.

Every field is optional because the API omits values freely (e.g. the
first lap of a race has no sector 1 time). Unknown keys are ignored.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _OpenF1Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    meeting_key: int | None = None
    session_key: int | None = None


class Session(_OpenF1Record):
    """A practice, qualifying, sprint or race session."""

    circuit_short_name: str | None = None
    country_code: str | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
    location: str | None = None
    session_name: str | None = None
    session_type: str | None = None
    year: int | None = None


class Driver(_OpenF1Record):
    """Driver entry for one session."""

    broadcast_name: str | None = None
    country_code: str | None = None
    driver_number: int | None = None
    first_name: str | None = None
    full_name: str | None = None
    headshot_url: str | None = None
    last_name: str | None = None
    name_acronym: str | None = None
    team_colour: str | None = None
    team_name: str | None = None


class Lap(_OpenF1Record):
    """Lap timing with sector durations and speed trap readings."""

    date_start: datetime | None = None
    driver_number: int | None = None
    duration_sector_1: float | None = None
    duration_sector_2: float | None = None
    duration_sector_3: float | None = None
    i1_speed: float | None = None
    i2_speed: float | None = None
    is_pit_out_lap: bool | None = None
    lap_duration: float | None = None
    lap_number: int | None = None
    st_speed: float | None = None


class Pit(_OpenF1Record):
    """Pit lane visit."""

    date: datetime | None = None
    driver_number: int | None = None
    lap_number: int | None = None
    pit_duration: float | None = None


class TeamRadio(_OpenF1Record):
    """Recorded radio exchange between a driver and the pit wall."""

    date: datetime | None = None
    driver_number: int | None = None
    recording_url: str | None = None


class ChampionshipDriver(_OpenF1Record):
    """Drivers' championship standing entry."""

    driver_number: int | None = None
    points: float | None = None
    position: int | None = None
    position_start: int | None = None
    points_start: float | None = None

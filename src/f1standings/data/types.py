"""Record types returned by the data-access layer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Driver(_Record):
    driver_number: int
    name_acronym: str = ""
    first_name: str = ""
    last_name: str = ""
    team_name: str = ""
    team_color: str | None = None  # "#RRGGBB"
    headshot_url: str | None = None
    country_code: str | None = None
    session_key: int
    championship_position: int | None = None
    fastest_lap_time: float | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class LapData(_Record):
    driver_number: int
    session_key: int
    lap_number: int = Field(gt=0)
    lap_duration: float
    lap_time: str
    sector_1_time: float | None = None
    sector_2_time: float | None = None
    sector_3_time: float | None = None
    i1_speed: int = Field(default=0, ge=0)
    i2_speed: int = Field(default=0, ge=0)
    st_speed: int = Field(default=0, ge=0)


class PitStop(_Record):
    driver_number: int
    session_key: int
    lap_number: int
    pit_duration: float = Field(gt=0)
    timestamp: str  # ISO 8601

    @property
    def recorded_at(self) -> datetime:
        return datetime.fromisoformat(self.timestamp)


class TeamRadio(_Record):
    driver_number: int
    session_key: int
    message: str = ""
    audio_url: str
    timestamp: str  # ISO 8601

    @property
    def recorded_at(self) -> datetime:
        return datetime.fromisoformat(self.timestamp)


class Standing(_Record):
    """One row of the drivers' championship."""

    driver_number: int
    position: int

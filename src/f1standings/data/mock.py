"""Synthetic driver roster and telemetry generator.

The roster is fixed so that standings order is deterministic; laps, pit
stops and radio messages are drawn from an injectable ``random.Random``.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from ..constants import MOCK_SESSION_KEY, PLACEHOLDER_AUDIO_URL, SESSION_START
from ..formatters import format_time
from .types import Driver, LapData, PitStop, Standing, TeamRadio

_HEADSHOT_BASE = (
    "https://media.formula1.com/d_driver_fallback_image.png/content/dam/fom-website/drivers"
)


def _driver(
    number: int,
    acronym: str,
    first: str,
    last: str,
    team: str,
    color: str,
    headshot: str,
    country: str,
    position: int,
    fastest: float,
) -> Driver:
    return Driver(
        driver_number=number,
        name_acronym=acronym,
        first_name=first,
        last_name=last,
        team_name=team,
        team_color=color,
        headshot_url=f"{_HEADSHOT_BASE}/{headshot}",
        country_code=country,
        session_key=MOCK_SESSION_KEY,
        championship_position=position,
        fastest_lap_time=fastest,
    )


MOCK_DRIVERS: tuple[Driver, ...] = (
    _driver(1, "VER", "Max", "Verstappen", "Red Bull Racing", "#0600EF",
            "M/MAXVER01_Max_Verstappen/maxver01.png", "NLD", 1, 92.532),
    _driver(11, "PER", "Sergio", "Perez", "Red Bull Racing", "#0600EF",
            "S/SERPER01_Sergio_Perez/serper01.png", "MEX", 5, 93.124),
    _driver(44, "HAM", "Lewis", "Hamilton", "Mercedes", "#00D2BE",
            "L/LEWHAM01_Lewis_Hamilton/lewham01.png", "GBR", 4, 92.987),
    _driver(63, "RUS", "George", "Russell", "Mercedes", "#00D2BE",
            "G/GEORUS01_George_Russell/georus01.png", "GBR", 7, 93.201),
    _driver(16, "LEC", "Charles", "Leclerc", "Ferrari", "#DC0000",
            "C/CHALEC01_Charles_Leclerc/chalec01.png", "MON", 2, 92.634),
    _driver(55, "SAI", "Carlos", "Sainz", "Ferrari", "#DC0000",
            "C/CARSAI01_Carlos_Sainz/carsai01.png", "ESP", 3, 92.765),
    _driver(4, "NOR", "Lando", "Norris", "McLaren", "#FF8700",
            "L/LANNOR01_Lando_Norris/lannor01.png", "GBR", 6, 93.089),
    _driver(81, "PIA", "Oscar", "Piastri", "McLaren", "#FF8700",
            "O/OSCPIA01_Oscar_Piastri/oscpia01.png", "AUS", 8, 93.245),
)

RADIO_MESSAGES: tuple[str, ...] = (
    "Box this lap, confirm.",
    "Great job, keep pushing.",
    "We need to manage these tires until the end.",
    "You're P2, gap to leader is 4.5 seconds.",
    "We're looking at a two-stop strategy.",
    "Yellow flag in sector 2, be careful.",
    "Rain expected in 10 minutes.",
    "Push now, we need to build a gap.",
    "Car behind is 1.2 seconds and closing.",
)

_SECONDS_PER_LAP_ESTIMATE = 90


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MockDataGenerator:
    """Produces structurally valid synthetic records.

    Pass a seeded ``random.Random`` to make the output reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    # ── Roster-backed lookups ───────────────────────────────────

    def drivers(self) -> list[Driver]:
        return [driver.model_copy() for driver in MOCK_DRIVERS]

    def session_keys(self) -> list[int]:
        return [MOCK_SESSION_KEY]

    def standings(self) -> list[Standing]:
        return [
            Standing(
                driver_number=driver.driver_number,
                position=driver.championship_position or 0,
            )
            for driver in MOCK_DRIVERS
        ]

    def fastest_lap(self, driver_number: int) -> float | None:
        for driver in MOCK_DRIVERS:
            if driver.driver_number == driver_number:
                return driver.fastest_lap_time
        return None

    # ── Randomised telemetry ────────────────────────────────────

    def _elapsed_timestamp(self, lap: int) -> str:
        """Estimated wall-clock time at which *lap* is reached."""
        elapsed_ms = lap * _SECONDS_PER_LAP_ESTIMATE * 1000 + self._rng.randrange(60_000)
        return _iso(SESSION_START + timedelta(milliseconds=elapsed_ms))

    def lap_data(self, driver_number: int) -> list[LapData]:
        rng = self._rng
        laps: list[LapData] = []
        for lap_number in range(1, rng.randrange(30, 50) + 1):
            base_lap_time = 90 + rng.random() * 5
            sector_1 = round(base_lap_time * 0.3 + rng.random() * 0.5, 3)
            sector_2 = round(base_lap_time * 0.4 + rng.random() * 0.5, 3)
            sector_3 = round(base_lap_time * 0.3 + rng.random() * 0.5, 3)
            # The total is the sum of the stored sectors, so the two always agree.
            lap_duration = sector_1 + sector_2 + sector_3
            laps.append(LapData(
                driver_number=driver_number,
                session_key=MOCK_SESSION_KEY,
                lap_number=lap_number,
                lap_duration=lap_duration,
                lap_time=format_time(lap_duration),
                sector_1_time=sector_1,
                sector_2_time=sector_2,
                sector_3_time=sector_3,
                i1_speed=270 + rng.randrange(30),
                i2_speed=250 + rng.randrange(40),
                st_speed=280 + rng.randrange(40),
            ))
        return laps

    def pit_stops(self, driver_number: int) -> list[PitStop]:
        rng = self._rng
        stops: list[PitStop] = []
        for i in range(1 + rng.randrange(3)):
            lap = 10 + i * 15 + rng.randrange(10)
            stops.append(PitStop(
                driver_number=driver_number,
                session_key=MOCK_SESSION_KEY,
                lap_number=lap,
                pit_duration=20 + rng.random() * 10,
                timestamp=self._elapsed_timestamp(lap),
            ))
        return stops

    def team_radio(self, driver_number: int) -> list[TeamRadio]:
        rng = self._rng
        messages: list[TeamRadio] = []
        for _ in range(3 + rng.randrange(6)):
            lap = 1 + rng.randrange(50)
            messages.append(TeamRadio(
                driver_number=driver_number,
                session_key=MOCK_SESSION_KEY,
                message=rng.choice(RADIO_MESSAGES),
                audio_url=PLACEHOLDER_AUDIO_URL,
                timestamp=self._elapsed_timestamp(lap),
            ))
        return messages

"""F1 Driver Standings: Streamlit + OpenF1 API with synthetic fallback."""

from __future__ import annotations

import asyncio

import streamlit as st

from f1standings import (
    DataOrigin,
    DataSettings,
    F1Repository,
    StandingsService,
    format_ordinal,
    format_time,
)
from f1standings.services import StandingsView, normalize_team_color

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Driver Standings",
    page_icon="\U0001f3ce\ufe0f",
    layout="wide",
)

CARDS_PER_ROW = 4


async def _load_standings(settings: DataSettings) -> StandingsView:
    async with F1Repository(settings) as repo:
        return await StandingsService(repo).load_standings()


settings = DataSettings()

with st.spinner("Loading drivers..."):
    view = asyncio.run(_load_standings(settings))


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(
    f"# F1 Driver Standings <span style='color:#E10600'>{view.season}</span>",
    unsafe_allow_html=True,
)
st.caption("Driver statistics and performance tracker")

if view.origin is DataOrigin.EMPTY:
    st.info("No driver data is available right now.")
    st.stop()


# ── Driver cards ─────────────────────────────────────────────────────────────

for row_start in range(0, len(view.drivers), CARDS_PER_ROW):
    columns = st.columns(CARDS_PER_ROW)
    for column, driver in zip(columns, view.drivers[row_start:row_start + CARDS_PER_ROW]):
        with column, st.container(border=True):
            st.markdown(
                f'<div style="height:4px;background:{normalize_team_color(driver.team_color)};'
                f'border-radius:2px;margin-bottom:0.5rem"></div>',
                unsafe_allow_html=True,
            )
            st.markdown(f"**{driver.full_name}** &nbsp; `#{driver.driver_number}`")
            st.caption(driver.team_name)
            if driver.headshot_url:
                st.image(driver.headshot_url, width=120)
            pos_col, lap_col = st.columns(2)
            pos_col.metric("Position", format_ordinal(driver.championship_position))
            lap_col.metric("Fastest Lap", format_time(driver.fastest_lap_time))
            if st.button("View details", key=f"driver-{driver.driver_number}"):
                st.session_state["driver_number"] = driver.driver_number
                st.switch_page("pages/1_Driver_Detail.py")

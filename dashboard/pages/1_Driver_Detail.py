"""Driver detail page: lap times, speeds, pit stops and team radio."""

from __future__ import annotations

import asyncio

import plotly.graph_objects as go
import streamlit as st

from f1standings import (
    PLOTLY_LAYOUT_DEFAULTS,
    DataSettings,
    DriverDetailService,
    F1Repository,
    format_date,
    format_ordinal,
    format_time,
)
from f1standings.constants import SECTOR_COLORS, SPEED_FIELDS
from f1standings.services import (
    DRIVER_NOT_FOUND,
    DriverDetail,
    lap_time_series,
    normalize_team_color,
    resolve_driver_id,
    speed_series,
)

st.set_page_config(
    page_title="F1 Driver Detail",
    page_icon="\U0001f3ce\ufe0f",
    layout="wide",
)


async def _load_detail(settings: DataSettings, driver_number: int) -> DriverDetail:
    async with F1Repository(settings) as repo:
        return await DriverDetailService(repo).load(driver_number)


def _render_not_found(message: str) -> None:
    st.error(message)
    if st.button("Back to Drivers"):
        st.switch_page("app.py")
    st.stop()


driver_number = resolve_driver_id(
    st.query_params.get("driver"), st.session_state.get("driver_number"),
)
if driver_number is None:
    _render_not_found(DRIVER_NOT_FOUND)
st.session_state["driver_number"] = driver_number
st.query_params["driver"] = str(driver_number)

with st.spinner("Loading driver data..."):
    detail = asyncio.run(_load_detail(DataSettings(), driver_number))

if not detail.found:
    _render_not_found(detail.error or DRIVER_NOT_FOUND)

driver = detail.driver
team_color = normalize_team_color(driver.team_color)


# ── Header ───────────────────────────────────────────────────────────────────

if st.button("\u2190 Back to Drivers"):
    st.switch_page("app.py")

header_cols = st.columns([1, 4])
with header_cols[0]:
    if driver.headshot_url:
        st.image(driver.headshot_url, width=120)
with header_cols[1]:
    st.markdown(
        f"# {driver.full_name}"
        f"  \n**{driver.team_name}** | #{driver.driver_number}"
        f" | {driver.country_code or ''}"
    )

st.markdown(
    f'<div style="height:4px;background:{team_color};border-radius:2px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)

kpi1, kpi2, kpi3, kpi4 = st.columns(4)
kpi1.metric("Championship", format_ordinal(driver.championship_position))
kpi2.metric("Fastest Lap", format_time(driver.fastest_lap_time))
kpi3.metric("Laps", len(detail.laps))
kpi4.metric("Pit Stops", len(detail.pit_stops))


# ── Tabs ─────────────────────────────────────────────────────────────────────

tab_laps, tab_speeds, tab_pits, tab_radio = st.tabs(
    ["Lap Times", "Speeds", "Pit Stops", "Team Radio"],
)

with tab_laps:
    rows = lap_time_series(detail.laps)
    if not rows:
        st.warning("No lap time data available.")
    else:
        laps_x = [row["lap"] for row in rows]
        fig_laps = go.Figure()
        fig_laps.add_trace(go.Scatter(
            x=laps_x,
            y=[row["lap_time"] for row in rows],
            mode="lines+markers",
            name="Lap Time",
            line=dict(color=team_color, width=2),
            hovertemplate="Lap %{x}<br>%{text}<extra></extra>",
            text=[format_time(row["lap_time"]) for row in rows],
        ))
        for n, key in enumerate(("sector_1", "sector_2", "sector_3"), start=1):
            fig_laps.add_trace(go.Scatter(
                x=laps_x,
                y=[row[key] for row in rows],
                mode="lines",
                name=f"Sector {n}",
                line=dict(color=SECTOR_COLORS[key], width=1),
                hovertemplate=f"S{n}: %{{y:.3f}}s<extra></extra>",
            ))
        fig_laps.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            xaxis_title="Lap Number",
            yaxis_title="Time (s)",
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
            height=420,
        )
        st.plotly_chart(fig_laps, use_container_width=True)

with tab_speeds:
    rows = speed_series(detail.laps)
    if not rows:
        st.warning("No speed data available.")
    else:
        fig_speed = go.Figure()
        for field, label in SPEED_FIELDS:
            fig_speed.add_trace(go.Scatter(
                x=[row["lap"] for row in rows],
                y=[row[field] for row in rows],
                mode="lines",
                name=label,
                hovertemplate="%{y} km/h<extra></extra>",
            ))
        fig_speed.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            xaxis_title="Lap Number",
            yaxis_title="Speed (km/h)",
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
            height=420,
        )
        st.plotly_chart(fig_speed, use_container_width=True)

with tab_pits:
    if not detail.pit_stops:
        st.info("No pit stop data recorded for this driver.")
    else:
        st.table([
            {
                "Stop #": i,
                "Lap": stop.lap_number,
                "Duration (s)": f"{stop.pit_duration:.1f}",
                "Time": format_date(stop.timestamp),
            }
            for i, stop in enumerate(detail.pit_stops, start=1)
        ])

with tab_radio:
    if not detail.team_radio:
        st.info("No team radio recorded for this driver.")
    else:
        for message in detail.team_radio:
            with st.container(border=True):
                st.caption(format_date(message.timestamp))
                if message.message:
                    st.markdown(f"\u201c{message.message}\u201d")
                st.audio(message.audio_url)

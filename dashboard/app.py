"""Weather Dashboard — Streamlit + Plotly + OpenWeatherMap API."""

from __future__ import annotations

import streamlit as st

from shared import (
    Tab,
    apply_theme,
    build_weather_map,
    current_summary,
    detail_cards,
    forecast_cards,
    get_controller,
    render_tab_sidebar,
    render_top_bar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Dashboard",
    page_icon="\U0001f326",
    layout="wide",
)

controller = get_controller()
apply_theme(controller.theme)


# ── Sidebar & top bar ────────────────────────────────────────────────────────

active_tab = render_tab_sidebar(controller)
render_top_bar(controller)

if controller.error:
    st.error(controller.error)

current = controller.current
report = controller.report


# ── Weather tab ──────────────────────────────────────────────────────────────

if active_tab is Tab.WEATHER and current is not None:
    summary = current_summary(current)
    text_col, icon_col = st.columns([3, 1])
    with text_col:
        st.markdown(f"# {summary.name}")
        st.markdown(f'<p class="weather-muted">{summary.description}</p>', unsafe_allow_html=True)
        st.markdown(f"## {summary.temperature}")
    with icon_col:
        if summary.icon_url:
            st.image(summary.icon_url, width=160)

    cards = detail_cards(current)
    for row_start in range(0, len(cards), 3):
        cols = st.columns(3)
        for col, card in zip(cols, cards[row_start:row_start + 3]):
            col.metric(card.label, card.value)


# ── Forecast tab ─────────────────────────────────────────────────────────────

elif active_tab is Tab.FORECAST and report is not None and report.forecast:
    st.subheader("5-Day Forecast")
    cards = forecast_cards(report.forecast, report.timezone_offset)
    if cards:
        cols = st.columns(len(cards))
        for col, card in zip(cols, cards):
            with col:
                st.markdown(f"**{card.weekday}**")
                if card.icon_url:
                    st.image(card.icon_url, width=80)
                st.markdown(f"#### {card.temperature}")


# ── Map tab ──────────────────────────────────────────────────────────────────

elif active_tab is Tab.MAP:
    deck = build_weather_map(current)
    if deck is not None:
        st.pydeck_chart(deck, use_container_width=True)


# ── Settings tab ─────────────────────────────────────────────────────────────

elif active_tab is Tab.SETTINGS:
    st.subheader("Settings")
    st.markdown("Theme and last searched city are saved automatically.")
    st.markdown("Reload the page to test.")
    settings = controller.settings
    st.markdown(
        f"**Theme:** {settings.theme.value.capitalize()}  \n"
        f"**Last city:** {settings.city or '—'}"
    )

"""Shared sidebar and top-bar rendering."""

from __future__ import annotations

import asyncio

import streamlit as st

from .constants import THEME_STYLES
from .controller import Tab, WeatherDashboardController
from .settings_store import Theme

_TAB_ICONS = {
    Tab.WEATHER: "\U0001f324\ufe0f",
    Tab.FORECAST: "\U0001f4c5",
    Tab.MAP: "\U0001f5fa\ufe0f",
    Tab.SETTINGS: "\u2699\ufe0f",
}


def theme_toggle_label(theme: Theme) -> str:
    """Label of the theme button: it names the theme it switches to."""
    return "\u2600\ufe0f Light" if theme is Theme.DARK else "\U0001f319 Dark"


def apply_theme(theme: Theme) -> None:
    """Inject CSS for the selected theme."""
    palette = THEME_STYLES[theme.value]
    st.markdown(
        f"""<style>
        .stApp {{ background-color: {palette['background']}; color: {palette['text']}; }}
        section[data-testid="stSidebar"] {{ background-color: {palette['surface']}; }}
        .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p, .stApp label {{ color: {palette['text']}; }}
        .weather-muted {{ color: {palette['muted']}; }}
        </style>""",
        unsafe_allow_html=True,
    )


def render_tab_sidebar(controller: WeatherDashboardController) -> Tab:
    """Render the four tab entries in the sidebar and apply the selection."""
    st.sidebar.title("\U0001f326 Weather")
    tabs = list(Tab)
    choice = st.sidebar.radio(
        "Navigate",
        tabs,
        index=tabs.index(controller.active_tab),
        format_func=lambda tab: f"{_TAB_ICONS[tab]} {tab.label}",
        label_visibility="collapsed",
    )
    controller.select_tab(choice)
    return controller.active_tab


def render_top_bar(controller: WeatherDashboardController) -> None:
    """City search form (Enter or the button submits) and the theme toggle."""
    search_col, theme_col = st.columns([5, 1])

    with search_col:
        with st.form("city_search", border=False):
            input_col, button_col = st.columns([4, 1])
            city = input_col.text_input(
                "City",
                value=controller.city,
                placeholder="Search city...",
                label_visibility="collapsed",
            )
            submitted = button_col.form_submit_button("Search", use_container_width=True)

    if submitted:
        controller.set_city(city)
        with st.spinner("Fetching weather..."):
            asyncio.run(controller.commit_search())

    with theme_col:
        if st.button(theme_toggle_label(controller.theme), use_container_width=True):
            controller.toggle_theme()
            st.rerun()

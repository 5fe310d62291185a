"""Per-browser-session wiring of the dashboard controller."""

from __future__ import annotations

import streamlit as st

from .config import DashboardConfig, load_config
from .controller import WeatherDashboardController
from .data import get_repository
from .settings_store import SettingsStore

_CONTROLLER_KEY = "weather_controller"


def build_controller(config: DashboardConfig) -> WeatherDashboardController:
    """Create a controller with settings loaded from the configured store."""
    return WeatherDashboardController(
        repository=get_repository(config),
        store=SettingsStore(config.settings_path),
    )


def get_controller() -> WeatherDashboardController:
    """Return this session's controller, creating it on first access."""
    if _CONTROLLER_KEY not in st.session_state:
        st.session_state[_CONTROLLER_KEY] = build_controller(load_config())
    return st.session_state[_CONTROLLER_KEY]

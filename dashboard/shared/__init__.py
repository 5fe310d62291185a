"""Shared dashboard utilities."""

# --- Constants, configuration & formatting ---
from .config import DashboardConfig, load_config
from .constants import EMPTY_CITY_MESSAGE, FETCH_FAILED_MESSAGE
from .formatters import format_temperature, icon_url

# --- Data layer ---
from .data import WeatherDataError, WeatherReport, WeatherRepository, get_repository
from .settings_store import Settings, SettingsStore, Theme

# --- View state ---
from .controller import Failed, FetchState, Idle, Loaded, Loading, Tab, WeatherDashboardController

# --- Service layer ---
from .services import (
    build_weather_map,
    current_summary,
    daily_forecast,
    detail_cards,
    forecast_cards,
)

# --- UI components ---
from .session import get_controller
from .sidebar import apply_theme, render_tab_sidebar, render_top_bar, theme_toggle_label

__all__ = [
    "DashboardConfig",
    "EMPTY_CITY_MESSAGE",
    "FETCH_FAILED_MESSAGE",
    "Failed",
    "FetchState",
    "Idle",
    "Loaded",
    "Loading",
    "Settings",
    "SettingsStore",
    "Tab",
    "Theme",
    "WeatherDashboardController",
    "WeatherDataError",
    "WeatherReport",
    "WeatherRepository",
    "apply_theme",
    "build_weather_map",
    "current_summary",
    "daily_forecast",
    "detail_cards",
    "forecast_cards",
    "format_temperature",
    "get_controller",
    "get_repository",
    "icon_url",
    "load_config",
    "render_tab_sidebar",
    "render_top_bar",
    "theme_toggle_label",
]

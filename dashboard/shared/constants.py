"""Shared constants for the weather dashboard."""

from __future__ import annotations

EMPTY_CITY_MESSAGE = "Please enter a city"
FETCH_FAILED_MESSAGE = "Failed to fetch data"

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@{size}.png"

# The forecast endpoint returns 8 samples per day (3-hour resolution).
SAMPLES_PER_DAY = 8
FORECAST_DAYS = 5

MAP_ZOOM = 10
# CARTO Voyager: OpenStreetMap data, no access token needed.
MAP_PROVIDER = "carto"
MAP_STYLE = "https://basemaps.cartocdn.com/gl/voyager-gl-style/style.json"
MARKER_COLOR = [232, 84, 78]
MARKER_RADIUS_PX = 9
BADGE_TEXT_COLOR = [17, 17, 17]
BADGE_BACKGROUND_COLOR = [255, 255, 255, 230]
TOOLTIP_STYLE = {
    "backgroundColor": "#FFFFFF",
    "color": "#111111",
    "fontSize": "13px",
    "textAlign": "center",
}

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

THEME_STYLES: dict[str, dict[str, str]] = {
    "dark": {
        "background": "#0F172A",
        "surface": "#1E293B",
        "text": "#F1F5F9",
        "muted": "#94A3B8",
        "accent": "#38BDF8",
    },
    "light": {
        "background": "#F8FAFC",
        "surface": "#FFFFFF",
        "text": "#0F172A",
        "muted": "#475569",
        "accent": "#0284C7",
    },
}

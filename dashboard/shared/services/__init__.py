"""Service layer — pure presentation logic for the weather dashboard."""

from .presentation import (
    CurrentSummary,
    DetailCard,
    ForecastCard,
    current_summary,
    daily_forecast,
    detail_cards,
    forecast_cards,
)
from .weather_map import build_weather_map, marker_popup

__all__ = [
    "CurrentSummary",
    "DetailCard",
    "ForecastCard",
    "build_weather_map",
    "current_summary",
    "daily_forecast",
    "detail_cards",
    "forecast_cards",
    "marker_popup",
]

"""Formatting helpers for the weather dashboard."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from .constants import ICON_URL_TEMPLATE, WEEKDAY_NAMES

_MISSING = "—"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards +inf (15.5 -> 16, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' (5.0 -> '5', 4.1 -> '4.1')."""
    return f"{value:g}"


def format_temperature(celsius: float | None) -> str:
    """Format a temperature as a rounded '15°C', or '—' if None."""
    if celsius is None:
        return _MISSING
    return f"{round_half_up(celsius)}°C"


def format_percent(value: float | None) -> str:
    if value is None:
        return _MISSING
    return f"{format_number(value)}%"


def format_wind_speed(speed: float | None) -> str:
    if speed is None:
        return _MISSING
    return f"{format_number(speed)} m/s"


def format_pressure(hpa: float | None) -> str:
    if hpa is None:
        return _MISSING
    return f"{format_number(hpa)} hPa"


def format_visibility(meters: float | None) -> str:
    """Format a visibility given in metres as kilometres ('10 km', '8.5 km')."""
    if meters is None:
        return _MISSING
    return f"{format_number(meters / 1000)} km"


def format_weekday(timestamp: int, utc_offset_seconds: int = 0) -> str:
    """Short English weekday name of a unix timestamp in the given UTC offset."""
    tz = timezone(timedelta(seconds=utc_offset_seconds))
    return WEEKDAY_NAMES[datetime.fromtimestamp(timestamp, tz=tz).weekday()]


def icon_url(icon: str | None, size: str = "2x") -> str | None:
    """Return the OpenWeather icon URL for an icon code, or None."""
    if not icon:
        return None
    return ICON_URL_TEMPLATE.format(icon=icon, size=size)

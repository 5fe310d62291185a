"""Data contracts for the weather dashboard data layer."""

from __future__ import annotations

from dataclasses import dataclass

from openweather.models import CurrentWeather, ForecastEntry


@dataclass(frozen=True)
class WeatherReport:
    """Outcome of one successful fetch cycle."""

    current: CurrentWeather
    forecast: tuple[ForecastEntry, ...]
    timezone_offset: int = 0  # seconds east of UTC, for labelling forecast days

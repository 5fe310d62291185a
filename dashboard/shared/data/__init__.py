"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from ..config import DashboardConfig
from .base import WeatherRepository
from .errors import WeatherDataError
from .types import WeatherReport


def get_repository(config: DashboardConfig) -> WeatherRepository:
    """Return the weather repository configured for this process."""
    from .openweather_repo import OpenWeatherRepository

    return OpenWeatherRepository(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
    )


__all__ = [
    "WeatherDataError",
    "WeatherReport",
    "WeatherRepository",
    "get_repository",
]

"""Abstract base repository for weather data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import WeatherReport


class WeatherRepository(ABC):
    """Source-agnostic interface for weather data access."""

    @abstractmethod
    async def fetch_weather(self, city: str) -> WeatherReport:
        """Return current conditions and forecast for ``city``.

        Raises:
            WeatherDataError: with a message suitable for direct display.
        """

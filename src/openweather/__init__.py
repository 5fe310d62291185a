"""OpenWeather — Typed Python client for the OpenWeatherMap API."""

from openweather.client import AsyncOpenWeatherClient, OpenWeatherClient
from openweather.exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherError,
    OpenWeatherTimeoutError,
    OpenWeatherValidationError,
)

__all__ = [
    "AsyncOpenWeatherClient",
    "OpenWeatherAPIError",
    "OpenWeatherClient",
    "OpenWeatherConnectionError",
    "OpenWeatherError",
    "OpenWeatherTimeoutError",
    "OpenWeatherValidationError",
]

__version__ = "0.1.0"

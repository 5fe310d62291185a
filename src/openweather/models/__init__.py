"""OpenWeather data models."""

from openweather.models.common import Clouds, Condition, Coordinates, MainReadings, Wind
from openweather.models.current import CurrentWeather, SystemInfo
from openweather.models.forecast import Forecast, ForecastCity, ForecastEntry

__all__ = [
    "Clouds",
    "Condition",
    "Coordinates",
    "CurrentWeather",
    "Forecast",
    "ForecastCity",
    "ForecastEntry",
    "MainReadings",
    "SystemInfo",
    "Wind",
]

"""Current conditions model (``/weather`` endpoint)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from openweather.models.common import Clouds, Condition, Coordinates, MainReadings, Wind


class SystemInfo(BaseModel):
    """Country and sun times block (``sys``)."""

    model_config = ConfigDict(frozen=True)

    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None


class CurrentWeather(BaseModel):
    """Snapshot of the weather at a location at request time."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    coord: Coordinates = Field(default_factory=Coordinates)
    weather: list[Condition] = Field(default_factory=list)
    main: MainReadings = Field(default_factory=MainReadings)
    visibility: int | None = None
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int | None = None
    sys: SystemInfo = Field(default_factory=SystemInfo)
    timezone: int | None = None

    @property
    def condition(self) -> Condition:
        """Primary weather condition, or an empty one if the API sent none."""
        return self.weather[0] if self.weather else Condition()

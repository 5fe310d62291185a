"""5-day / 3-hour forecast models (``/forecast`` endpoint)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from openweather.models.common import Clouds, Condition, Coordinates, MainReadings, Wind


class ForecastEntry(BaseModel):
    """One 3-hour forecast sample."""

    model_config = ConfigDict(frozen=True)

    dt: int
    main: MainReadings = Field(default_factory=MainReadings)
    weather: list[Condition] = Field(default_factory=list)
    clouds: Clouds = Field(default_factory=Clouds)
    wind: Wind = Field(default_factory=Wind)
    visibility: int | None = None
    pop: float | None = None
    dt_txt: str | None = None

    @property
    def condition(self) -> Condition:
        """Primary weather condition, or an empty one if the API sent none."""
        return self.weather[0] if self.weather else Condition()


class ForecastCity(BaseModel):
    """Location block of the forecast response (``city``)."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    coord: Coordinates = Field(default_factory=Coordinates)
    country: str | None = None
    timezone: int | None = None
    sunrise: int | None = None
    sunset: int | None = None


class Forecast(BaseModel):
    """Chronological list of 3-hour samples for one location."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cnt: int | None = None
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
    city: ForecastCity = Field(default_factory=ForecastCity)

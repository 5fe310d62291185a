"""Building blocks shared by the current-conditions and forecast payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Geographic position of a location."""

    model_config = ConfigDict(frozen=True)

    lat: float | None = None
    lon: float | None = None


class Condition(BaseModel):
    """One weather condition entry (``weather[n]``)."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    main: str | None = None
    description: str | None = None
    icon: str | None = None


class MainReadings(BaseModel):
    """Temperature, pressure and humidity block (``main``)."""

    model_config = ConfigDict(frozen=True)

    temp: float | None = None
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: int | None = None
    humidity: int | None = None
    sea_level: int | None = None
    grnd_level: int | None = None


class Wind(BaseModel):
    """Wind block (``wind``), speed in m/s for metric units."""

    model_config = ConfigDict(frozen=True)

    speed: float | None = None
    deg: int | None = None
    gust: float | None = None


class Clouds(BaseModel):
    """Cloudiness block (``clouds``), percent."""

    model_config = ConfigDict(frozen=True)

    all: int | None = None

"""Pure view-model builders for the weather and forecast tabs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from openweather.models import CurrentWeather, ForecastEntry

from ..constants import FORECAST_DAYS, SAMPLES_PER_DAY
from ..formatters import (
    format_percent,
    format_pressure,
    format_temperature,
    format_visibility,
    format_weekday,
    format_wind_speed,
    icon_url,
)


@dataclass(frozen=True)
class CurrentSummary:
    """Headline card of the weather tab."""

    name: str
    description: str
    temperature: str
    icon_url: str | None


@dataclass(frozen=True)
class DetailCard:
    label: str
    value: str


@dataclass(frozen=True)
class ForecastCard:
    """One day of the forecast tab."""

    weekday: str
    icon_url: str | None
    temperature: str


def daily_forecast(entries: Sequence[ForecastEntry]) -> list[ForecastEntry]:
    """Pick one sample per day: positions 0, 8, 16, 24 and 32, in order.

    A short sequence yields fewer entries (possibly none); it never raises.
    """
    return list(entries[::SAMPLES_PER_DAY][:FORECAST_DAYS])


def forecast_cards(
    entries: Sequence[ForecastEntry], utc_offset_seconds: int = 0,
) -> list[ForecastCard]:
    """Build the daily forecast cards from the full 3-hour sequence."""
    return [
        ForecastCard(
            weekday=format_weekday(entry.dt, utc_offset_seconds),
            icon_url=icon_url(entry.condition.icon, size="2x"),
            temperature=format_temperature(entry.main.temp),
        )
        for entry in daily_forecast(entries)
    ]


def current_summary(current: CurrentWeather) -> CurrentSummary:
    return CurrentSummary(
        name=current.name or "",
        description=current.condition.description or "",
        temperature=format_temperature(current.main.temp),
        icon_url=icon_url(current.condition.icon, size="4x"),
    )


def detail_cards(current: CurrentWeather) -> list[DetailCard]:
    """Secondary readings shown under the headline card."""
    return [
        DetailCard("Feels Like", format_temperature(current.main.feels_like)),
        DetailCard("Humidity", format_percent(current.main.humidity)),
        DetailCard("Wind Speed", format_wind_speed(current.wind.speed)),
        DetailCard("Pressure", format_pressure(current.main.pressure)),
        DetailCard("Visibility", format_visibility(current.visibility)),
        DetailCard("Cloudiness", format_percent(current.clouds.all)),
    ]

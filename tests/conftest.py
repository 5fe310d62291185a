"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

BASE_URL = "https://api.openweathermap.org/data/2.5"

# 2024-03-04T00:00:00Z, a Monday
FORECAST_START = 1709510400
THREE_HOURS = 3 * 60 * 60


SAMPLE_CURRENT = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
    ],
    "base": "stations",
    "main": {
        "temp": 15.3,
        "feels_like": 14.6,
        "temp_min": 13.9,
        "temp_max": 16.5,
        "pressure": 1012,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 4.1, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1709550000,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1709534000, "sunset": 1709574500},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

SAMPLE_NOT_FOUND = {"cod": "404", "message": "city not found"}

SAMPLE_INVALID_KEY = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}


def make_forecast_entry(index: int, temp: float | None = None, icon: str = "10d") -> dict:
    dt = FORECAST_START + index * THREE_HOURS
    return {
        "dt": dt,
        "main": {
            "temp": temp if temp is not None else 10.0 + index,
            "feels_like": 9.0 + index,
            "pressure": 1010,
            "humidity": 80,
        },
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": icon}],
        "clouds": {"all": 90},
        "wind": {"speed": 3.2, "deg": 200},
        "visibility": 10000,
        "pop": 0.4,
        "dt_txt": f"sample-{index}",
    }


def make_forecast_payload(count: int = 40, timezone: int = 0) -> dict:
    return {
        "cod": "200",
        "message": 0,
        "cnt": count,
        "list": [make_forecast_entry(i) for i in range(count)],
        "city": {
            "id": 2643743,
            "name": "London",
            "coord": {"lat": 51.5085, "lon": -0.1257},
            "country": "GB",
            "timezone": timezone,
            "sunrise": 1709534000,
            "sunset": 1709574500,
        },
    }


SAMPLE_FORECAST = make_forecast_payload()


@pytest.fixture
def base_url() -> str:
    return BASE_URL

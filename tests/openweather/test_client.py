"""Tests for the OpenWeather client classes."""

from __future__ import annotations

import httpx
import pytest
import respx

from openweather import AsyncOpenWeatherClient, OpenWeatherClient, OpenWeatherValidationError
from openweather.models.current import CurrentWeather
from openweather.models.forecast import Forecast
from tests.conftest import SAMPLE_CURRENT, SAMPLE_FORECAST

BASE_URL = "https://api.openweathermap.org/data/2.5"


class TestOpenWeatherClient:
    @respx.mock
    def test_current_weather(self) -> None:
        respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        with OpenWeatherClient(api_key="secret") as ow:
            current = ow.current_weather(q="London")
        assert isinstance(current, CurrentWeather)
        assert current.name == "London"
        assert current.main.temp == 15.3

    @respx.mock
    def test_sends_units_and_api_key(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        with OpenWeatherClient(api_key="secret") as ow:
            ow.current_weather(q="London")
        request = route.calls.last.request
        assert request.url.params["q"] == "London"
        assert request.url.params["units"] == "metric"
        assert request.url.params["appid"] == "secret"

    @respx.mock
    def test_units_override(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        with OpenWeatherClient(api_key="secret") as ow:
            ow.current_weather(q="London", units="imperial")
        assert route.calls.last.request.url.params["units"] == "imperial"

    @respx.mock
    def test_no_api_key_omits_appid(self) -> None:
        route = respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        with OpenWeatherClient() as ow:
            ow.current_weather(q="London")
        assert "appid" not in route.calls.last.request.url.params

    @respx.mock
    def test_forecast(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        with OpenWeatherClient(api_key="secret") as ow:
            forecast = ow.forecast(q="London")
        assert isinstance(forecast, Forecast)
        assert len(forecast.entries) == 40
        assert forecast.city.country == "GB"

    @respx.mock
    def test_invalid_payload(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json={"cod": "200", "list": [{"main": {}}]})
        )
        with OpenWeatherClient(api_key="secret") as ow:
            with pytest.raises(OpenWeatherValidationError):
                ow.forecast(q="London")

    @respx.mock
    def test_custom_base_url(self) -> None:
        route = respx.get("https://weather.example.com/v2/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        with OpenWeatherClient(base_url="https://weather.example.com/v2") as ow:
            ow.current_weather(q="London")
        assert route.called


class TestAsyncOpenWeatherClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_current_weather(self) -> None:
        respx.get(f"{BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_CURRENT)
        )
        async with AsyncOpenWeatherClient(api_key="secret") as ow:
            current = await ow.current_weather(q="London")
        assert current.sys.country == "GB"

    @respx.mock
    @pytest.mark.asyncio
    async def test_forecast(self) -> None:
        respx.get(f"{BASE_URL}/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        async with AsyncOpenWeatherClient(api_key="secret") as ow:
            forecast = await ow.forecast(q="London")
        assert forecast.entries[0].dt == SAMPLE_FORECAST["list"][0]["dt"]

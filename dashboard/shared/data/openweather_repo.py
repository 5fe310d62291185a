"""OpenWeather API repository implementation."""

from __future__ import annotations

from openweather import AsyncOpenWeatherClient, OpenWeatherAPIError, OpenWeatherError
from openweather._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from ..api_logging import log_api_call
from ..constants import EMPTY_CITY_MESSAGE, FETCH_FAILED_MESSAGE
from .base import WeatherRepository
from .errors import WeatherDataError
from .types import WeatherReport


class OpenWeatherRepository(WeatherRepository):
    """Fetches current conditions, then the forecast, for a city name.

    The forecast request is only issued once current conditions succeeded.
    API-reported failures on the current-conditions request keep the API's own
    message when it supplied one; every other failure collapses to a generic one.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    def __repr__(self) -> str:
        return f"OpenWeatherRepository(base_url={self._base_url!r})"

    @log_api_call
    async def fetch_weather(self, city: str) -> WeatherReport:
        city = city.strip()
        if not city:
            raise WeatherDataError(EMPTY_CITY_MESSAGE)

        async with AsyncOpenWeatherClient(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
        ) as ow:
            try:
                current = await ow.current_weather(q=city)
            except OpenWeatherAPIError as exc:
                raise WeatherDataError(exc.message or FETCH_FAILED_MESSAGE) from exc
            except OpenWeatherError as exc:
                raise WeatherDataError(FETCH_FAILED_MESSAGE) from exc

            try:
                forecast = await ow.forecast(q=city)
            except OpenWeatherError as exc:
                raise WeatherDataError(FETCH_FAILED_MESSAGE) from exc

        return WeatherReport(
            current=current,
            forecast=tuple(forecast.entries),
            timezone_offset=forecast.city.timezone or current.timezone or 0,
        )

"""Public client classes for the OpenWeather API."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from openweather._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from openweather._params import build_query_params
from openweather.exceptions import OpenWeatherValidationError
from openweather.models.current import CurrentWeather
from openweather.models.forecast import Forecast

DEFAULT_UNITS = "metric"

T = TypeVar("T", bound=BaseModel)


def _validate(model_type: type[T], data: dict[str, Any]) -> T:
    """Validate a response body against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise OpenWeatherValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class OpenWeatherClient:
    """Synchronous client for the OpenWeather API.

    Usage:
        ow = OpenWeatherClient(api_key="...")
        current = ow.current_weather(q="London")
        ow.close()

        # Or as a context manager:
        with OpenWeatherClient(api_key="...") as ow:
            forecast = ow.forecast(q="London")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = DEFAULT_UNITS,
    ) -> None:
        self._api_key = api_key
        self._units = units
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> OpenWeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> T:
        kwargs.setdefault("units", self._units)
        params = build_query_params(**kwargs, appid=self._api_key)
        data = self._transport.get(endpoint, params)
        return _validate(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    def current_weather(self, **kwargs: Any) -> CurrentWeather:
        """Get current conditions (``q="London"`` or ``lat=..., lon=...``)."""
        return self._get("/weather", CurrentWeather, **kwargs)

    def forecast(self, **kwargs: Any) -> Forecast:
        """Get the 5-day forecast in 3-hour steps."""
        return self._get("/forecast", Forecast, **kwargs)


class AsyncOpenWeatherClient:
    """Asynchronous client for the OpenWeather API.

    Usage:
        async with AsyncOpenWeatherClient(api_key="...") as ow:
            current = await ow.current_weather(q="London")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        units: str = DEFAULT_UNITS,
    ) -> None:
        self._api_key = api_key
        self._units = units
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncOpenWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> T:
        kwargs.setdefault("units", self._units)
        params = build_query_params(**kwargs, appid=self._api_key)
        data = await self._transport.get(endpoint, params)
        return _validate(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    async def current_weather(self, **kwargs: Any) -> CurrentWeather:
        """Get current conditions (``q="London"`` or ``lat=..., lon=...``)."""
        return await self._get("/weather", CurrentWeather, **kwargs)

    async def forecast(self, **kwargs: Any) -> Forecast:
        """Get the 5-day forecast in 3-hour steps."""
        return await self._get("/forecast", Forecast, **kwargs)

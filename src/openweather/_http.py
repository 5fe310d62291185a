"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from openweather.exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherTimeoutError,
    OpenWeatherValidationError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 30.0

# The API encodes its own status in the body: int 200 on /weather, "200" on /forecast.
_SUCCESS_CODE = "200"


def _status_code(cod: object, fallback: int) -> int:
    try:
        return int(cod)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return fallback


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate the API status and return the parsed JSON body.

    Bodies that are not JSON (gateway error pages, truncated payloads) raise
    ``OpenWeatherValidationError`` whatever the HTTP status, so only messages
    the API itself supplied reach ``OpenWeatherAPIError.message``.
    """
    try:
        payload = response.json()
    except ValueError as exc:
        raise OpenWeatherValidationError(
            f"HTTP {response.status_code}: response is not valid JSON"
        ) from exc

    if not isinstance(payload, dict):
        raise OpenWeatherValidationError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    cod = payload.get("cod", response.status_code)
    if str(cod) != _SUCCESS_CODE or response.status_code >= 400:
        raise OpenWeatherAPIError(
            status_code=_status_code(cod, response.status_code),
            message=str(payload.get("message") or ""),
        )
    return payload


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise OpenWeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise OpenWeatherConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise OpenWeatherTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise OpenWeatherConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()

"""Custom exceptions for the OpenWeather client."""

from __future__ import annotations


class OpenWeatherError(Exception):
    """Base exception for all OpenWeather client errors."""


class OpenWeatherConnectionError(OpenWeatherError):
    """Raised when the client cannot reach the API."""


class OpenWeatherTimeoutError(OpenWeatherError):
    """Raised when a request to the API times out."""


class OpenWeatherAPIError(OpenWeatherError):
    """Raised when the API reports a failure (non-200 ``cod`` or HTTP 4xx/5xx).

    ``message`` is the human-readable text supplied by the API, e.g.
    ``"city not found"``. Empty when the error body carried no message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class OpenWeatherValidationError(OpenWeatherError):
    """Raised when response data cannot be decoded or fails model validation."""

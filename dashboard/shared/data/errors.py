"""Source-agnostic weather fetch error."""

from __future__ import annotations


class WeatherDataError(Exception):
    """Weather fetch failure carrying a user-facing message. UI catches only this."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

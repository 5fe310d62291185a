"""Persistent settings (theme and last city) backed by a JSON file."""

from __future__ import annotations

import json
import logging
import os
from enum import Enum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    """Supported colour themes."""

    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> Theme:
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class Settings(BaseModel):
    """User preferences that survive restarts."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.DARK
    city: str = ""


class SettingsStore:
    """Reads and writes Settings as a flat ``{"theme": ..., "city": ...}`` object.

    Each key falls back to its default independently when missing or invalid,
    so a half-written or hand-edited file never prevents startup.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Settings:
        """Return stored settings, or defaults if nothing usable is stored."""
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return Settings()
        except (OSError, ValueError) as exc:
            logger.warning("Could not read settings from %s: %s", self.path, exc)
            return Settings()

        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self.path)
            return Settings()

        values: dict[str, object] = {}
        theme = data.get("theme")
        if theme in {t.value for t in Theme}:
            values["theme"] = Theme(theme)
        city = data.get("city")
        if isinstance(city, str):
            values["city"] = city
        return Settings(**values)

    def save(self, settings: Settings) -> None:
        """Write settings to disk. Failures are logged, never raised."""
        payload = {"theme": settings.theme.value, "city": settings.city}
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
        except OSError as exc:
            logger.warning("Could not save settings to %s: %s", self.path, exc)

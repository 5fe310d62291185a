"""Environment-driven configuration for the weather dashboard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from openweather._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "settings.json")


@dataclass(frozen=True)
class DashboardConfig:
    """Runtime settings read once from the environment."""

    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    settings_path: str = DEFAULT_SETTINGS_PATH


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid OPENWEATHER_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive OPENWEATHER_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    return value


def load_config(environ: dict[str, str] | None = None) -> DashboardConfig:
    """Build a DashboardConfig from environment variables.

    Recognised variables: OPENWEATHER_API_KEY, OPENWEATHER_BASE_URL,
    OPENWEATHER_TIMEOUT and WEATHER_DASHBOARD_SETTINGS.
    """
    env = os.environ if environ is None else environ
    return DashboardConfig(
        api_key=env.get("OPENWEATHER_API_KEY") or None,
        base_url=env.get("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL,
        timeout=_read_timeout(env.get("OPENWEATHER_TIMEOUT")),
        settings_path=env.get("WEATHER_DASHBOARD_SETTINGS") or DEFAULT_SETTINGS_PATH,
    )

"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from openweather.models import CurrentWeather, ForecastEntry  # noqa: E402

from shared.data import WeatherDataError, WeatherReport, WeatherRepository  # noqa: E402
from shared.settings_store import SettingsStore  # noqa: E402
from tests.conftest import SAMPLE_CURRENT, make_forecast_entry  # noqa: E402


# ── Logging isolation ────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _api_log_to_tmp(tmp_path):
    """Send the API call log to tmp_path instead of dashboard/logs."""
    import shared.api_logging as mod

    old_logger, old_dir, old_file = mod._logger, mod._LOG_DIR, mod._LOG_FILE
    named_logger = logging.getLogger("weather_dashboard.api")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger, mod._LOG_DIR, mod._LOG_FILE = old_logger, old_dir, old_file


# ── Sample data factories ────────────────────────────────────────────────────


def _make_current(**overrides) -> CurrentWeather:
    data = {**SAMPLE_CURRENT}
    main = {**SAMPLE_CURRENT["main"], **overrides.pop("main", {})}
    data.update(overrides)
    data["main"] = main
    return CurrentWeather.model_validate(data)


def _make_entries(count: int = 40) -> tuple[ForecastEntry, ...]:
    return tuple(ForecastEntry.model_validate(make_forecast_entry(i)) for i in range(count))


def _make_report(name: str = "London", temp: float = 15.3, count: int = 40) -> WeatherReport:
    return WeatherReport(
        current=_make_current(name=name, main={"temp": temp}),
        forecast=_make_entries(count),
    )


class FakeRepository(WeatherRepository):
    """In-memory repository; outcomes keyed by city, optionally gated by an Event."""

    def __init__(self, outcomes: dict[str, WeatherReport | WeatherDataError] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []

    async def fetch_weather(self, city: str) -> WeatherReport:
        self.calls.append(city)
        gate = self.gates.get(city)
        if gate is not None:
            await gate.wait()
        outcome = self.outcomes[city]
        if isinstance(outcome, WeatherDataError):
            raise outcome
        return outcome


@pytest.fixture
def make_current():
    """Factory fixture for CurrentWeather models."""
    return _make_current


@pytest.fixture
def make_entries():
    """Factory fixture for chronological forecast entries."""
    return _make_entries


@pytest.fixture
def make_report():
    """Factory fixture for WeatherReport objects."""
    return _make_report


@pytest.fixture
def london_current() -> CurrentWeather:
    return _make_current()


@pytest.fixture
def settings_path(tmp_path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def settings_store(settings_path) -> SettingsStore:
    return SettingsStore(str(settings_path))


@pytest.fixture
def fake_repository() -> FakeRepository:
    return FakeRepository()

"""View state for the weather dashboard (no Streamlit dependency).

The fetch cycle is an explicit tagged state rather than a set of optional
fields, so "data and error at the same time" cannot be represented:

    Idle -> Loading -> Loaded(report) | Failed(message) -> Loading -> ...

Each search takes a new request id. When searches overlap, only the most
recent one may publish its outcome; results of older ones are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from openweather.models import CurrentWeather, ForecastEntry

from .api_logging import log_service_call
from .data import WeatherDataError, WeatherReport, WeatherRepository
from .settings_store import Settings, SettingsStore, Theme


class Tab(str, Enum):
    """Mutually exclusive content regions of the page."""

    WEATHER = "weather"
    FORECAST = "forecast"
    MAP = "map"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Idle:
    """No search has been made yet."""


@dataclass(frozen=True)
class Loading:
    city: str
    request_id: int


@dataclass(frozen=True)
class Loaded:
    report: WeatherReport


@dataclass(frozen=True)
class Failed:
    message: str


FetchState = Idle | Loading | Loaded | Failed


class WeatherDashboardController:
    """Owns city text, active tab, theme and the current fetch state."""

    def __init__(
        self,
        repository: WeatherRepository,
        store: SettingsStore,
        settings: Settings | None = None,
    ) -> None:
        self._repository = repository
        self._store = store
        self._settings = settings if settings is not None else store.load()
        self.city: str = self._settings.city
        self.active_tab: Tab = Tab.WEATHER
        self.fetch_state: FetchState = Idle()
        self._request_seq = 0

    # ── Read-only views ────────────────────────────────────────

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def theme(self) -> Theme:
        return self._settings.theme

    @property
    def report(self) -> WeatherReport | None:
        return self.fetch_state.report if isinstance(self.fetch_state, Loaded) else None

    @property
    def current(self) -> CurrentWeather | None:
        report = self.report
        return report.current if report is not None else None

    @property
    def forecast(self) -> tuple[ForecastEntry, ...]:
        report = self.report
        return report.forecast if report is not None else ()

    @property
    def error(self) -> str:
        return self.fetch_state.message if isinstance(self.fetch_state, Failed) else ""

    @property
    def is_loading(self) -> bool:
        return isinstance(self.fetch_state, Loading)

    # ── Transitions ────────────────────────────────────────────

    def set_city(self, text: str) -> None:
        """Update the pending city text. Does not fetch or persist."""
        self.city = text

    def select_tab(self, tab: Tab | str) -> None:
        """Switch the visible tab. Raises ValueError for unknown tab names."""
        self.active_tab = Tab(tab)

    def toggle_theme(self) -> Theme:
        """Flip dark/light and persist the change."""
        self._update_settings(theme=self._settings.theme.toggled())
        return self._settings.theme

    @log_service_call
    async def commit_search(self) -> FetchState:
        """Run one fetch cycle for the current city text.

        Previous data or error is cleared before the request goes out. If a
        newer search starts before this one resolves, this one's outcome is
        discarded and the newer state is returned instead.
        """
        self._request_seq += 1
        request_id = self._request_seq
        city = self.city
        self.fetch_state = Loading(city=city, request_id=request_id)

        if city != self._settings.city:
            self._update_settings(city=city)

        try:
            report = await self._repository.fetch_weather(city)
        except WeatherDataError as exc:
            outcome: FetchState = Failed(exc.message)
        else:
            outcome = Loaded(report)

        if request_id == self._request_seq:
            self.fetch_state = outcome
        return self.fetch_state

    def _update_settings(self, **changes: object) -> None:
        self._settings = self._settings.model_copy(update=changes)
        self._store.save(self._settings)

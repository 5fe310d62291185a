"""Map deck for the map tab: one temperature-labelled marker on a street basemap."""

from __future__ import annotations

from html import escape

import pydeck as pdk

from openweather.models import CurrentWeather

from ..constants import (
    BADGE_BACKGROUND_COLOR,
    BADGE_TEXT_COLOR,
    MAP_PROVIDER,
    MAP_STYLE,
    MAP_ZOOM,
    MARKER_COLOR,
    MARKER_RADIUS_PX,
    TOOLTIP_STYLE,
)
from ..formatters import format_temperature, icon_url


def marker_popup(current: CurrentWeather) -> str:
    """Tooltip HTML for the location marker: place, icon, temperature, description."""
    place = ", ".join(part for part in (current.name, current.sys.country) if part)
    lines = [f"<b>📍 {escape(place)}</b>"]
    icon = icon_url(current.condition.icon, size="2x")
    if icon:
        lines.append(f'<img src="{icon}" width="50" height="50" alt="">')
    lines.append(f"🌡 {format_temperature(current.main.temp)}")
    if current.condition.description:
        lines.append(escape(current.condition.description.capitalize()))
    return "<br>".join(lines)


def build_weather_map(current: CurrentWeather | None, height: int = 500) -> pdk.Deck | None:
    """Return a deck centred on the fetched location, or None without data.

    The marker carries a rounded-temperature badge; hovering it shows the
    popup from :func:`marker_popup`.
    """
    if current is None or current.coord.lat is None or current.coord.lon is None:
        return None

    lat, lon = current.coord.lat, current.coord.lon
    point = {
        "lat": lat,
        "lon": lon,
        "label": format_temperature(current.main.temp),
        "popup": marker_popup(current),
    }
    marker = pdk.Layer(
        "ScatterplotLayer",
        data=[point],
        id="location-marker",
        get_position="[lon, lat]",
        get_fill_color=MARKER_COLOR,
        get_radius=MARKER_RADIUS_PX,
        radius_units="pixels",
        pickable=True,
    )
    badge = pdk.Layer(
        "TextLayer",
        data=[point],
        id="temperature-badge",
        get_position="[lon, lat]",
        get_text="label",
        get_size=16,
        get_color=BADGE_TEXT_COLOR,
        get_pixel_offset=[0, -24],
        background=True,
        get_background_color=BADGE_BACKGROUND_COLOR,
        pickable=True,
    )
    return pdk.Deck(
        layers=[marker, badge],
        initial_view_state=pdk.ViewState(latitude=lat, longitude=lon, zoom=MAP_ZOOM),
        map_provider=MAP_PROVIDER,
        map_style=MAP_STYLE,
        tooltip={"html": "{popup}", "style": TOOLTIP_STYLE},
        height=height,
    )

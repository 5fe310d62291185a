"""Query parameter builder for OpenWeather requests."""

from __future__ import annotations

from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are dropped so optional parameters can be passed through
    unconditionally.

    Args:
        **kwargs: Parameter names mapped to plain values (``q="London"``,
                  ``lat=51.5``, ``units="metric"``).

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    return [
        (key, _format_value(value))
        for key, value in kwargs.items()
        if value is not None
    ]

"""API call logging for the weather dashboard data and controller layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("weather_dashboard.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _item_count(result: Any) -> int:
    return len(result) if isinstance(result, list) else 1


def log_api_call(fn: F) -> F:
    """Decorator that logs data-layer method calls to the API log file.

    Works on both plain and ``async`` methods.
    """

    def _before(args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[logging.Logger, str, float]:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
        return logger, arg_str, time.monotonic()

    def _ok(logger: logging.Logger, arg_str: str, start: float, result: Any) -> None:
        logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _item_count(result), time.monotonic() - start,
        )

    def _fail(logger: logging.Logger, arg_str: str, start: float, exc: Exception) -> None:
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger, arg_str, start = _before(args, kwargs)
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(logger, arg_str, start, exc)
                raise
            _ok(logger, arg_str, start, result)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger, arg_str, start = _before(args, kwargs)
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(logger, arg_str, start, exc)
            raise
        _ok(logger, arg_str, start, result)
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs controller-level calls to the API log file."""

    def _before(args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[logging.Logger, float]:
        logger = _get_logger()
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))
        return logger, time.monotonic()

    def _fail(logger: logging.Logger, start: float, exc: Exception) -> None:
        logger.error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger, start = _before(args, kwargs)
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(logger, start, exc)
                raise
            logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger, start = _before(args, kwargs)
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(logger, start, exc)
            raise
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]

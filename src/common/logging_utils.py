"""Centralized logging helpers.

Configures the root logger once from the environment and provides small
helpers for structured DEBUG traces. Kept free of project imports other than
``constants`` so any module can use it without cycles.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants


def _level_from_env() -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").strip().upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """Configure the root logger.

    The level comes from ``LOCKDIFF_LOG_LEVEL`` (default INFO) unless given.
    Existing handlers are kept; repeated calls only adjust the level.
    """
    if level is None:
        level = _level_from_env()
    logging.basicConfig(format=Constants.LOG_FORMAT)
    logging.getLogger().setLevel(level)


def is_debug_enabled(logger: logging.Logger) -> bool:
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` payload for structured log records.

    None values are dropped. Field names that collide with LogRecord
    attributes are prefixed with ``ctx_``.
    """
    reserved = logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    context: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        context[f"ctx_{key}" if key in reserved else key] = value
    return context


class Timer:
    """Context manager measuring elapsed wall time."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)

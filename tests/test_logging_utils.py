"""Tests for centralized logging helpers."""

import logging

from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from constants import Constants


def test_extra_context_drops_none_and_prefixes_reserved():
    ctx = extra_context(event="parse", name="lockfile", msg="x", outcome=None)
    assert ctx == {"event": "parse", "ctx_name": "lockfile", "ctx_msg": "x"}


def test_configure_logging_reads_env(monkeypatch):
    root = logging.getLogger()
    previous = root.level
    try:
        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "debug")
        configure_logging()
        assert root.level == logging.DEBUG
        assert is_debug_enabled(logging.getLogger("lockfile.parser"))

        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "bogus")
        configure_logging()
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_explicit_level_wins(monkeypatch):
    root = logging.getLogger()
    previous = root.level
    try:
        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "DEBUG")
        configure_logging(logging.ERROR)
        assert root.level == logging.ERROR
    finally:
        root.setLevel(previous)


def test_timer_measures_elapsed():
    with Timer() as t:
        pass
    assert t.duration_ms() >= 0


def test_common_is_a_regular_package():
    import common

    assert common.__file__ is not None
    assert common.__file__.endswith("__init__.py")

"""Resolve runtime settings from CLI flags, the config file and defaults.

Extracted from lockdiff.py to keep the entrypoint slim. CLI flags take
precedence over the configuration file, which takes precedence over the
defaults in ``Constants``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)


@dataclass
class ReportSettings:
    """Effective report options for one run."""
    plain_statuses: bool = Constants.PLAIN_STATUSES
    fail_on_downgrade: bool = Constants.FAIL_ON_DOWNGRADE
    collapsible_threshold: int = Constants.COLLAPSIBLE_THRESHOLD


def _as_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
    logger.warning("Ignoring non-boolean config value: %r", value)
    return default


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer config value: %r", value)
        return default


def load_settings(args) -> ReportSettings:
    """Build ReportSettings for the parsed CLI arguments.

    Args:
        args: argparse namespace from ``args.parse_args``.

    Returns:
        ReportSettings with CLI > config file > defaults precedence applied.
    """
    settings = ReportSettings()
    cfg = _load_yaml_config(getattr(args, "CONFIG", None))

    if "plain_statuses" in cfg:
        settings.plain_statuses = _as_bool(cfg["plain_statuses"], settings.plain_statuses)
    if "fail_on_downgrade" in cfg:
        settings.fail_on_downgrade = _as_bool(cfg["fail_on_downgrade"], settings.fail_on_downgrade)
    if "collapsible_threshold" in cfg:
        settings.collapsible_threshold = _as_int(
            cfg["collapsible_threshold"], settings.collapsible_threshold
        )

    if getattr(args, "PLAIN_STATUSES", None) is not None:
        settings.plain_statuses = bool(args.PLAIN_STATUSES)
    if getattr(args, "FAIL_ON_DOWNGRADE", None) is not None:
        settings.fail_on_downgrade = bool(args.FAIL_ON_DOWNGRADE)
    if getattr(args, "COLLAPSIBLE_THRESHOLD", None) is not None:
        settings.collapsible_threshold = int(args.COLLAPSIBLE_THRESHOLD)
    return settings

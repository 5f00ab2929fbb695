"""Constants used in the project."""

import json
import logging
import os
from enum import Enum

import yaml

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    EXIT_WARNINGS = 3


class OutputFormats(Enum):
    """Report formats supported by the program.

    Args:
        Enum (string): Report formats supported by the program.
    """

    MARKDOWN = "markdown"
    JSON = "json"
    CSV = "csv"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_LOCKFILE = "yarn.lock"
    SUPPORTED_FORMATS = [
        OutputFormats.MARKDOWN.value,
        OutputFormats.JSON.value,
        OutputFormats.CSV.value,
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "LOCKDIFF_LOG_LEVEL"
    CONFIG_FILE_NAMES = ["lockdiff.yml", "lockdiff.yaml", ".lockdiff.yml"]
    CONFIG_SECTION = "lockdiff"

    # Lockfile layout
    CLASSIC_HEADER_LINES = 4
    BERRY_HEADER_LINES = 7
    BERRY_V2_MAX_METADATA = 4
    MIN_ENTRY_LINES = 4
    WORKSPACE_RESOLUTION = "workspace"
    LOCAL_VERSION_MARKER = "use.local"
    BERRY_PROTOCOLS = ["@npm:", "@yarn:", "@workspace:"]

    # Reporting
    EMPTY_VERSION = "-"
    COLLAPSIBLE_THRESHOLD = 25
    PLAIN_STATUSES = False
    FAIL_ON_DOWNGRADE = False
    STATUS_BADGES = {
        "ADDED": "https://git.io/J38HP",
        "DOWNGRADED": "https://git.io/J38ds",
        "REMOVED": "https://git.io/J38dt",
        "UPDATED": "https://git.io/J38dY",
    }

    GIT_TIMEOUT = 30  # Timeout in seconds for git invocations


def _load_yaml_config(path=None):
    """Load a YAML (or JSON) configuration file.

    Looks at ``path`` when given, otherwise at the first of
    ``Constants.CONFIG_FILE_NAMES`` present in the working directory.

    Args:
        path (str, optional): Explicit configuration file path.

    Returns:
        dict: Parsed configuration, empty when nothing usable was found.
    """
    candidates = [path] if path else [
        os.path.join(os.getcwd(), name) for name in Constants.CONFIG_FILE_NAMES
    ]
    for candidate in candidates:
        if not candidate or not os.path.isfile(candidate):
            if path:
                logger.warning("Config file not found: %s", candidate)
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as fh:
                if candidate.lower().endswith(".json"):
                    data = json.load(fh)
                else:
                    data = yaml.safe_load(fh)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning("Failed to load config %s: %s", candidate, e)
            return {}
        if not isinstance(data, dict):
            return {}
        section = data.get(Constants.CONFIG_SECTION)
        return section if isinstance(section, dict) else data
    return {}

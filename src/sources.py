"""Read lockfile text from disk or from a git revision.

Both readers return text that already satisfies the parser's input contract
(``\\n`` line endings, no quote characters).
"""
from __future__ import annotations

import logging
import os
import subprocess

from constants import Constants
from lockfile.parser import prepare_lines

logger = logging.getLogger(__name__)


class LockfileReadError(Exception):
    """Raised when a lockfile cannot be read from its source."""


def _normalize(text: str) -> str:
    return "\n".join(prepare_lines(text))


def read_lockfile(path: str) -> str:
    """Read a lockfile from disk.

    Args:
        path (str): Lockfile path.

    Raises:
        LockfileReadError: If the file cannot be read.

    Returns:
        str: Normalized lockfile text.
    """
    try:
        with open(path, "r", encoding="utf-8") as file:
            return _normalize(file.read())
    except (OSError, UnicodeDecodeError) as e:
        raise LockfileReadError(f"Unable to read lockfile {path}: {e}") from e


def read_git_revision(ref: str, path: str) -> str:
    """Read a lockfile as it exists at a git revision.

    A lockfile that does not exist at ``ref`` reads as empty text, so every
    package of the other side is reported as added.

    Args:
        ref (str): Any revision ``git show`` accepts (branch, tag, sha).
        path (str): Lockfile path relative to the working directory.

    Raises:
        LockfileReadError: If git cannot be invoked or the revision is unknown.

    Returns:
        str: Normalized lockfile text.
    """
    # "<ref>:./<path>" resolves against the working directory, not the repo root.
    object_name = f"{ref}:./{os.path.relpath(path)}"
    try:
        result = subprocess.run(
            ["git", "show", object_name],
            capture_output=True,
            text=True,
            timeout=Constants.GIT_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise LockfileReadError(f"Unable to run git for {object_name}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        if "does not exist in" in stderr or "exists on disk, but not in" in stderr:
            logger.info("Lockfile %s not present at %s; treating as empty.", path, ref)
            return ""
        raise LockfileReadError(f"git show {object_name} failed: {stderr}")
    return _normalize(result.stdout)

"""Lockfile format detection from the leading header lines."""

import re
from typing import Sequence

from constants import Constants

from .models import FormatInfo, LockRevision

_BERRY_VERSION_RE = re.compile(r"version:\s*(\d+)")

UNSUPPORTED = FormatInfo(revision=None, header_lines=0)


def detect_format(lines: Sequence[str]) -> FormatInfo:
    """Identify the lockfile schema from its header.

    Classic lockfiles announce ``# yarn lockfile v1`` on the second line;
    berry lockfiles carry ``__metadata`` with ``version: N`` on the fifth.

    Args:
        lines: All lines of the lockfile, quotes and carriage returns removed.

    Returns:
        FormatInfo with the revision and the number of header lines to skip,
        or ``UNSUPPORTED`` when neither header shape matches.
    """
    if len(lines) > 1 and "v1" in lines[1]:
        return FormatInfo(LockRevision.CLASSIC, Constants.CLASSIC_HEADER_LINES)
    if len(lines) > 4 and "version:" in lines[4]:
        match = _BERRY_VERSION_RE.search(lines[4])
        # A non-numeric version (e.g. "next") is newer than any known v2 schema.
        if match and int(match.group(1)) <= Constants.BERRY_V2_MAX_METADATA:
            revision = LockRevision.BERRY
        else:
            revision = LockRevision.BERRY_V3
        return FormatInfo(revision, Constants.BERRY_HEADER_LINES)
    return UNSUPPORTED

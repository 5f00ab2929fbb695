"""Collapse specifier keys into one representative version per package name."""

import re
from typing import Dict, Tuple

import semantic_version

from .models import NormalizedEntry, ParsedLock

_COERCE_RE = re.compile(r"(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?")

ZERO_VERSION = semantic_version.Version("0.0.0")


def package_name(key: str) -> str:
    """Return the package name part of a ``name@range`` specifier.

    Scoped packages keep their leading ``@``: ``@scope/pkg@^1.2.3`` gives
    ``@scope/pkg``; a bare ``@scope/pkg`` key is returned unchanged.
    """
    name = key[:key.rfind("@")] if "@" in key else key
    if not name:
        return "@" + key.split("@")[1]
    return name


def coerce_version(text: str) -> semantic_version.Version:
    """Coerce a range or loose version into the nearest semantic version.

    Takes the first ``major[.minor[.patch]]`` run found in ``text``; missing
    parts are zero. Text without any digits coerces to ``0.0.0``.
    """
    match = _COERCE_RE.search(text or "")
    if not match:
        return ZERO_VERSION
    major, minor, patch = (int(part or 0) for part in match.groups())
    return semantic_version.Version(major=major, minor=minor, patch=patch)


def to_semver(version: str) -> semantic_version.Version:
    """Parse a literal version strictly, falling back to coercion."""
    try:
        return semantic_version.Version(version)
    except ValueError:
        return coerce_version(version)


def _sort_key(key: str) -> Tuple[str, semantic_version.Version]:
    return package_name(key), coerce_version(key[key.rfind("@") + 1:])


def normalize_entries(parsed: ParsedLock) -> Dict[str, NormalizedEntry]:
    """Fold a ParsedLock into one NormalizedEntry per package name.

    Keys are ordered by name, then by the version their range coerces to;
    for each name the last key in that order wins. Packages whose ranges
    resolve to different versions therefore report a single version.
    """
    normalized: Dict[str, NormalizedEntry] = {}
    for key in sorted(parsed.entries, key=_sort_key):
        name = package_name(key)
        normalized[name] = NormalizedEntry(name=name, version=parsed.entries[key].version)
    return normalized

"""Parse raw lockfile text into a ParsedLock."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List

from common.logging_utils import extra_context, is_debug_enabled

from .builders import BUILDERS
from .chunker import split_entries
from .detect import detect_format
from .models import PackageEntry, ParsedLock

logger = logging.getLogger(__name__)


def prepare_lines(text: str) -> List[str]:
    """Apply the lockfile input contract: drop carriage returns and quotes, split lines."""
    return text.replace("\r", "").replace('"', "").split("\n")


def parse_lock(text: str) -> ParsedLock:
    """Parse lockfile text that already satisfies the input contract.

    Never raises; unrecognized formats produce ``ParsedLock(ok=False)`` so the
    caller can warn and skip diffing.

    Args:
        text: Lockfile contents with ``\\n`` line endings and no ``"`` characters.

    Returns:
        ParsedLock mapping every specifier key to its shared entry.
    """
    lines = text.split("\n")
    info = detect_format(lines)
    if not info.supported:
        logger.warning("Unsupported lockfile format; no entries parsed.")
        return ParsedLock.unsupported()

    build = BUILDERS[info.revision]
    entries: Dict[str, PackageEntry] = {}
    chunks = split_entries(lines[info.header_lines:])
    for chunk in chunks:
        keys, entry = build(chunk)
        for key in keys:
            entries[key] = entry

    if is_debug_enabled(logger):
        logger.debug(
            "Parsed lockfile",
            extra=extra_context(
                event="parse",
                component="lockfile",
                action="parse_lock",
                revision=info.revision.name,
                chunks=len(chunks),
                count=len(entries),
            ),
        )
    return ParsedLock(ok=True, entries=MappingProxyType(entries), revision=info.revision)

"""Split lockfile bodies into blank-line delimited entry blocks."""

from typing import Iterable, List

from constants import Constants


def split_entries(lines: Iterable[str], min_lines: int = Constants.MIN_ENTRY_LINES) -> List[List[str]]:
    """Group consecutive non-blank lines into entry chunks.

    Chunks shorter than ``min_lines`` cannot hold an entry skeleton
    (header, version, resolution and at least one more field) and are dropped.
    """
    chunks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
            continue
        if current:
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    return [chunk for chunk in chunks if len(chunk) >= min_lines]

"""Lockfile parsing and diffing for classic and berry yarn lockfiles."""

from .diff import count_statuses, diff_locks, has_downgrades
from .models import (
    Change,
    ChangeSet,
    ChangeStatus,
    LockRevision,
    NormalizedEntry,
    PackageEntry,
    ParsedLock,
)
from .normalize import normalize_entries
from .parser import parse_lock, prepare_lines

__all__ = [
    "Change",
    "ChangeSet",
    "ChangeStatus",
    "LockRevision",
    "NormalizedEntry",
    "PackageEntry",
    "ParsedLock",
    "count_statuses",
    "diff_locks",
    "has_downgrades",
    "normalize_entries",
    "parse_lock",
    "prepare_lines",
]

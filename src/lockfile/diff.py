"""Compute the change set between two parsed lockfiles."""

import logging

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled

from .models import Change, ChangeSet, ChangeStatus, ParsedLock
from .normalize import normalize_entries, to_semver

logger = logging.getLogger(__name__)


def diff_locks(previous: ParsedLock, current: ParsedLock) -> ChangeSet:
    """Classify every package name as added, removed, updated or downgraded.

    Packages whose representative version is identical on both sides are left
    out of the result. Only names and versions are compared; dependency
    tables are not consulted. An unsupported ParsedLock counts as empty.

    Args:
        previous: Lockfile state before the change.
        current: Lockfile state after the change.

    Returns:
        ChangeSet keyed by package name.
    """
    changes: ChangeSet = {
        name: Change(
            previous=item.version,
            current=Constants.EMPTY_VERSION,
            status=ChangeStatus.REMOVED,
        )
        for name, item in normalize_entries(previous).items()
    }

    for name, item in normalize_entries(current).items():
        seeded = changes.get(name)
        if seeded is None:
            changes[name] = Change(
                previous=Constants.EMPTY_VERSION,
                current=item.version,
                status=ChangeStatus.ADDED,
            )
        elif seeded.previous == item.version:
            del changes[name]
        else:
            status = (
                ChangeStatus.UPDATED
                if to_semver(item.version) > to_semver(seeded.previous)
                else ChangeStatus.DOWNGRADED
            )
            changes[name] = Change(previous=seeded.previous, current=item.version, status=status)

    if is_debug_enabled(logger):
        logger.debug(
            "Computed lockfile changes",
            extra=extra_context(
                event="diff",
                component="lockfile",
                action="diff_locks",
                count=len(changes),
            ),
        )
    return changes


def count_statuses(changes: ChangeSet, status: ChangeStatus) -> int:
    """Return how many changes carry ``status``."""
    return sum(1 for change in changes.values() if change.status == status)


def has_downgrades(changes: ChangeSet) -> bool:
    return count_statuses(changes, ChangeStatus.DOWNGRADED) > 0

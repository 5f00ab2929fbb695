"""Data models for parsed lockfiles and the change sets computed between them."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class LockRevision(Enum):
    """Lockfile schema revision detected from the file header."""
    CLASSIC = 1
    BERRY = 2
    BERRY_V3 = 3

    @property
    def is_berry(self) -> bool:
        """Return True for the multi-version (berry) schema family."""
        return self is not LockRevision.CLASSIC


class ChangeStatus(Enum):
    """Classification of a package between two lockfile snapshots."""
    ADDED = "ADDED"
    REMOVED = "REMOVED"
    UPDATED = "UPDATED"
    DOWNGRADED = "DOWNGRADED"


@dataclass(frozen=True)
class FormatInfo:
    """Outcome of header inspection; revision is None for unsupported input."""
    revision: Optional[LockRevision]
    header_lines: int

    @property
    def supported(self) -> bool:
        return self.revision is not None


@dataclass(frozen=True)
class PackageEntry:
    """One resolved package instance, shared by every specifier aliasing it."""
    version: str
    resolved: Optional[str] = None
    integrity: Optional[str] = None
    dependencies: Mapping[str, str] = field(default_factory=dict)
    peer_dependencies: Mapping[str, str] = field(default_factory=dict)
    language: Optional[str] = None
    link_type: Optional[str] = None

    @property
    def is_workspace(self) -> bool:
        return self.resolved == "workspace"


@dataclass(frozen=True)
class ParsedLock:
    """Result of parsing one lockfile text.

    ``ok`` is False when the format was not recognized; ``entries`` is then empty.
    ``entries`` and the dependency tables of each entry are read-only mappings.
    """
    ok: bool
    entries: Mapping[str, PackageEntry] = field(default_factory=dict)
    revision: Optional[LockRevision] = None

    @classmethod
    def unsupported(cls) -> "ParsedLock":
        return cls(ok=False, entries=MappingProxyType({}), revision=None)


@dataclass(frozen=True)
class NormalizedEntry:
    """One representative version per package name."""
    name: str
    version: str


@dataclass(frozen=True)
class Change:
    """Version change of a single package; "-" marks the absent side."""
    previous: str
    current: str
    status: ChangeStatus

    def to_dict(self) -> Dict[str, str]:
        return {
            "previous": self.previous,
            "current": self.current,
            "status": self.status.value,
        }


# Package name -> Change. Unchanged packages are never present.
ChangeSet = Dict[str, Change]

# Raw specifier keys plus the entry they alias, as produced by an entry builder.
BuiltEntry = Tuple[List[str], PackageEntry]

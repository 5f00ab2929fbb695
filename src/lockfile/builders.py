"""Entry builders turning one lockfile chunk into a PackageEntry.

Both builders share one contract: ``(chunk lines) -> (keys, PackageEntry)``.
The first line of a chunk is always the specifier header; the remaining lines
are scanned by role rather than by position:

- field lines at two-space indent (``version``, ``resolved``/``resolution``,
  ``integrity``/``checksum``, ``languageName``, ``linkType``)
- section headers at the same indent ending in a colon (``dependencies:``),
  which switch the scanner into that section
- nested lines, attributed to the open section

Sections that do not map to a dependency table (``peerDependenciesMeta``,
``dependenciesMeta``, ``bin``) are skipped as a whole.
"""

from types import MappingProxyType
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from constants import Constants

from .models import BuiltEntry, LockRevision, PackageEntry

FIELD_INDENT = 2

DEPENDENCIES = "dependencies"
PEER_DEPENDENCIES = "peerDependencies"

# Section header -> dependency table it feeds
_CLASSIC_SECTIONS = {
    "dependencies": DEPENDENCIES,
    "optionalDependencies": DEPENDENCIES,
}
_BERRY_SECTIONS = {
    "dependencies": DEPENDENCIES,
    "peerDependencies": PEER_DEPENDENCIES,
}


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _split_field(stripped: str) -> Tuple[str, Optional[str]]:
    """Split ``key value`` / ``key: value``; value is None for section headers."""
    parts = stripped.split(None, 1)
    key = parts[0]
    if len(parts) == 1:
        if key.endswith(":"):
            return key[:-1], None
        return key, ""
    return key.rstrip(":"), parts[1].strip()


def parse_dependency_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse ``name range`` (or ``name: range``).

    Lines that do not split into exactly two tokens are not dependency edges
    and yield None.
    """
    tokens = line.split()
    if len(tokens) != 2:
        return None
    name = tokens[0].rstrip(":")
    if not name:
        return None
    return name, tokens[1]


def parse_keys(header: str, protocols: Sequence[str] = ()) -> List[str]:
    """Split an entry header into its specifier keys.

    Protocol markers such as ``@npm:`` are collapsed to a bare ``@`` first so
    that the keys read as plain ``name@range`` specifiers.
    """
    for protocol in protocols:
        header = header.replace(protocol, "@")
    header = header.strip()
    if header.endswith(":"):
        header = header[:-1]
    return [key.strip() for key in header.split(",") if key.strip()]


def scan_body(lines: Sequence[str], sections: Dict[str, str]):
    """Walk the body lines of a chunk, collecting fields and dependency tables.

    Args:
        lines: Chunk lines after the header.
        sections: Mapping of recognized section headers to table names.

    Returns:
        tuple: (fields dict, tables dict keyed by table name)
    """
    fields: Dict[str, str] = {}
    tables: Dict[str, Dict[str, str]] = {DEPENDENCIES: {}, PEER_DEPENDENCIES: {}}
    open_table: Optional[str] = None
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        if _indent(line) <= FIELD_INDENT:
            key, value = _split_field(stripped)
            if value is None:
                open_table = sections.get(key)
            else:
                fields.setdefault(key, value)
                open_table = None
            continue
        if open_table is None:
            continue
        edge = parse_dependency_line(stripped)
        if edge is not None:
            tables[open_table][edge[0]] = edge[1]
    return fields, tables


def build_classic_entry(chunk: Sequence[str]) -> BuiltEntry:
    """Build an entry from a classic (v1) chunk.

    Example chunk::

        a@^1.0.0, a@^1.1.0:
          version 1.1.2
          resolved https://registry.yarnpkg.com/a/-/a-1.1.2.tgz#abc
          integrity sha512-...
          dependencies:
            b ^2.0.0
    """
    keys = parse_keys(chunk[0])
    fields, tables = scan_body(chunk[1:], _CLASSIC_SECTIONS)
    entry = PackageEntry(
        version=fields.get("version", ""),
        resolved=fields.get("resolved"),
        integrity=fields.get("integrity"),
        dependencies=MappingProxyType(tables[DEPENDENCIES]),
    )
    return keys, entry


def build_berry_entry(chunk: Sequence[str]) -> BuiltEntry:
    """Build an entry from a berry (v2+) chunk.

    Local packages (version containing ``use.local``) never carry a checksum;
    workspace resolutions are reported as the literal ``workspace``.
    """
    keys = parse_keys(chunk[0], Constants.BERRY_PROTOCOLS)
    fields, tables = scan_body(chunk[1:], _BERRY_SECTIONS)
    version = fields.get("version", "")
    is_local = Constants.LOCAL_VERSION_MARKER in version
    resolved = fields.get("resolution")
    if resolved is not None and "@workspace:" in resolved:
        resolved = Constants.WORKSPACE_RESOLUTION
    entry = PackageEntry(
        version=version,
        resolved=resolved,
        integrity=None if is_local else fields.get("checksum"),
        dependencies=MappingProxyType(tables[DEPENDENCIES]),
        peer_dependencies=MappingProxyType(tables[PEER_DEPENDENCIES]),
        language=fields.get("languageName"),
        link_type=fields.get("linkType"),
    )
    return keys, entry


BUILDERS: Dict[LockRevision, Callable[[Sequence[str]], BuiltEntry]] = {
    LockRevision.CLASSIC: build_classic_entry,
    LockRevision.BERRY: build_berry_entry,
    LockRevision.BERRY_V3: build_berry_entry,
}

"""Render and export lockfile change sets.

Markdown output follows the pull-request comment layout: a status summary
followed by a Name/Status/Previous/Current table sorted by package name.
"""

import csv
import json
import logging
import sys
from typing import List, Optional, Sequence

from constants import Constants, ExitCodes
from lockfile.diff import count_statuses
from lockfile.models import ChangeSet, ChangeStatus

SUMMARY_ORDER = [
    ChangeStatus.ADDED,
    ChangeStatus.UPDATED,
    ChangeStatus.DOWNGRADED,
    ChangeStatus.REMOVED,
]


def status_label(status: ChangeStatus, plain: bool = False) -> str:
    """Return the status cell: the bare status name or a badge image."""
    if plain:
        return status.value
    url = Constants.STATUS_BADGES[status.value]
    return f'[<sub><img alt="{status.value}" src="{url}" height="16" /></sub>](#)'


def markdown_table(rows: Sequence[Sequence[str]], align: Sequence[str]) -> str:
    """Build a markdown table; ``align`` holds "l", "c" or "r" per column."""
    delimiters = {"l": ":--", "c": ":-:", "r": "--:"}
    header, body = rows[0], rows[1:]
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join(delimiters[a] for a in align) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in body)
    return "\n".join(lines)


def render_table(changes: ChangeSet, plain_statuses: bool = False) -> str:
    rows = sorted(
        [
            f"`{name}`",
            status_label(change.status, plain_statuses),
            change.previous,
            change.current,
        ]
        for name, change in changes.items()
    )
    return markdown_table([["Name", "Status", "Previous", "Current"], *rows], ["l", "c", "c", "c"])


def render_summary(changes: ChangeSet, plain_statuses: bool = False) -> str:
    """Status/count table; statuses without changes are omitted."""
    rows: List[List[str]] = [["Status", "Count"]]
    for status in SUMMARY_ORDER:
        count = count_statuses(changes, status)
        if count:
            rows.append([status_label(status, plain_statuses), str(count)])
    return markdown_table(rows, ["l", "c"])


def render_report(
    changes: ChangeSet,
    plain_statuses: bool = False,
    collapsible_threshold: Optional[int] = None,
) -> str:
    """Render the full markdown report.

    The table is folded into a ``<details>`` block once the number of changes
    exceeds ``collapsible_threshold``.
    """
    if collapsible_threshold is None:
        collapsible_threshold = Constants.COLLAPSIBLE_THRESHOLD
    if not changes:
        return "## Lockfile Changes\n\nNo changes in the lockfile."

    table = render_table(changes, plain_statuses)
    if len(changes) > collapsible_threshold:
        table = (
            f"<details>\n<summary>Lockfile changes ({len(changes)})</summary>\n\n"
            f"{table}\n\n</details>"
        )
    return "\n\n".join([
        "## Lockfile Changes",
        render_summary(changes, plain_statuses),
        table,
    ])


def export_json(changes, path):
    """Exports the change set to a JSON file.

    Args:
        changes (dict): Change set keyed by package name.
        path (str): File path to export the JSON.
    """
    data = [
        {"name": name, **changes[name].to_dict()}
        for name in sorted(changes)
    ]
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=4)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_csv(changes, path):
    """Exports the change set to a CSV file.

    Args:
        changes (dict): Change set keyed by package name.
        path (str): File path to export the CSV.
    """
    rows = [["Name", "Status", "Previous", "Current"]]
    for name in sorted(changes):
        change = changes[name]
        rows.append([name, change.status.value, change.previous, change.current])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            export = csv.writer(file)
            export.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
    except (OSError, csv.Error) as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_markdown(changes, path, plain_statuses=False, collapsible_threshold=None):
    """Writes the markdown report to a file."""
    try:
        with open(path, 'w', encoding='utf-8') as file:
            file.write(render_report(changes, plain_statuses, collapsible_threshold) + "\n")
        logging.info("Markdown report has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("Markdown report couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

"""Recursive deletion engine.

Walks the immediate children of a base directory, compares each child's
modification time against a single threshold, and removes every file
below the children that are older than it. Age is judged only at the
top level: once a child qualifies, its whole subtree is removed, and a
young child is never descended into.

Only files are removed. Directories are walked but left in place, so a
cleaned tree remains as a skeleton of empty directories.
"""

import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path

from fscleaner.cleaner.models import CleanupReport, RemovalOutcome, RunMode
from fscleaner.cleaner.notices import LoggingNoticeSink, NoticeSink
from fscleaner.cleaner.port import FilesystemPort, LocalFilesystem

logger = logging.getLogger(__name__)


def compute_oldest_allowed(minimum_age: timedelta, now: datetime | None = None) -> datetime:
    """Compute the age threshold for one run.

    Args:
        minimum_age: Entries younger than this are kept.
        now: Current time. Read from the clock if None.

    Returns:
        Timezone-aware threshold; entries modified before it qualify.

    Raises:
        ValueError: If minimum_age is negative or now is naive.
    """
    if minimum_age < timedelta(0):
        msg = f"Minimum age cannot be negative, got {minimum_age}"
        raise ValueError(msg)

    if now is None:
        now = datetime.now(tz=UTC)
    elif now.tzinfo is None:
        msg = "now must be timezone-aware"
        raise ValueError(msg)

    return now - minimum_age


def delete_recursively(
    path: Path,
    run_mode: RunMode,
    port: FilesystemPort,
    sink: NoticeSink | None = None,
) -> list[RemovalOutcome]:
    """Remove every file at or below a path, depth-first.

    Directories are descended in the order the port lists them and are
    never removed themselves. Non-directories (including paths that no
    longer exist) are removed, or only reported in dry-run mode. A failed
    removal is reported and the walk continues with the next entry.

    Args:
        path: File or directory to remove.
        run_mode: DRY_RUN to report only, EXECUTE to remove.
        port: Filesystem access used for every query and mutation.
        sink: Receives progress notices. Defaults to logging only.

    Returns:
        One RemovalOutcome per file reached, in traversal order.
    """
    if sink is None:
        sink = LoggingNoticeSink()

    outcomes: list[RemovalOutcome] = []
    _delete_into(path, run_mode, port, sink, outcomes)
    return outcomes


def _delete_into(
    path: Path,
    run_mode: RunMode,
    port: FilesystemPort,
    sink: NoticeSink,
    outcomes: list[RemovalOutcome],
) -> None:
    if port.is_directory(path):
        for entry in port.list_directories(path):
            _delete_into(entry.path, run_mode, port, sink, outcomes)
        return

    sink.removing(path, run_mode)

    if run_mode.is_dry_run:
        outcomes.append(RemovalOutcome(path=path, success=True, dry_run=True))
        return

    outcome = port.remove_file(path)
    if outcome.failed:
        sink.removal_failed(path, outcome.error or "Unknown error")
    outcomes.append(outcome)


def delete_directories_if_older_than(
    base_directory: Path,
    oldest_allowed: datetime,
    run_mode: RunMode = RunMode.DRY_RUN,
    port: FilesystemPort | None = None,
    sink: NoticeSink | None = None,
) -> CleanupReport:
    """Remove the subtrees of base_directory's children older than a threshold.

    Each immediate child whose cached modification time is strictly
    earlier than oldest_allowed is passed to delete_recursively. Every
    other child is reported as skipped and not inspected further.

    Args:
        base_directory: Directory whose immediate children are examined.
        oldest_allowed: Threshold shared by every comparison in the run.
        run_mode: DRY_RUN to report only, EXECUTE to remove.
        port: Filesystem access. Defaults to LocalFilesystem.
        sink: Receives progress notices. Defaults to logging only.

    Returns:
        CleanupReport describing the decisions taken and files handled.
    """
    if port is None:
        port = LocalFilesystem()
    if sink is None:
        sink = LoggingNoticeSink()

    sink.started(base_directory, oldest_allowed)

    expired: list[Path] = []
    skipped: list[Path] = []
    outcomes: list[RemovalOutcome] = []

    for entry in port.list_directories(base_directory):
        if entry.mtime < oldest_allowed:
            sink.deleting(entry.path)
            expired.append(entry.path)
            outcomes.extend(delete_recursively(entry.path, run_mode, port, sink))
        else:
            sink.skipping(entry.path)
            skipped.append(entry.path)

    logger.debug(
        "Finished %s: %d expired, %d skipped, %d file(s) handled",
        base_directory,
        len(expired),
        len(skipped),
        len(outcomes),
    )

    return CleanupReport(
        base_directory=base_directory,
        oldest_allowed=oldest_allowed,
        run_mode=run_mode,
        expired=tuple(expired),
        skipped=tuple(skipped),
        outcomes=tuple(outcomes),
    )

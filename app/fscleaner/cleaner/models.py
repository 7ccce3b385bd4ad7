"""Cleanup domain models.

This module defines the data structures passed between the filesystem
port, the deletion engine and the notice sinks: the run mode, listed
directory entries, per-file removal outcomes and the run report.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class RunMode(str, Enum):
    """Whether a cleanup run simulates or performs deletions.

    Attributes:
        DRY_RUN: Report what would be removed without touching the filesystem.
        EXECUTE: Remove files for real.
    """

    DRY_RUN = "dry-run"
    EXECUTE = "execute"

    @property
    def is_dry_run(self) -> bool:
        """Check if this mode only simulates deletions."""
        return self is RunMode.DRY_RUN


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A child returned by a directory listing.

    The metadata is captured once at listing time and is not refreshed.

    Attributes:
        path: Path of the child entry.
        mtime: Last modification time (timezone-aware, UTC).
    """

    path: Path
    mtime: datetime

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if self.mtime.tzinfo is None:
            msg = f"mtime must be timezone-aware: {self.path}"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Final path component of the entry."""
        return self.path.name


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of handling a single file reached during descent.

    Attributes:
        path: Path that was (or would have been) removed.
        success: Whether the removal completed without error.
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual removal).
    """

    path: Path
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the removal failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class CleanupReport:
    """Summary of one pass over a base directory.

    Attributes:
        base_directory: Directory whose immediate children were examined.
        oldest_allowed: Age threshold used for every comparison in the run.
        run_mode: Mode the run was performed in.
        expired: Children older than the threshold (descended into).
        skipped: Children at or newer than the threshold (left untouched).
        outcomes: One outcome per file reached below the expired children.
    """

    base_directory: Path
    oldest_allowed: datetime
    run_mode: RunMode
    expired: tuple[Path, ...] = ()
    skipped: tuple[Path, ...] = ()
    outcomes: tuple[RemovalOutcome, ...] = ()

    @property
    def removed_count(self) -> int:
        """Number of files actually removed."""
        return sum(1 for o in self.outcomes if o.success and not o.dry_run)

    @property
    def failed_count(self) -> int:
        """Number of files whose removal failed."""
        return sum(1 for o in self.outcomes if o.failed)

    @property
    def dry_run_count(self) -> int:
        """Number of files that would have been removed."""
        return sum(1 for o in self.outcomes if o.dry_run)

    @property
    def reported_paths(self) -> list[Path]:
        """Paths of every file reached, in traversal order."""
        return [o.path for o in self.outcomes]

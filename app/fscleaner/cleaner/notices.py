"""Notice sinks for cleanup progress.

The engine reports what it decides (skip, delete, remove, fail) to a
NoticeSink. Sinks are presentational only; nothing they receive feeds
back into the traversal.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from fscleaner.cleaner.models import RunMode

logger = logging.getLogger(__name__)


class NoticeSink(ABC):
    """Receives human-readable cleanup events from the engine."""

    @abstractmethod
    def started(self, base_directory: Path, oldest_allowed: datetime) -> None:
        """A pass over base_directory begins with the given threshold."""

    @abstractmethod
    def deleting(self, path: Path) -> None:
        """A child of the base directory is old enough and will be descended."""

    @abstractmethod
    def skipping(self, path: Path) -> None:
        """A child of the base directory is too young and is left alone."""

    @abstractmethod
    def removing(self, path: Path, run_mode: RunMode) -> None:
        """A file is about to be removed (or would be, in dry-run mode)."""

    @abstractmethod
    def removal_failed(self, path: Path, error: str) -> None:
        """Removing a file failed; the traversal continues."""


class LoggingNoticeSink(NoticeSink):
    """NoticeSink that writes every event to the module logger."""

    def started(self, base_directory: Path, oldest_allowed: datetime) -> None:
        logger.info(
            "Deleting directories older than: %s in: %s",
            oldest_allowed.isoformat(),
            base_directory,
        )

    def deleting(self, path: Path) -> None:
        logger.info("Deleting: %s", path)

    def skipping(self, path: Path) -> None:
        logger.info("Skipping: %s", path)

    def removing(self, path: Path, run_mode: RunMode) -> None:
        if run_mode.is_dry_run:
            logger.info("Removing (dry-run): %s", path)
        else:
            logger.info("Removing: %s", path)

    def removal_failed(self, path: Path, error: str) -> None:
        logger.error("Error removing %s: %s", path, error)

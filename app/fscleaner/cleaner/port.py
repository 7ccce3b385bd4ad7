"""Filesystem access port.

The deletion engine never touches the filesystem directly. Every query
and mutation goes through a FilesystemPort so the engine can be driven
by an in-memory fake in tests and by LocalFilesystem in production.
"""

import logging
import os
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path

from fscleaner.cleaner.models import DirectoryEntry, RemovalOutcome

logger = logging.getLogger(__name__)


class FilesystemPort(ABC):
    """Abstract capability set used by the deletion engine.

    Implementations must be synchronous, must not cache listings between
    calls, and must not raise for ordinary filesystem failures.

    Example:
        >>> port = LocalFilesystem()
        >>> for entry in port.list_directories(Path("/tmp")):
        ...     print(entry.path, entry.mtime)
    """

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Check whether a path currently denotes a directory.

        Args:
            path: Path to check.

        Returns:
            True for a directory, False for anything else including
            paths that do not exist.
        """

    @abstractmethod
    def remove_file(self, path: Path) -> RemovalOutcome:
        """Remove the single filesystem object at a path.

        Args:
            path: File, symlink or empty directory to remove.

        Returns:
            RemovalOutcome; failures are reported through its error field.
        """

    @abstractmethod
    def list_directories(self, path: Path) -> list[DirectoryEntry]:
        """List the immediate children of a directory.

        Entries the caller is not permitted to access are omitted.

        Args:
            path: Directory to list.

        Returns:
            DirectoryEntry per accessible child, in no guaranteed order.
        """


class LocalFilesystem(FilesystemPort):
    """FilesystemPort backed by the host filesystem.

    Symlinks are followed when testing for directories, so a link to a
    directory is descended into rather than removed.
    """

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def remove_file(self, path: Path) -> RemovalOutcome:
        """Remove a file, symlink or empty directory.

        A target that no longer exists counts as removed: another process
        got there first. Failures are only logged at debug level; reporting
        them is left to the caller's notice sink.

        Args:
            path: Path to remove.

        Returns:
            RemovalOutcome with the OSError message on failure.
        """
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except FileNotFoundError:
            logger.debug("Already removed: %s", path)
        except OSError as e:
            logger.debug("Failed to remove %s: %s", path, e)
            return RemovalOutcome(path=path, success=False, error=str(e))

        return RemovalOutcome(path=path, success=True)

    def list_directories(self, path: Path) -> list[DirectoryEntry]:
        """List children using os.scandir, skipping unreadable entries.

        A directory that cannot be opened (permission denied, vanished,
        or no longer a directory) lists as empty. Symlinks whose target
        cannot be stat'ed (dangling, looping) are listed with the link's
        own metadata. Any other entry that cannot be stat'ed is omitted.

        Args:
            path: Directory to list.

        Returns:
            DirectoryEntry per child whose metadata could be read.
        """
        try:
            iterator = os.scandir(path)
        except PermissionError:
            logger.debug("Permission denied listing directory: %s", path)
            return []
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("Directory vanished before listing: %s", path)
            return []

        entries: list[DirectoryEntry] = []
        with iterator:
            for item in iterator:
                try:
                    stat = self._stat(item)
                except PermissionError:
                    logger.debug("Permission denied reading entry: %s", item.path)
                    continue
                except FileNotFoundError:
                    logger.debug("Entry vanished during listing: %s", item.path)
                    continue
                except OSError as e:
                    logger.debug("Cannot read entry %s: %s", item.path, e)
                    continue

                entries.append(
                    DirectoryEntry(
                        path=Path(item.path),
                        mtime=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
                    )
                )

        return entries

    @staticmethod
    def _stat(item: os.DirEntry[str]) -> os.stat_result:
        """Stat an entry, falling back to the link itself when its target is unreadable."""
        try:
            return item.stat()
        except OSError:
            if item.is_symlink():
                return item.stat(follow_symlinks=False)
            raise

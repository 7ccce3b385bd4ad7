"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including
an in-memory FilesystemPort so the deletion engine can be exercised
without touching real storage.
"""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fscleaner.cleaner.models import DirectoryEntry, RemovalOutcome, RunMode
from fscleaner.cleaner.notices import NoticeSink
from fscleaner.cleaner.port import FilesystemPort

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)


class FakeFilesystem(FilesystemPort):
    """In-memory FilesystemPort recording every call it receives.

    Attributes:
        directories: Directory path to modification time.
        files: File path to modification time.
        denied: Paths omitted from listings as if permission were denied.
        failures: File path to the error message its removal reports.
        removed: Paths passed to remove_file, in call order.
        listed: Paths passed to list_directories, in call order.
    """

    def __init__(self) -> None:
        self.directories: dict[Path, datetime] = {}
        self.files: dict[Path, datetime] = {}
        self.denied: set[Path] = set()
        self.failures: dict[Path, str] = {}
        self.removed: list[Path] = []
        self.listed: list[Path] = []

    def add_dir(self, path: str, age: timedelta = timedelta(0)) -> Path:
        p = Path(path)
        self.directories[p] = NOW - age
        return p

    def add_file(self, path: str, age: timedelta = timedelta(0)) -> Path:
        p = Path(path)
        self.files[p] = NOW - age
        return p

    def is_directory(self, path: Path) -> bool:
        return path in self.directories

    def remove_file(self, path: Path) -> RemovalOutcome:
        self.removed.append(path)
        if path in self.failures:
            return RemovalOutcome(path=path, success=False, error=self.failures[path])
        self.files.pop(path, None)
        return RemovalOutcome(path=path, success=True)

    def list_directories(self, path: Path) -> list[DirectoryEntry]:
        self.listed.append(path)
        entries = [
            DirectoryEntry(path=p, mtime=mtime)
            for p, mtime in {**self.directories, **self.files}.items()
            if p.parent == path and p != path and p not in self.denied
        ]
        return sorted(entries, key=lambda e: e.path)


class RecordingNoticeSink(NoticeSink):
    """NoticeSink that keeps (event, path) tuples for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def started(self, base_directory: Path, oldest_allowed: datetime) -> None:
        self.events.append(("started", str(base_directory)))

    def deleting(self, path: Path) -> None:
        self.events.append(("deleting", str(path)))

    def skipping(self, path: Path) -> None:
        self.events.append(("skipping", str(path)))

    def removing(self, path: Path, run_mode: RunMode) -> None:
        event = "removing (dry-run)" if run_mode.is_dry_run else "removing"
        self.events.append((event, str(path)))

    def removal_failed(self, path: Path, error: str) -> None:
        self.events.append(("failed", str(path)))

    def paths(self, event: str) -> list[str]:
        return [p for e, p in self.events if e == event]


@pytest.fixture
def now() -> datetime:
    """Fixed current time shared by engine tests."""
    return NOW


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """Empty in-memory filesystem."""
    return FakeFilesystem()


@pytest.fixture
def notices() -> RecordingNoticeSink:
    """Notice sink recording every event."""
    return RecordingNoticeSink()


@pytest.fixture
def data_tree(fake_fs: FakeFilesystem) -> FakeFilesystem:
    """Tree with an old and a new child under /data.

    /data/old  (2 hours old) containing a.txt
    /data/new  (1 minute old) containing b.txt
    """
    fake_fs.add_dir("/data", timedelta(minutes=1))
    fake_fs.add_dir("/data/old", timedelta(hours=2))
    fake_fs.add_file("/data/old/a.txt", timedelta(hours=3))
    fake_fs.add_dir("/data/new", timedelta(minutes=1))
    fake_fs.add_file("/data/new/b.txt", timedelta(days=30))
    return fake_fs

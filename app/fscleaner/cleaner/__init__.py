"""Age-based directory cleanup.

This module provides the filesystem access port, the recursive
deletion engine, and the models and notice sinks they share.
"""

from fscleaner.cleaner.engine import (
    compute_oldest_allowed,
    delete_directories_if_older_than,
    delete_recursively,
)
from fscleaner.cleaner.models import CleanupReport, DirectoryEntry, RemovalOutcome, RunMode
from fscleaner.cleaner.notices import LoggingNoticeSink, NoticeSink
from fscleaner.cleaner.port import FilesystemPort, LocalFilesystem

__all__ = [
    "CleanupReport",
    "DirectoryEntry",
    "FilesystemPort",
    "LocalFilesystem",
    "LoggingNoticeSink",
    "NoticeSink",
    "RemovalOutcome",
    "RunMode",
    "compute_oldest_allowed",
    "delete_directories_if_older_than",
    "delete_recursively",
]

"""Rich display for cleanup runs.

Provides the console notice sink used by the CLI and the summary
printed once a run has finished.
"""

from datetime import datetime
from pathlib import Path

from rich.markup import escape

from fscleaner.cleaner.models import CleanupReport, RunMode
from fscleaner.cleaner.notices import NoticeSink
from fscleaner.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


class ConsoleNoticeSink(NoticeSink):
    """NoticeSink that prints styled lines to the shared Rich consoles.

    Errors always go to stderr. With quiet set, only errors are printed.

    Attributes:
        _quiet: If True, suppress per-entry progress lines.
    """

    def __init__(self, quiet: bool = False) -> None:
        self._quiet = quiet

    def started(self, base_directory: Path, oldest_allowed: datetime) -> None:
        if self._quiet:
            return
        console.print(
            f"[header]Deleting directories older than:[/] "
            f"{oldest_allowed.astimezone():%Y-%m-%d %H:%M:%S %Z} "
            f"[header]in:[/] {escape(str(base_directory))}",
            highlight=False,
            soft_wrap=True,
        )

    def deleting(self, path: Path) -> None:
        self._line("deleting", "Deleting:", path)

    def skipping(self, path: Path) -> None:
        self._line("skipping", "Skipping:", path)

    def removing(self, path: Path, run_mode: RunMode) -> None:
        if run_mode.is_dry_run:
            self._line("dry_run", "Removing (dry-run):", path)
        else:
            self._line("removing", "Removing:", path)

    def removal_failed(self, path: Path, error: str) -> None:
        print_error(f"{escape(error)} [muted]({escape(str(path))})[/]")

    def _line(self, style: str, label: str, path: Path) -> None:
        if self._quiet:
            return
        console.print(f"[{style}]{label}[/] {escape(str(path))}", highlight=False, soft_wrap=True)


def print_report_summary(report: CleanupReport) -> None:
    """Print a one-line summary of a finished run.

    Args:
        report: Report returned by the deletion engine.
    """
    kept = len(report.skipped)

    if report.run_mode.is_dry_run:
        print_info(
            f"Dry-run: {report.dry_run_count} file(s) would be removed "
            f"from {len(report.expired)} directory tree(s), {kept} kept."
        )
    elif report.failed_count:
        print_warning(f"{report.removed_count} removed, {report.failed_count} failed, {kept} kept")
    else:
        print_success(f"Removed {report.removed_count} file(s), {kept} kept.")

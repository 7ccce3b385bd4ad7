"""Main CLI application entry point.

Defines the Typer application: a single command taking the root
directory and the minimum age in minutes.
"""

from datetime import timedelta
from pathlib import Path
from typing import Annotated

import typer

from fscleaner import __version__
from fscleaner.cleaner.engine import compute_oldest_allowed, delete_directories_if_older_than
from fscleaner.cleaner.models import RunMode
from fscleaner.cleaner.port import LocalFilesystem
from fscleaner.cli.display import ConsoleNoticeSink, print_report_summary
from fscleaner.utils.log import configure_logging

app = typer.Typer(
    name="fscleaner",
    help="Remove directory trees older than a given age.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fscleaner version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    root: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=False,
            dir_okay=True,
            help="Directory whose immediate children are checked.",
        ),
    ],
    min_age: Annotated[
        int,
        typer.Argument(
            min=1,
            metavar="MIN_AGE",
            help="Minimum age in minutes; younger children are kept.",
        ),
    ],
    execute: Annotated[
        bool,
        typer.Option(
            "--execute",
            help="Actually remove files. Without it only a dry-run is performed.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors and the final summary.",
        ),
    ] = False,
) -> None:
    """Remove every file below the children of ROOT older than MIN_AGE minutes.

    Runs as a dry-run unless [bold]--execute[/bold] is given. Children
    modified within the last MIN_AGE minutes are skipped entirely.
    """
    configure_logging(verbose=verbose)

    run_mode = RunMode.EXECUTE if execute else RunMode.DRY_RUN
    oldest_allowed = compute_oldest_allowed(timedelta(minutes=min_age))

    report = delete_directories_if_older_than(
        root,
        oldest_allowed,
        run_mode=run_mode,
        port=LocalFilesystem(),
        sink=ConsoleNoticeSink(quiet=quiet),
    )

    print_report_summary(report)


if __name__ == "__main__":
    app()

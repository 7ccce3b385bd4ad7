"""CLI package for fscleaner.

This package contains the Typer application.
"""

from fscleaner.cli.main import app

__all__ = ["app"]

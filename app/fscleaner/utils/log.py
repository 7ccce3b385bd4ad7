"""Logging setup for the fscleaner CLI."""

import logging

from rich.logging import RichHandler

from fscleaner.utils.formatting import err_console

PACKAGE_LOGGER = "fscleaner"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route the package's log records to stderr through Rich.

    Calling this more than once only adjusts the level; a single
    handler is installed.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    return logger

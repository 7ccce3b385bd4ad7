"""Utility modules for fscleaner.

This module exports commonly used utility functions.
"""

from fscleaner.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from fscleaner.utils.log import configure_logging

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]

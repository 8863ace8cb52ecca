"""Utility modules for fsref.

This module exports commonly used utility functions.
"""

from fsref.utils.formatting import (
    console,
    create_entry_table,
    entry_kind,
    err_console,
    format_entry_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from fsref.utils.logging import setup_logging

__all__ = [
    "console",
    "create_entry_table",
    "entry_kind",
    "err_console",
    "format_entry_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "setup_logging",
]

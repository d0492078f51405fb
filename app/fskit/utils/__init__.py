"""Utility modules for fskit.

This module exports commonly used utility functions.
"""

from fskit.utils.formatting import (
    SIZE_UNIT_EXPONENTS,
    console,
    err_console,
    format_size,
    format_size_auto,
    print_error,
    print_info,
    print_success,
    set_quiet,
)

__all__ = [
    "SIZE_UNIT_EXPONENTS",
    "console",
    "err_console",
    "format_size",
    "format_size_auto",
    "print_error",
    "print_info",
    "print_success",
    "set_quiet",
]

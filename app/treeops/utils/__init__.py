"""Utility modules for treeops.

This module exports commonly used utility functions.
"""

from treeops.utils.formatting import (
    configure_logging,
    console,
    create_paths_table,
    err_console,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "create_paths_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
]

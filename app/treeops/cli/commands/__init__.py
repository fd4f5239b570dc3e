"""CLI commands for treeops.

This package contains all subcommand implementations.
"""

from treeops.cli.commands import config, copy, delete, find

__all__ = ["config", "copy", "delete", "find"]

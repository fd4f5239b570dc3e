"""CLI package for treeops.

This package contains the Typer application and all subcommands.
"""

from treeops.cli.main import app

__all__ = ["app"]

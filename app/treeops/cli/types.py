"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from treeops.cli.display import print_action
from treeops.core.config import TreeopsConfig
from treeops.engine import ActionObserver, ignore_action


class OutputFormat(str, Enum):
    """Output format options for path listings."""

    TABLE = "table"
    JSON = "json"


def get_config(ctx: typer.Context) -> TreeopsConfig:
    """Get the configuration loaded by the main callback.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Loaded configuration, or defaults if none was stored.
    """
    obj = ctx.obj or {}
    settings = obj.get("config")
    if isinstance(settings, TreeopsConfig):
        return settings
    return TreeopsConfig()


def get_observer(ctx: typer.Context) -> ActionObserver:
    """Get the action observer matching the --quiet flag.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Observer printing progress lines, or one discarding them if quiet.
    """
    obj = ctx.obj or {}
    if obj.get("quiet"):
        return ignore_action
    return print_action

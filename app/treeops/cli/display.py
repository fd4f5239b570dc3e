"""Shared Rich display functions for engine results.

Provides the progress-line observer and result printers used by the
find, copy and delete commands.
"""

import json

from treeops.engine import ActionEvent, ActionType
from treeops.utils.formatting import console, create_paths_table, print_info, print_success

_ACTION_STYLES: dict[ActionType, str] = {
    ActionType.COPY: "added",
    ActionType.COPY_TREE: "added",
    ActionType.MKDIR: "muted",
    ActionType.DELETE: "removed",
    ActionType.DELETE_TREE: "removed",
    ActionType.PRUNE: "muted",
}


def print_action(event: ActionEvent) -> None:
    """Print an engine action as a styled progress line.

    Markup is disabled so that brackets in paths are printed literally.

    Args:
        event: Action reported by the engine.
    """
    console.print(event.describe(), style=_ACTION_STYLES[event.action], markup=False)


def print_paths(title: str, paths: list[str]) -> None:
    """Print a path list as a table followed by its count.

    Args:
        title: Table title.
        paths: Paths to display.
    """
    if not paths:
        print_info(f"{title}: none")
        return

    console.print(create_paths_table(title, paths))
    print_success(f"{len(paths)} path(s)")


def print_paths_json(paths: list[str]) -> None:
    """Print a path list as a JSON array."""
    console.print_json(json.dumps(paths))

"""Recursive file deletion with empty-directory pruning.

Removes either a whole directory tree or only the files passing a
FileFilter. In filtered mode, directories left empty are removed as
well, but are not reported in the result.
"""

import logging
import os
import shutil
from collections.abc import Callable
from typing import Any

from treeops.engine.models import (
    ActionEvent,
    ActionObserver,
    ActionType,
    FileFilter,
    WholeTree,
    select_mode,
)
from treeops.engine.observers import resolve_observer
from treeops.engine.predicate import matches
from treeops.engine.walker import walk

logger = logging.getLogger(__name__)


def delete_files(
    directory: str | os.PathLike[str],
    extension: str | None = None,
    base_name: str | None = None,
    *,
    observer: ActionObserver | None = None,
) -> list[str]:
    """Delete files below a directory matching an extension and/or base name.

    With neither extension nor base name set, the directory itself and
    everything below it is removed, ignoring missing entries, and
    ``[directory]`` is returned. Permissions are left as they are, so an
    entry the caller may not remove aborts the call.

    Otherwise each matching file is removed. After a subdirectory has been
    processed it is removed too if nothing is left in it. The root
    directory is never removed in this mode.

    Args:
        directory: Directory to delete from.
        extension: Optional path suffix to match (e.g. ".js").
        base_name: Optional file name without extension to match.
        observer: Receives an ActionEvent per mutation. Defaults to logging.

    Returns:
        Removed file paths (pruned directories are not listed), or
        ``[directory]`` in whole-tree mode.

    Raises:
        OSError: On the first listing, stat or removal failure.
            Files removed before the failure stay removed.
    """
    root = os.fspath(directory)
    notify = resolve_observer(observer)
    mode = select_mode(FileFilter.create(extension, base_name))

    if isinstance(mode, WholeTree):
        _force_remove_tree(root)
        notify(ActionEvent(ActionType.DELETE_TREE, root))
        return [root]

    return _delete_filtered(root, mode.file_filter, notify)


def _delete_filtered(root: str, file_filter: FileFilter, notify: ActionObserver) -> list[str]:
    """Remove matching files bottom-up and prune emptied directories.

    Args:
        root: Directory to delete from.
        file_filter: Non-empty filter to apply.
        notify: Observer for action events.

    Returns:
        Removed file paths in discovery order.
    """
    deleted: list[str] = []

    # Post-order: a directory is yielded only after its contents were handled
    for entry in walk(root, topdown=False):
        if entry.is_dir:
            if not os.listdir(entry.path):
                os.rmdir(entry.path)
                notify(ActionEvent(ActionType.PRUNE, entry.path))
            continue

        if not matches(entry.path, file_filter):
            continue

        os.remove(entry.path)
        notify(ActionEvent(ActionType.DELETE, entry.path))
        deleted.append(entry.path)

    logger.debug("Deleted %d file(s) under %s", len(deleted), root)
    return deleted


def _force_remove_tree(path: str) -> None:
    """Remove a path and everything below it, like ``rm -rf``.

    A missing path is not an error, nor is an entry that vanishes while
    the tree is being removed. Plain files and symlinks are unlinked
    rather than followed. Permissions are never changed.

    Args:
        path: File or directory to remove.

    Raises:
        OSError: If any entry cannot be removed.
    """
    if not os.path.lexists(path):
        logger.debug("Nothing to delete at %s", path)
        return

    if os.path.islink(path) or not os.path.isdir(path):
        os.remove(path)
        return

    shutil.rmtree(path, onexc=_handle_remove_error)


def _handle_remove_error(func: Callable[..., Any], path: str, exc: BaseException) -> None:
    """rmtree error handler: skip vanished entries, re-raise everything else."""
    if isinstance(exc, FileNotFoundError):
        logger.debug("Already gone: %s", path)
        return
    raise exc

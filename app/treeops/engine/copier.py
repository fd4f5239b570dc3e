"""Recursive file copying.

Copies either a whole directory tree or only the files passing a
FileFilter, mirroring the source directory structure under the
destination.
"""

import logging
import os
import shutil
from pathlib import Path

from treeops.engine.errors import DestinationInsideSourceError
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


def copy_files(
    src_dir: str | os.PathLike[str],
    dest_dir: str | os.PathLike[str],
    extension: str | None = None,
    base_name: str | None = None,
    *,
    observer: ActionObserver | None = None,
) -> list[str]:
    """Copy files from a source tree into a destination tree.

    With neither extension nor base name set, the entire source tree is
    copied in one pass and an empty list is returned; the bulk copy does
    not enumerate individual files.

    Otherwise every source directory gets a mirror directory under the
    destination (even if no file in it matches) and each matching file is
    copied to its mirrored path. Existing destination files are
    overwritten.

    Args:
        src_dir: Source directory.
        dest_dir: Destination root, created if missing.
        extension: Optional path suffix to match (e.g. ".js").
        base_name: Optional file name without extension to match.
        observer: Receives an ActionEvent per mutation. Defaults to logging.

    Returns:
        Source paths of the copied files, empty in whole-tree mode.

    Raises:
        DestinationInsideSourceError: If dest_dir is src_dir or inside it.
        OSError: On the first listing, stat, mkdir or copy failure.
            Files copied before the failure are kept.
    """
    src = os.fspath(src_dir)
    dest = os.fspath(dest_dir)
    notify = resolve_observer(observer)
    _check_destination(src, dest)

    mode = select_mode(FileFilter.create(extension, base_name))

    if isinstance(mode, WholeTree):
        os.makedirs(dest, exist_ok=True)
        shutil.copytree(src, dest, dirs_exist_ok=True)
        notify(ActionEvent(ActionType.COPY_TREE, src, dest))
        return []

    return _copy_filtered(src, dest, mode.file_filter, notify)


def _copy_filtered(
    src: str,
    dest: str,
    file_filter: FileFilter,
    notify: ActionObserver,
) -> list[str]:
    """Copy matching files, creating mirror directories top-down.

    Args:
        src: Source directory.
        dest: Destination root.
        file_filter: Non-empty filter to apply.
        notify: Observer for action events.

    Returns:
        Source paths of the copied files in discovery order.
    """
    _ensure_directory(dest, notify)

    copied: list[str] = []
    for entry in walk(src):
        target = os.path.join(dest, os.path.relpath(entry.path, src))

        if entry.is_dir:
            _ensure_directory(target, notify)
            continue

        if not matches(entry.path, file_filter):
            continue

        shutil.copy2(entry.path, target)
        notify(ActionEvent(ActionType.COPY, entry.path, target))
        copied.append(entry.path)

    logger.debug("Copied %d file(s) from %s to %s", len(copied), src, dest)
    return copied


def _ensure_directory(path: str, notify: ActionObserver) -> None:
    """Create a directory (and parents) unless it already exists."""
    if os.path.isdir(path):
        return
    os.makedirs(path, exist_ok=True)
    notify(ActionEvent(ActionType.MKDIR, path))


def _check_destination(src: str, dest: str) -> None:
    """Reject a destination that would be walked as part of the source.

    Raises:
        DestinationInsideSourceError: If dest resolves to src or below it.
    """
    src_path = Path(src).resolve()
    dest_path = Path(dest).resolve()
    if dest_path == src_path or dest_path.is_relative_to(src_path):
        msg = f"Destination {dest} is inside source {src}"
        raise DestinationInsideSourceError(msg)

"""Depth-first directory traversal.

Lists directories with os.scandir and classifies every entry with a
stat call that follows symlinks. Entries are produced in the order the
directory listing yields them; nothing is sorted.
"""

import logging
import os
import stat
from collections.abc import Iterator

from treeops.engine.models import EntryKind, FileSystemEntry

logger = logging.getLogger(__name__)


def classify(path: str) -> EntryKind:
    """Classify a path as directory or file.

    Args:
        path: Path to stat.

    Returns:
        EntryKind of the path.

    Raises:
        OSError: If the path cannot be stat'ed (vanished, permission denied).
    """
    if stat.S_ISDIR(os.stat(path).st_mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def list_entries(directory: str | os.PathLike[str]) -> list[FileSystemEntry]:
    """List and classify the immediate entries of a directory.

    The whole level is listed and stat'ed before this returns, so walk()
    classifies every sibling before recursing into the first
    subdirectory. A stat failure on any sibling therefore aborts the walk
    before anything below that level is visited.

    Args:
        directory: Directory to list.

    Returns:
        Entries in listing order.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        OSError: If listing or stat fails for any entry.
    """
    root = os.fspath(directory)
    with os.scandir(root) as it:
        names = [entry.name for entry in it]

    entries: list[FileSystemEntry] = []
    for name in names:
        path = os.path.join(root, name)
        entries.append(FileSystemEntry(path=path, kind=classify(path)))
    return entries


def walk(directory: str | os.PathLike[str], *, topdown: bool = True) -> Iterator[FileSystemEntry]:
    """Walk a directory tree depth first.

    Every entry below ``directory`` is yielded exactly once; the root
    itself is not. Files keep listing order, and a subdirectory's
    contents are yielded before its later siblings.

    Args:
        directory: Root directory to walk.
        topdown: If True, yield each directory before its contents.
            If False, yield it after its contents have been yielded,
            so callers may mutate the contents first.

    Yields:
        FileSystemEntry for every file and directory in the tree.

    Raises:
        OSError: On the first listing or stat failure.
    """
    logger.debug("Walking %s", directory)
    for entry in list_entries(directory):
        if not entry.is_dir:
            yield entry
            continue

        if topdown:
            yield entry
        yield from walk(entry.path, topdown=topdown)
        if not topdown:
            yield entry

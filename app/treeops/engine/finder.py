"""Recursive file discovery.

Collects every file below a directory that passes a FileFilter,
without modifying the filesystem.
"""

import logging
import os

from treeops.engine.models import FileFilter
from treeops.engine.predicate import matches
from treeops.engine.walker import walk

logger = logging.getLogger(__name__)


def find_files(
    directory: str | os.PathLike[str],
    extension: str | None = None,
    base_name: str | None = None,
) -> list[str]:
    """Find files below a directory matching an extension and/or base name.

    With neither filter set, every file in the tree is returned.
    Directories are never part of the result.

    Args:
        directory: Directory to search.
        extension: Optional path suffix to match (e.g. ".js").
        base_name: Optional file name without extension to match.

    Returns:
        Matching file paths in depth-first listing order.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        OSError: On any listing or stat failure during the walk.
    """
    file_filter = FileFilter.create(extension, base_name)

    results = [
        entry.path
        for entry in walk(directory)
        if not entry.is_dir and matches(entry.path, file_filter)
    ]

    logger.debug("Found %d matching file(s) under %s", len(results), directory)
    return results

"""File predicate evaluation.

Decides whether a file path passes a FileFilter. Pure string logic,
the filesystem is never consulted.
"""

import os

from treeops.engine.models import FileFilter


def base_name_of(path: str) -> str:
    """Return the final path component with its last extension removed.

    Args:
        path: File path.

    Returns:
        Base name, e.g. "index.test" for "src/index.test.js".
    """
    stem, _ = os.path.splitext(os.path.basename(path))
    return stem


def matches(path: str, file_filter: FileFilter) -> bool:
    """Check if a file path passes the filter.

    An empty filter matches everything. The extension check is an exact,
    case-sensitive suffix comparison against the whole path string; the
    base name check compares the extension-stripped file name exactly.
    When both are set, both must hold.

    Args:
        path: File path to test.
        file_filter: Filter to apply.

    Returns:
        True if the path matches.
    """
    if file_filter.extension is not None and not path.endswith(file_filter.extension):
        return False
    if file_filter.base_name is not None and base_name_of(path) != file_filter.base_name:
        return False
    return True

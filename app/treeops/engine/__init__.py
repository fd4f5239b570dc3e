"""Traversal and filter engine.

This module provides recursive find, copy and delete operations over a
local directory tree, filtered by file extension and/or base name.
"""

from treeops.engine.copier import copy_files
from treeops.engine.deleter import delete_files
from treeops.engine.errors import (
    DestinationInsideSourceError,
    ErrorKind,
    TreeOpsError,
    classify_error,
    describe_error,
)
from treeops.engine.finder import find_files
from treeops.engine.models import (
    ActionEvent,
    ActionObserver,
    ActionType,
    EntryKind,
    FileFilter,
    FileSystemEntry,
    Filtered,
    Mode,
    WholeTree,
    select_mode,
)
from treeops.engine.observers import ignore_action, log_action
from treeops.engine.predicate import base_name_of, matches
from treeops.engine.walker import list_entries, walk

__all__ = [
    "ActionEvent",
    "ActionObserver",
    "ActionType",
    "DestinationInsideSourceError",
    "EntryKind",
    "ErrorKind",
    "FileFilter",
    "FileSystemEntry",
    "Filtered",
    "Mode",
    "TreeOpsError",
    "WholeTree",
    "base_name_of",
    "classify_error",
    "copy_files",
    "delete_files",
    "describe_error",
    "find_files",
    "ignore_action",
    "list_entries",
    "log_action",
    "matches",
    "select_mode",
    "walk",
]

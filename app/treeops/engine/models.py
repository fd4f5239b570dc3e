"""Data models shared by the traversal engine.

This module defines the entry classification, the file filter threaded
through every traversal, the whole-tree/filtered mode switch, and the
action events reported to observers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Kind of a visited filesystem entry.

    Attributes:
        DIRECTORY: Directory (traversal recurses into it).
        FILE: Anything that is not a directory (handed to the predicate).
    """

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class FileSystemEntry:
    """A path and its kind, derived from a live stat call.

    Entries are never cached; they describe the tree only at the
    instant they were produced.

    Attributes:
        path: Path built by joining the walked root with entry names.
        kind: Directory or file.
    """

    path: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        """Check if this entry is a directory."""
        return self.kind == EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class FileFilter:
    """Immutable filter applied uniformly to every file of one traversal.

    Attributes:
        extension: Required path suffix (e.g. ".js"), or None.
        base_name: Required file name without extension, or None.
    """

    extension: str | None = None
    base_name: str | None = None

    @classmethod
    def create(cls, extension: str | None = None, base_name: str | None = None) -> FileFilter:
        """Build a filter, treating empty strings as absent.

        Args:
            extension: Extension suffix, "" and None mean no constraint.
            base_name: Base name, "" and None mean no constraint.

        Returns:
            Normalized FileFilter.
        """
        return cls(extension=extension or None, base_name=base_name or None)

    @property
    def is_empty(self) -> bool:
        """Check if neither extension nor base name is set."""
        return self.extension is None and self.base_name is None


@dataclass(frozen=True, slots=True)
class WholeTree:
    """Mode for bulk copy/removal of an entire tree."""


@dataclass(frozen=True, slots=True)
class Filtered:
    """Mode for per-file copy/removal under a non-empty filter.

    Attributes:
        file_filter: Filter every visited file is tested against.
    """

    file_filter: FileFilter


Mode = WholeTree | Filtered


def select_mode(file_filter: FileFilter) -> Mode:
    """Select the operation mode for a filter.

    Args:
        file_filter: Filter supplied by the caller.

    Returns:
        WholeTree if the filter is empty, Filtered otherwise.
    """
    if file_filter.is_empty:
        return WholeTree()
    return Filtered(file_filter)


class ActionType(str, Enum):
    """Kind of filesystem mutation reported to observers.

    Attributes:
        COPY: A single file was copied.
        COPY_TREE: A whole directory tree was copied.
        MKDIR: A destination directory was created.
        DELETE: A single file was removed.
        DELETE_TREE: A whole directory tree was removed.
        PRUNE: A directory left empty by filtered deletion was removed.
    """

    COPY = "copy"
    COPY_TREE = "copy_tree"
    MKDIR = "mkdir"
    DELETE = "delete"
    DELETE_TREE = "delete_tree"
    PRUNE = "prune"


@dataclass(frozen=True, slots=True)
class ActionEvent:
    """A single mutation performed by the engine.

    Attributes:
        action: What was done.
        path: Path operated on (source path for copies).
        target: Destination path for copies, None otherwise.
    """

    action: ActionType
    path: str
    target: str | None = None

    def describe(self) -> str:
        """Render the event as a human-readable progress line."""
        if self.action == ActionType.COPY:
            return f"Copied: {self.path} -> {self.target}"
        if self.action == ActionType.COPY_TREE:
            return f"Copied entire directory: {self.path} -> {self.target}"
        if self.action == ActionType.MKDIR:
            return f"Created directory: {self.path}"
        if self.action == ActionType.DELETE:
            return f"Deleted: {self.path}"
        if self.action == ActionType.DELETE_TREE:
            return f"Deleted directory: {self.path}"
        return f"Deleted empty directory: {self.path}"


ActionObserver = Callable[[ActionEvent], None]

"""Error taxonomy for engine operations.

Filesystem failures propagate as the built-in OSError subclasses that
raised them. This module classifies them for presentation and defines
the few errors the engine raises on its own.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a filesystem failure.

    Attributes:
        NOT_FOUND: Root or entry missing.
        NOT_A_DIRECTORY: A directory was expected.
        PERMISSION_DENIED: Access refused by the OS.
        IO_FAILURE: Any other read, write, copy or remove failure.
    """

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    IO_FAILURE = "io_failure"


class TreeOpsError(Exception):
    """Base exception for errors raised by the engine itself."""


class DestinationInsideSourceError(TreeOpsError):
    """Raised when a copy destination is the source or lies inside it."""


def classify_error(exc: OSError) -> ErrorKind:
    """Map an OSError to its ErrorKind.

    Args:
        exc: Error raised by a filesystem call.

    Returns:
        Matching ErrorKind, IO_FAILURE for anything unrecognized.
    """
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, NotADirectoryError):
        return ErrorKind.NOT_A_DIRECTORY
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.IO_FAILURE


def describe_error(exc: OSError) -> str:
    """Format an OSError as a one-line message including its category.

    Args:
        exc: Error raised by a filesystem call.

    Returns:
        Message such as "not found: [Errno 2] No such file or directory: 'x'".
    """
    kind = classify_error(exc).value.replace("_", " ")
    return f"{kind}: {exc}"

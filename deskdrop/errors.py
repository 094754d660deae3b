"""
Error types for DeskDrop file operations.

Single-item operations raise these (or a plain ``OSError``) straight to the
caller. Only the batch processor turns them into outcomes, using
``classify_error`` to tag each failure with an ``ErrorKind``.

Only ``NotFoundError`` means the source is missing. A plain
``FileNotFoundError``, such as one for a missing destination folder, is an
I/O failure.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported in batch outcomes."""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PLATFORM_LINK = "platform_link"
    IO_FAILURE = "io_failure"
    CANCELLED = "cancelled"
    UNEXPECTED = "unexpected"


class FileOperationError(Exception):
    """Base error for the project."""

    kind = ErrorKind.UNEXPECTED


class NotFoundError(FileOperationError, FileNotFoundError):
    """Source is neither a file nor a directory."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(FileOperationError, FileExistsError):
    """Destination exists and overwrite was disabled."""

    kind = ErrorKind.ALREADY_EXISTS


class PlatformLinkError(FileOperationError):
    """Optional shortcut metadata could not be applied.

    Backends return this inside ``LinkResult`` instead of raising it.
    """

    kind = ErrorKind.PLATFORM_LINK


class OperationCancelledError(FileOperationError):
    """The caller's cancel event was set before the operation finished."""

    kind = ErrorKind.CANCELLED


def classify_error(exc: BaseException) -> ErrorKind:
    """Map an exception raised by a file operation to its ``ErrorKind``."""
    if isinstance(exc, FileOperationError):
        return exc.kind
    if isinstance(exc, FileExistsError):
        return ErrorKind.ALREADY_EXISTS
    if isinstance(exc, OSError):
        return ErrorKind.IO_FAILURE
    return ErrorKind.UNEXPECTED

"""Error types for filesystem operations.

Every failure raised by ioex is one of a small, closed set of variants so
callers can branch on the kind of failure without inspecting errno values
or platform specific exception classes. The originating ``OSError`` is kept
on ``cause`` and chained as ``__cause__``.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import ClassVar

__all__ = [
    "AlreadyExistsError",
    "DestinationConflictError",
    "ErrorKind",
    "FileOperationError",
    "IOFailureError",
    "NotFoundError",
    "wrap_os_error",
]


class ErrorKind(str, Enum):
    """Kinds of filesystem failure."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    DESTINATION_CONFLICT = "destination_conflict"
    IO_FAILURE = "io_failure"


class FileOperationError(Exception):
    """Base class for all ioex errors.

    Attributes:
        kind: Tag identifying the failure variant.
        path: Path the failing operation was acting on (may be None).
        cause: Underlying OS error, if any.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.IO_FAILURE

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
        cause: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = os.fspath(path) if path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class NotFoundError(FileOperationError):
    """A required path does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(FileOperationError):
    """Destination file exists and overwriting was not allowed."""

    kind = ErrorKind.ALREADY_EXISTS


class DestinationConflictError(FileOperationError):
    """A position that must be a directory is held by something else."""

    kind = ErrorKind.DESTINATION_CONFLICT


class IOFailureError(FileOperationError):
    """Any other operating system failure."""

    kind = ErrorKind.IO_FAILURE


def wrap_os_error(err: OSError, path: str | os.PathLike[str] | None = None) -> FileOperationError:
    """Convert an OSError into the matching ioex error.

    Args:
        err: Error raised by the operating system call.
        path: Path to report. Defaults to the error's own filename.

    Returns:
        NotFoundError, AlreadyExistsError or IOFailureError wrapping ``err``.
    """
    if path is None:
        path = err.filename
    message = err.strerror or str(err)
    if isinstance(err, FileNotFoundError):
        return NotFoundError(message, path, err)
    if isinstance(err, FileExistsError):
        return AlreadyExistsError(message, path, err)
    return IOFailureError(message, path, err)

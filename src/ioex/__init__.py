"""Filesystem utilities: existence checks, touch and recursive copy."""

__version__ = "0.1.0"

from ioex.config import CopyOptions, Settings, TouchOptions
from ioex.copytree import copy_all, copy_file
from ioex.errors import (
    AlreadyExistsError,
    DestinationConflictError,
    ErrorKind,
    FileOperationError,
    IOFailureError,
    NotFoundError,
)
from ioex.paths import make_dirs, path_exists, stat_path, touch
from ioex.protocols import FileSystem
from ioex.types import CopyResult, FileInfo, FileKind

__all__ = [
    "__version__",
    "AlreadyExistsError",
    "CopyOptions",
    "CopyResult",
    "DestinationConflictError",
    "ErrorKind",
    "FileInfo",
    "FileKind",
    "FileOperationError",
    "FileSystem",
    "IOFailureError",
    "NotFoundError",
    "Settings",
    "TouchOptions",
    "copy_all",
    "copy_file",
    "make_dirs",
    "path_exists",
    "stat_path",
    "touch",
]

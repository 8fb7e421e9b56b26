"""Protocol definitions for core abstractions.

Callers depend on the FileSystem protocol rather than on RealFileSystem so
test doubles can be substituted without inheritance. Implementations
satisfy it structurally (duck typing).
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from ioex.types import CopyResult, FileInfo


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations."""

    def stat(self, path: str | os.PathLike[str]) -> FileInfo:
        """Inspect a path without following symlinks.

        Args:
            path: Path to inspect.

        Returns:
            FileInfo for the path, kind MISSING if absent.
        """
        ...

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.

        Raises:
            IOFailureError: If existence cannot be determined.
        """
        ...

    def touch(self, path: str | os.PathLike[str]) -> None:
        """Create a file and its parent directories if missing.

        Args:
            path: File to touch.
        """
        ...

    def copy_all(
        self,
        destination: str | os.PathLike[str],
        source: str | os.PathLike[str],
        overwrite: bool = False,
    ) -> CopyResult:
        """Recursively copy a file or directory tree.

        Args:
            destination: Target path.
            source: File or directory to copy.
            overwrite: Replace existing destination files.

        Returns:
            Summary of the copy.
        """
        ...

    def copy_file(
        self,
        destination: str | os.PathLike[str],
        source: str | os.PathLike[str],
        overwrite: bool = False,
    ) -> CopyResult:
        """Copy a single file.

        Args:
            destination: Target file path.
            source: File to copy.
            overwrite: Replace destination if it exists.

        Returns:
            Summary of the copy.
        """
        ...

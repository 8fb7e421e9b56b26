"""Filesystem service object.

RealFileSystem binds the module level operations to a Settings instance.
It satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os

from ioex.config import Settings
from ioex.copytree import copy_all, copy_file
from ioex.paths import path_exists, stat_path, touch
from ioex.types import CopyResult, FileInfo


class RealFileSystem:
    """Production filesystem implementation."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize with settings.

        Args:
            settings: Touch and copy options. Defaults to Settings().
        """
        self.settings = settings or Settings()

    def stat(self, path: str | os.PathLike[str]) -> FileInfo:
        """Inspect a path without following symlinks."""
        return stat_path(path)

    def exists(self, path: str | os.PathLike[str]) -> bool:
        """Check if a path exists."""
        return path_exists(path)

    def touch(self, path: str | os.PathLike[str]) -> None:
        """Create a file and its parent directories if missing."""
        touch(path, self.settings.touch_options)

    def copy_all(
        self,
        destination: str | os.PathLike[str],
        source: str | os.PathLike[str],
        overwrite: bool = False,
    ) -> CopyResult:
        """Recursively copy a file or directory tree."""
        return copy_all(destination, source, overwrite, self.settings.copy_options)

    def copy_file(
        self,
        destination: str | os.PathLike[str],
        source: str | os.PathLike[str],
        overwrite: bool = False,
    ) -> CopyResult:
        """Copy a single file."""
        return copy_file(destination, source, overwrite, self.settings.copy_options)

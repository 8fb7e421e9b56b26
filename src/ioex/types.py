"""Shared data types for ioex."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["CopyResult", "FileInfo", "FileKind"]


class FileKind(str, Enum):
    """What a filesystem entry is, as reported by lstat."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    MISSING = "missing"

    @classmethod
    def from_mode(cls, mode: int) -> FileKind:
        """Classify a raw ``st_mode`` value."""
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class FileInfo:
    """Metadata for a single path.

    Attributes:
        path: The path that was inspected.
        kind: Entry type, MISSING when nothing is there.
        mode: Permission bits only (``S_IMODE``); 0 for missing paths.
    """

    path: Path
    kind: FileKind
    mode: int = 0

    @classmethod
    def from_stat(cls, path: Path, result: os.stat_result) -> FileInfo:
        """Build from a stat result."""
        return cls(
            path=path,
            kind=FileKind.from_mode(result.st_mode),
            mode=stat.S_IMODE(result.st_mode),
        )

    @classmethod
    def missing(cls, path: Path) -> FileInfo:
        """Build the record for a path that does not exist."""
        return cls(path=path, kind=FileKind.MISSING)

    @property
    def exists(self) -> bool:
        return self.kind is not FileKind.MISSING

    @property
    def is_dir(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is FileKind.SYMLINK

    @property
    def is_file(self) -> bool:
        return self.kind is FileKind.FILE


@dataclass
class CopyResult:
    """Summary of a copy operation.

    Attributes:
        files_copied: Regular files written to the destination.
        directories_created: Directories created at the destination.
        symlinks_skipped: Symbolic links encountered and ignored.
    """

    files_copied: int = 0
    directories_created: int = 0
    symlinks_skipped: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if min(self.files_copied, self.directories_created, self.symlinks_skipped) < 0:
            raise ValueError("counters cannot be negative")

    @property
    def total(self) -> int:
        """Number of entries visited."""
        return self.files_copied + self.directories_created + self.symlinks_skipped

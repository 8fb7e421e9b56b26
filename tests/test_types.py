"""Tests for shared data types."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from ioex.types import CopyResult, FileInfo, FileKind


class TestFileKind:
    """Tests for FileKind classification."""

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (stat.S_IFREG | 0o644, FileKind.FILE),
            (stat.S_IFDIR | 0o755, FileKind.DIRECTORY),
            (stat.S_IFLNK | 0o777, FileKind.SYMLINK),
            (stat.S_IFIFO | 0o600, FileKind.OTHER),
        ],
    )
    def test_from_mode(self, mode: int, expected: FileKind) -> None:
        """Test raw st_mode values are classified."""
        assert FileKind.from_mode(mode) is expected


class TestFileInfo:
    """Tests for FileInfo."""

    def test_from_stat(self, tmp_path: Path) -> None:
        """Test building from a real stat result keeps only permission bits."""
        path = tmp_path / "f"
        path.write_text("")
        path.chmod(0o604)

        info = FileInfo.from_stat(path, os.lstat(path))

        assert info.kind is FileKind.FILE
        assert info.mode == 0o604
        assert info.exists and info.is_file
        assert not info.is_dir and not info.is_symlink

    def test_missing(self) -> None:
        """Test the missing record."""
        info = FileInfo.missing(Path("nowhere"))

        assert info.exists is False
        assert info.mode == 0


class TestCopyResult:
    """Tests for CopyResult."""

    def test_defaults(self) -> None:
        """Test a new result is empty."""
        assert CopyResult().total == 0

    def test_negative_rejected(self) -> None:
        """Test negative counters are rejected."""
        with pytest.raises(ValueError, match="negative"):
            CopyResult(files_copied=-1)


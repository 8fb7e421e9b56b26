"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ioex.context import AppContext


def _snapshot(root: Path) -> dict[str, tuple[str, bytes | None, int]]:
    """Map each entry below root to (kind, content, permission bits)."""
    entries: dict[str, tuple[str, bytes | None, int]] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        mode = path.lstat().st_mode & 0o7777
        if path.is_symlink():
            entries[rel] = ("symlink", None, mode)
        elif path.is_dir():
            entries[rel] = ("dir", None, mode)
        else:
            entries[rel] = ("file", path.read_bytes(), mode)
    return entries


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, tuple[str, bytes | None, int]]]:
    """Return a function capturing the state of a directory tree."""
    return _snapshot


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a nested source tree with one symlink.

    Layout::

        test/
            a/file.ext
            a/b/file.ext
            a/b/c/file.ext
            link -> a/b/c
    """
    root = tmp_path / "test"
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "file.ext").write_bytes(b"level a\n")
    (root / "a" / "b" / "file.ext").write_bytes(b"level b\n")
    (root / "a" / "b" / "c" / "file.ext").write_bytes(b"level c\n")
    os.symlink(root / "a" / "b" / "c", root / "link")
    return root


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Create a single source file with distinctive permission bits."""
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    path = src_dir / "data.bin"
    path.write_bytes(bytes(range(256)) * 4)
    path.chmod(0o640)
    return path


# ============================================================================
# Mock FileSystem Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    return fs


@pytest.fixture
def mock_context(mock_filesystem: MagicMock) -> AppContext:
    """Create an AppContext wired to the mock filesystem."""
    return AppContext(filesystem=mock_filesystem)

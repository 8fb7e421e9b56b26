"""Recursive copy of files and directory trees.

copy_all walks the source depth first, copying regular files and creating
directories at the mirrored destination positions. Symbolic links are
skipped silently. Permission bits carry over from the source. The first
failure aborts the walk and whatever was already copied stays in place.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ioex.config import CopyOptions
from ioex.errors import (
    DestinationConflictError,
    FileOperationError,
    IOFailureError,
    NotFoundError,
    wrap_os_error,
)
from ioex.paths import make_dirs, stat_path
from ioex.types import CopyResult, FileInfo

logger = logging.getLogger(__name__)


def copy_all(
    destination: str | os.PathLike[str],
    source: str | os.PathLike[str],
    overwrite: bool = False,
    options: CopyOptions | None = None,
) -> CopyResult:
    """Copy a file or directory tree from source to destination.

    If source is a directory, destination must be a directory if it exists
    and is created if it does not. Children are copied in name order and
    merged into an existing destination directory; unrelated entries there
    are kept.

    Args:
        destination: Target path.
        source: File or directory to copy.
        overwrite: Replace existing destination files. When False, the
            first existing destination file aborts the copy.
        options: Copy tuning. Defaults to CopyOptions().

    Returns:
        CopyResult summarizing what was copied.

    Raises:
        NotFoundError: If source does not exist.
        AlreadyExistsError: If a destination file exists and overwrite is False.
        DestinationConflictError: If a destination position holds a symlink,
            or an entry of the wrong kind (a file where a directory is needed
            or the reverse).
        IOFailureError: On any other failure.
    """
    options = options or CopyOptions()
    result = CopyResult()
    logger.debug("Copying %s to %s (overwrite=%s)", source, destination, overwrite)
    _copy_entry(Path(destination), Path(source), overwrite, options, result)
    return result


def copy_file(
    destination: str | os.PathLike[str],
    source: str | os.PathLike[str],
    overwrite: bool = False,
    options: CopyOptions | None = None,
) -> CopyResult:
    """Copy a single regular file, along with its permission bits.

    A symlink source is skipped and is not an error. Missing parent
    directories of destination are created with the mode of the source's
    parent directory.

    Args:
        destination: Target file path.
        source: File to copy.
        overwrite: Replace destination if it exists.
        options: Copy tuning. Defaults to CopyOptions().

    Returns:
        CopyResult summarizing what was copied.

    Raises:
        DestinationConflictError: If destination is a symlink or a
            non-file, or its parent is not a directory.
        IOFailureError: If source is a directory, or on any I/O failure.
    """
    options = options or CopyOptions()
    result = CopyResult()
    info = _source_info(Path(source))
    if info.is_symlink:
        _skip_symlink(info, result)
    elif info.is_dir:
        raise IOFailureError("Source is a directory", info.path)
    else:
        _copy_regular_file(Path(destination), info, overwrite, options, result)
    return result


def _source_info(source: Path) -> FileInfo:
    info = stat_path(source)
    if not info.exists:
        raise NotFoundError("Source does not exist", source)
    return info


def _skip_symlink(info: FileInfo, result: CopyResult) -> None:
    logger.debug("Skipping symlink %s", info.path)
    result.symlinks_skipped += 1


def _copy_entry(
    destination: Path,
    source: Path,
    overwrite: bool,
    options: CopyOptions,
    result: CopyResult,
) -> None:
    info = _source_info(source)
    if info.is_symlink:
        _skip_symlink(info, result)
        return
    if not info.is_dir:
        _copy_regular_file(destination, info, overwrite, options, result)
        return

    # list before creating destination, which may live inside source
    try:
        names = sorted(child.name for child in source.iterdir())
    except OSError as e:
        raise wrap_os_error(e, source) from e

    _ensure_directory(destination, info.mode, result)

    for name in names:
        _copy_entry(destination / name, source / name, overwrite, options, result)


def _ensure_directory(destination: Path, mode: int, result: CopyResult) -> None:
    """Create destination with mode, or accept it if it is already a directory."""
    info = stat_path(destination)
    if info.is_dir:
        return
    if info.exists:
        raise DestinationConflictError("Destination is not a directory", destination)
    result.directories_created += make_dirs(destination, mode)


def _parent_mode(source: Path, options: CopyOptions) -> int:
    """Permission bits of the source's parent, or the configured fallback."""
    try:
        info = stat_path(source.parent, follow_symlinks=True)
    except FileOperationError:
        return options.fallback_dir_mode
    return info.mode if info.is_dir else options.fallback_dir_mode


def _copy_regular_file(
    destination: Path,
    info: FileInfo,
    overwrite: bool,
    options: CopyOptions,
    result: CopyResult,
) -> None:
    source = info.path
    parent = destination.parent
    parent_info = stat_path(parent)
    if not parent_info.exists:
        result.directories_created += make_dirs(parent, _parent_mode(source, options))
    elif not parent_info.is_dir:
        raise DestinationConflictError("Destination parent is not a directory", parent)

    # never write through a link at the destination
    dest_info = stat_path(destination)
    if dest_info.is_symlink or (dest_info.exists and not dest_info.is_file):
        raise DestinationConflictError("Destination is not a file", destination)

    # "x" fails with FileExistsError instead of replacing
    write_mode = "wb" if overwrite else "xb"
    try:
        with open(source, "rb") as src, open(destination, write_mode) as dst:
            shutil.copyfileobj(src, dst, options.chunk_size)
        os.chmod(destination, info.mode)
    except OSError as e:
        raise wrap_os_error(e, e.filename or destination) from e

    logger.debug("Copied %s to %s", source, destination)
    result.files_copied += 1

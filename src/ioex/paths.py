"""Path inspection and creation helpers.

stat_path and path_exists report on a path; make_dirs and touch create
missing directories and files. Every OSError leaves this module as one of
the ioex error variants.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ioex.config import TouchOptions
from ioex.errors import DestinationConflictError, IOFailureError, wrap_os_error
from ioex.types import FileInfo

logger = logging.getLogger(__name__)


def stat_path(path: str | os.PathLike[str], follow_symlinks: bool = False) -> FileInfo:
    """Stat a path without raising for a missing entry.

    Args:
        path: Path to inspect.
        follow_symlinks: Report on a link's target instead of the link.

    Returns:
        FileInfo, with kind MISSING if nothing exists at ``path``.

    Raises:
        IOFailureError: If the stat call fails for any other reason.
    """
    path = Path(path)
    try:
        result = os.stat(path, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        return FileInfo.missing(path)
    except OSError as e:
        raise wrap_os_error(e, path) from e
    except ValueError as e:
        # embedded null byte and similar malformed input
        raise IOFailureError(str(e), path) from e
    return FileInfo.from_stat(path, result)


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Check whether a path exists.

    Symlinks are followed, so a dangling link reports False.

    Args:
        path: Path to check.

    Returns:
        True if the path exists, False if it does not.

    Raises:
        IOFailureError: If existence cannot be determined (permission
            denied, a path component is not a directory, ...).
    """
    return stat_path(path, follow_symlinks=True).exists


def make_dirs(path: str | os.PathLike[str], mode: int) -> int:
    """Create a directory and any missing ancestors.

    Each directory created gets exactly ``mode``, regardless of umask.
    Directories that already exist are left as they are.

    Args:
        path: Directory to create.
        mode: Permission bits for created directories.

    Returns:
        Number of directories created.

    Raises:
        DestinationConflictError: If a non-directory sits on the path.
        IOFailureError: If creation fails.
    """
    path = Path(path)
    info = stat_path(path, follow_symlinks=True)
    if info.is_dir:
        return 0
    if info.exists:
        raise DestinationConflictError("Not a directory", path)

    created = 0
    if path.parent != path:
        created += make_dirs(path.parent, mode)

    try:
        path.mkdir()
    except FileExistsError as e:
        # dangling symlink, or another process got there first
        if stat_path(path, follow_symlinks=True).is_dir:
            return created
        raise DestinationConflictError("Not a directory", path, e) from e
    except OSError as e:
        raise wrap_os_error(e, path) from e

    try:
        os.chmod(path, mode)
    except OSError as e:
        raise wrap_os_error(e, path) from e

    logger.debug("Created directory %s (mode %o)", path, mode)
    return created + 1


def touch(path: str | os.PathLike[str], options: TouchOptions | None = None) -> None:
    """Create a file if missing, creating parent directories as needed.

    Existing content is never modified. Unless ``options.update_times`` is
    False, access and modification times are set to the current time,
    including for files that already existed.

    Args:
        path: File to touch.
        options: Modes and timestamp behaviour. Defaults to TouchOptions().

    Raises:
        DestinationConflictError: If a parent position holds a non-directory.
        FileOperationError: If directory creation or the open fails.
    """
    options = options or TouchOptions()
    path = Path(path)
    make_dirs(path.parent, options.dir_mode)

    try:
        fd = os.open(path, os.O_RDONLY | os.O_CREAT, options.file_mode)
        os.close(fd)
        if options.update_times:
            os.utime(path, None)
    except OSError as e:
        raise wrap_os_error(e, path) from e

    logger.debug("Touched %s", path)

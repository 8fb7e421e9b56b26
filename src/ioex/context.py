"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be tested with a substituted filesystem. Dependencies are typed with the
FileSystem protocol rather than the concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ioex.config import Settings
from ioex.protocols import FileSystem


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for services used by CLI commands.
    When no filesystem is given, a RealFileSystem bound to ``settings`` is
    created, so the two never disagree.
    """

    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem | None = None

    def __post_init__(self) -> None:
        """Create the default filesystem from settings."""
        if self.filesystem is None:
            from ioex.filesystem import RealFileSystem

            self.filesystem = RealFileSystem(self.settings)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_path: Optional JSON settings file.

    Returns:
        Configured AppContext.
    """
    settings = Settings.from_file(config_path) if config_path else Settings()
    return AppContext(settings=settings)

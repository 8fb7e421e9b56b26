"""CLI commands using Typer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from ioex.context import AppContext

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from ioex import __version__
from ioex.console import ConsoleOutput
from ioex.context import create_context
from ioex.errors import AlreadyExistsError, FileOperationError

app = typer.Typer(
    name="ioex",
    help="Filesystem utilities: existence checks, touch and recursive copy",
    no_args_is_help=True,
)

output = ConsoleOutput()


@dataclass
class _GlobalOptions:
    """Options given before the command name."""

    config: Path | None = None


_options = _GlobalOptions()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"ioex v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=output.console, show_path=False)],
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log every filesystem step")] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON settings file")
    ] = None,
) -> None:
    """Filesystem utilities: existence checks, touch and recursive copy."""
    _configure_logging(verbose)
    _options.config = config


def _load_context(context: AppContext | None) -> AppContext:
    """Return the injected context or build the production one."""
    if context is not None:
        return context
    try:
        return create_context(_options.config)
    except (FileNotFoundError, ValidationError) as e:
        output.show_error(f"Invalid settings: {e}")
        raise typer.Exit(1) from e


@app.command("exists")
def exists_command(
    path: Annotated[Path, typer.Argument(help="Path to check")],
    _context=None,
) -> None:
    """Check whether a path exists (exit 1 if missing, 2 on error)."""
    ctx = _load_context(_context)

    try:
        found = ctx.filesystem.exists(path)
    except FileOperationError as e:
        output.show_error(f"Cannot check {path}: {e}")
        raise typer.Exit(2) from e

    if not found:
        output.show_info(f"{path} does not exist")
        raise typer.Exit(1)

    output.show_success(f"{path} exists")
    output.show_file_info(ctx.filesystem.stat(path))


@app.command("touch")
def touch_command(
    paths: Annotated[list[Path], typer.Argument(help="Files to create or touch")],
    _context=None,
) -> None:
    """Create files, and their parent directories, if missing."""
    ctx = _load_context(_context)

    for path in paths:
        try:
            ctx.filesystem.touch(path)
        except FileOperationError as e:
            output.show_error(f"Touch failed: {e}")
            raise typer.Exit(1) from e
        output.show_success(f"Touched {path}")


@app.command("copy")
def copy_command(
    source: Annotated[Path, typer.Argument(help="File or directory to copy")],
    destination: Annotated[Path, typer.Argument(help="Destination path")],
    overwrite: Annotated[
        bool, typer.Option("--overwrite", "-f", help="Replace existing destination files")
    ] = False,
    _context=None,
) -> None:
    """Recursively copy a file or directory, skipping symlinks."""
    ctx = _load_context(_context)

    try:
        result = ctx.filesystem.copy_all(destination, source, overwrite)
    except AlreadyExistsError as e:
        output.show_error(f"Copy stopped: {e}")
        output.show_warning("Use --overwrite to replace existing files")
        raise typer.Exit(1) from e
    except FileOperationError as e:
        output.show_error(f"Copy failed: {e}")
        raise typer.Exit(1) from e

    output.show_success(f"Copied {source} to {destination}")
    output.show_copy_result(result)

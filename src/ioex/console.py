"""User facing output for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ioex.types import CopyResult, FileInfo


class ConsoleOutput:
    """Rich console output for ioex commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {message}")

    def show_file_info(self, info: FileInfo) -> None:
        """Show kind and permission bits of a path."""
        self.console.print(f"  [dim]kind:[/dim] {info.kind.value}  [dim]mode:[/dim] {info.mode:04o}")

    def show_copy_result(self, result: CopyResult) -> None:
        """Display a copy summary table.

        Args:
            result: Summary returned by copy_all.
        """
        table = Table(title="Copy Summary")
        table.add_column("Entry", style="cyan")
        table.add_column("Count", justify="right")

        table.add_row("Files copied", str(result.files_copied))
        table.add_row("Directories created", str(result.directories_created))
        table.add_row("Symlinks skipped", str(result.symlinks_skipped))

        self.console.print(table)

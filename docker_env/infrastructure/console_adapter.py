"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table


class ConsoleAdapter:
    """Adapter for console operations using Rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console()

    def print(self, message: str) -> None:
        """Print a message to the console verbatim."""
        # Environment values may contain brackets.
        self._console.print(message, markup=False, highlight=False, soft_wrap=True)

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(f"[red bold]Error:[/red bold] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message to the console."""
        self._console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_table(
        self, headers: list[str], rows: list[list[str]], title: str | None = None
    ) -> None:
        """Print a formatted table to the console."""
        table = Table(title=title, box=box.SIMPLE)

        for header in headers:
            table.add_column(header)

        for row in rows:
            table.add_row(*row)

        self._console.print(table)

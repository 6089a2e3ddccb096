"""Console port for user interface operations."""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Port for console/terminal operations."""

    def print(self, message: str) -> None:
        """Print a message to the console without markup interpretation.

        Args:
            message: Message to print
        """
        ...

    def print_error(self, message: str) -> None:
        """Print an error message to the console.

        Args:
            message: Error message to print
        """
        ...

    def print_warning(self, message: str) -> None:
        """Print a warning message to the console.

        Args:
            message: Warning message to print
        """
        ...

    def print_table(
        self, headers: list[str], rows: list[list[str]], title: str | None = None
    ) -> None:
        """Print a formatted table to the console.

        Args:
            headers: Table column headers
            rows: Table rows data
            title: Optional table title
        """
        ...

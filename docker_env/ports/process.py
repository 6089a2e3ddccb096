"""Process execution port for running external commands."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessExecutorPort(Protocol):
    """Port for executing external processes."""

    async def execute_command(
        self,
        command: list[str],
        timeout: float | None = None,
    ) -> tuple[int, str, str]:
        """Execute an external command.

        Args:
            command: Command and arguments as list
            timeout: Execution timeout in seconds

        Returns:
            Tuple of (exit_code, stdout, stderr)

        Raises:
            TimeoutError: If command exceeds timeout
            OSError: If command cannot be executed
            UnicodeDecodeError: If the output is not valid UTF-8
        """
        ...

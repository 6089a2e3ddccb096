"""Process executor adapter implementation."""

from __future__ import annotations

import asyncio
import contextlib


class ProcessExecutorAdapter:
    """Adapter for executing external processes."""

    async def execute_command(
        self,
        command: list[str],
        timeout: float | None = None,
    ) -> tuple[int, str, str]:
        """Execute an external command.

        The child is killed and reaped whenever the wait ends early, whether by
        timeout or by cancellation of the awaiting task.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise OSError(f"Command not found: {command[0]}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except TimeoutError:
            raise TimeoutError(f"Command timed out after {timeout} seconds") from None
        finally:
            if process.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()

        return (
            process.returncode or 0,
            stdout.decode("utf-8") if stdout else "",
            stderr.decode("utf-8") if stderr else "",
        )

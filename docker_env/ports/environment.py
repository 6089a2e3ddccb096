"""Environment port for reading process environment variables."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentPort(Protocol):
    """Port for reading environment variables."""

    def get_environment_variable(self, name: str, default: str | None = None) -> str | None:
        """Get an environment variable value.

        Args:
            name: Environment variable name
            default: Default value if not found

        Returns:
            Environment variable value or default
        """
        ...

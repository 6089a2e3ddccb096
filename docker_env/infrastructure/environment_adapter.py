"""Environment adapter implementations."""

from __future__ import annotations

import os
from collections.abc import Mapping


class EnvironmentAdapter:
    """Adapter reading variables from the process environment."""

    def get_environment_variable(self, name: str, default: str | None = None) -> str | None:
        """Get an environment variable value."""
        return os.environ.get(name, default)


class MappingEnvironmentAdapter:
    """Adapter reading variables from a fixed mapping instead of the process."""

    def __init__(self, variables: Mapping[str, str] | None = None):
        self._variables = dict(variables or {})

    def get_environment_variable(self, name: str, default: str | None = None) -> str | None:
        """Get an environment variable value."""
        return self._variables.get(name, default)

"""Version gate for the minikube buildkit incompatibility."""

from __future__ import annotations

from docker_env.domain.exceptions import VersionParseError
from docker_env.domain.versions import is_buildkit_incompatible, parse_tolerant_version
from docker_env.ports.logger import LoggerPort


class VersionGate:
    """Flags runtimes at or below the last release with the buildkit bug."""

    def __init__(self, logger: LoggerPort):
        self._logger = logger

    def is_old_runtime(self, raw_version: str) -> bool:
        """Check whether ``raw_version`` is affected.

        Unparsable versions are logged and treated as unaffected.
        """
        try:
            version = parse_tolerant_version(raw_version)
        except VersionParseError as e:
            self._logger.debug(f"Parsing minikube version: {e.message}")
            return False
        return is_buildkit_incompatible(version)

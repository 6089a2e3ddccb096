"""OS environment overlay application service."""

from __future__ import annotations

from typing import TypeVar

from docker_env.domain.endpoint import parse_daemon_host
from docker_env.domain.exceptions import EndpointParseError
from docker_env.domain.models import (
    DOCKER_API_VERSION,
    DOCKER_CERT_PATH,
    DOCKER_HOST,
    DOCKER_TLS_VERIFY,
    DockerEnvironment,
    ResolutionFailure,
)
from docker_env.ports.environment import EnvironmentPort
from docker_env.ports.logger import LoggerPort

EnvT = TypeVar("EnvT", bound=DockerEnvironment)


class OSEnvironmentOverlay:
    """Applies the operator's ``DOCKER_*`` variables on top of a base environment."""

    def __init__(self, environment: EnvironmentPort, logger: LoggerPort):
        """Initialize the overlay.

        Args:
            environment: Environment port used to read ``DOCKER_*`` variables
            logger: Logger port for diagnostics
        """
        self._environment = environment
        self._logger = logger

    def overlay(self, base: EnvT) -> EnvT | ResolutionFailure:
        """Overlay the process environment on ``base``.

        A ``DOCKER_HOST`` that differs from ``base.host`` discards every
        other field of ``base``. An unparsable ``DOCKER_HOST`` fails the
        whole overlay.

        Args:
            base: Environment to start from; never mutated

        Returns:
            New environment of the same type as ``base``, or a failure
        """
        result = base
        raw_host = self._read(DOCKER_HOST)
        if raw_host:
            try:
                host = parse_daemon_host(raw_host, default_to_tls=True)
            except EndpointParseError as e:
                self._logger.warning(f"Ignoring docker environment: {DOCKER_HOST}: {e.message}")
                return ResolutionFailure(
                    error=EndpointParseError(f"{DOCKER_HOST}: {e.message}", address=raw_host)
                )

            if host != base.host:
                if base.host:
                    self._logger.info(
                        f"{DOCKER_HOST}={host} overrides {base.host}; dropping cluster settings"
                    )
                result = type(base)(host=host)

        updates: dict[str, str] = {}
        for name, field in (
            (DOCKER_API_VERSION, "api_version"),
            (DOCKER_CERT_PATH, "cert_path"),
            (DOCKER_TLS_VERIFY, "tls_verify"),
        ):
            value = self._read(name)
            if value:
                updates[field] = value

        if updates:
            result = result.model_copy(update=updates)
        return result

    def _read(self, name: str) -> str:
        return self._environment.get_environment_variable(name) or ""

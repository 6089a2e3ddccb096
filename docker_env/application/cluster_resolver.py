"""Cluster environment resolver application service."""

from __future__ import annotations

from docker_env.application.overlay import OSEnvironmentOverlay
from docker_env.application.version_gate import VersionGate
from docker_env.domain.exceptions import ClusterQueryError
from docker_env.domain.models import (
    DOCKER_API_VERSION,
    DOCKER_CERT_PATH,
    DOCKER_HOST,
    DOCKER_TLS_VERIFY,
    MICROK8S_DOCKER_HOST,
    ClusterEnvironment,
    ClusterKind,
    ResolutionFailure,
    RuntimeKind,
)
from docker_env.ports.local_cluster import LocalClusterQueryPort
from docker_env.ports.logger import LoggerPort

_CLUSTER_ENV_FIELDS = {
    DOCKER_HOST: "host",
    DOCKER_API_VERSION: "api_version",
    DOCKER_CERT_PATH: "cert_path",
    DOCKER_TLS_VERIFY: "tls_verify",
}


class ClusterEnvironmentResolver:
    """Application service deciding how to reach the cluster's docker daemon."""

    def __init__(
        self,
        overlay: OSEnvironmentOverlay,
        local_cluster: LocalClusterQueryPort,
        logger: LoggerPort,
        query_timeout: float | None = None,
    ):
        """Initialize the resolver.

        Args:
            overlay: OS overlay applied to every successful base environment
            local_cluster: Query port for a minikube-style cluster
            logger: Logger port for diagnostics
            query_timeout: Deadline in seconds for each cluster query
        """
        self._overlay = overlay
        self._local_cluster = local_cluster
        self._logger = logger
        self._query_timeout = query_timeout
        self._version_gate = VersionGate(logger)

    async def resolve(
        self, cluster_kind: ClusterKind, runtime_kind: RuntimeKind
    ) -> ClusterEnvironment | ResolutionFailure:
        """Resolve the cluster docker environment.

        Args:
            cluster_kind: Kind of the active cluster
            runtime_kind: Container runtime of the active cluster

        Returns:
            ClusterEnvironment, or a failure when the cluster query or
            ``DOCKER_HOST`` parsing fails
        """
        base = ClusterEnvironment()

        if runtime_kind == RuntimeKind.DOCKER:
            if cluster_kind == ClusterKind.MINIKUBE:
                # Talk to minikube's own docker daemon.
                try:
                    env_map = await self._local_cluster.docker_env(timeout=self._query_timeout)
                except (ClusterQueryError, OSError, TimeoutError, UnicodeDecodeError) as e:
                    return ResolutionFailure(error=self._as_query_error(e))

                fields = {
                    field: env_map[name]
                    for name, field in _CLUSTER_ENV_FIELDS.items()
                    if env_map.get(name)
                }
                base = ClusterEnvironment(
                    **fields, is_old_runtime_bug=await self._is_old_minikube()
                )
            elif cluster_kind == ClusterKind.MICROK8S:
                base = ClusterEnvironment(host=MICROK8S_DOCKER_HOST)

        return self._overlay.overlay(base)

    async def _is_old_minikube(self) -> bool:
        try:
            raw_version = await self._local_cluster.version(timeout=self._query_timeout)
        except (ClusterQueryError, OSError, TimeoutError, UnicodeDecodeError) as e:
            self._logger.debug(f"Querying minikube version: {e}")
            return False
        return self._version_gate.is_old_runtime(raw_version)

    @staticmethod
    def _as_query_error(error: Exception) -> ClusterQueryError:
        if isinstance(error, ClusterQueryError):
            return error
        if isinstance(error, TimeoutError):
            return ClusterQueryError(f"minikube docker-env timed out: {error}")
        return ClusterQueryError(f"minikube docker-env failed: {error}")

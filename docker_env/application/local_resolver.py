"""Local environment resolver application service."""

from __future__ import annotations

from docker_env.application.overlay import OSEnvironmentOverlay
from docker_env.domain.models import ClusterEnvironment, LocalEnvironment, ResolutionFailure


class LocalEnvironmentResolver:
    """Application service resolving the operator's own docker CLI environment."""

    def __init__(self, overlay: OSEnvironmentOverlay):
        self._overlay = overlay

    def resolve(
        self, cluster: ClusterEnvironment | ResolutionFailure
    ) -> LocalEnvironment | ResolutionFailure:
        """Resolve the local environment.

        The operator may already point their docker CLI at the cluster's
        daemon; when the hosts match, the cluster's runtime-bug flag applies
        locally too.

        Args:
            cluster: Result of the cluster resolution

        Returns:
            LocalEnvironment, or a failure from parsing ``DOCKER_HOST``
        """
        result = self._overlay.overlay(LocalEnvironment())
        if isinstance(result, ResolutionFailure):
            return result

        if isinstance(cluster, ResolutionFailure):
            cluster_host, cluster_flag = "", False
        else:
            cluster_host, cluster_flag = cluster.host, cluster.is_old_runtime_bug

        if result.host == cluster_host:
            result = result.model_copy(update={"is_old_runtime_bug": cluster_flag})
        return result

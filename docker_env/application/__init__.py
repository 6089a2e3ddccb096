"""Application layer for docker-env - Contains the resolution use cases."""

from docker_env.application.cluster_resolver import ClusterEnvironmentResolver
from docker_env.application.local_resolver import LocalEnvironmentResolver
from docker_env.application.overlay import OSEnvironmentOverlay
from docker_env.application.version_gate import VersionGate

__all__ = [
    "ClusterEnvironmentResolver",
    "LocalEnvironmentResolver",
    "OSEnvironmentOverlay",
    "VersionGate",
]

"""Docker daemon connection-environment resolution.

Decides which docker daemon endpoint (host, API version, TLS settings,
certificate path) a tool should talk to, from the process environment and
facts about the active cluster.
"""

from docker_env.application import (
    ClusterEnvironmentResolver,
    LocalEnvironmentResolver,
    OSEnvironmentOverlay,
    VersionGate,
)
from docker_env.domain import (
    ClusterEnvironment,
    ClusterKind,
    ClusterQueryError,
    DockerEnvError,
    DockerEnvironment,
    EndpointParseError,
    LocalEnvironment,
    ResolutionFailure,
    ResolverSettings,
    RuntimeKind,
    require_environment,
)
from docker_env.infrastructure import InfrastructureFactory

__version__ = "0.1.0"

__all__ = [
    "ClusterEnvironment",
    "ClusterEnvironmentResolver",
    "ClusterKind",
    "ClusterQueryError",
    "DockerEnvError",
    "DockerEnvironment",
    "EndpointParseError",
    "InfrastructureFactory",
    "LocalEnvironment",
    "LocalEnvironmentResolver",
    "OSEnvironmentOverlay",
    "ResolutionFailure",
    "ResolverSettings",
    "RuntimeKind",
    "VersionGate",
    "require_environment",
]

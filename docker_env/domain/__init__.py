"""Domain layer for docker-env - Contains value objects and pure parsing rules."""

from docker_env.domain.endpoint import parse_daemon_host
from docker_env.domain.exceptions import (
    ClusterQueryError,
    DockerEnvError,
    EndpointParseError,
    VersionParseError,
)
from docker_env.domain.models import (
    ClusterEnvironment,
    ClusterKind,
    DockerEnvironment,
    LocalEnvironment,
    ResolutionFailure,
    ResolverSettings,
    RuntimeKind,
    require_environment,
)
from docker_env.domain.versions import (
    MIN_BUILDKIT_RUNTIME_VERSION,
    is_buildkit_incompatible,
    parse_tolerant_version,
)

__all__ = [
    # Models
    "ClusterEnvironment",
    "ClusterKind",
    "DockerEnvironment",
    "LocalEnvironment",
    "ResolutionFailure",
    "ResolverSettings",
    "RuntimeKind",
    "require_environment",
    # Exceptions
    "ClusterQueryError",
    "DockerEnvError",
    "EndpointParseError",
    "VersionParseError",
    # Parsing
    "MIN_BUILDKIT_RUNTIME_VERSION",
    "is_buildkit_incompatible",
    "parse_daemon_host",
    "parse_tolerant_version",
]

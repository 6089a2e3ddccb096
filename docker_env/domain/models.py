"""Domain models for docker environment resolution."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from docker_env.domain.exceptions import DockerEnvError

DOCKER_HOST = "DOCKER_HOST"
DOCKER_API_VERSION = "DOCKER_API_VERSION"
DOCKER_CERT_PATH = "DOCKER_CERT_PATH"
DOCKER_TLS_VERIFY = "DOCKER_TLS_VERIFY"

# Serialization order of the connection variables.
DOCKER_ENV_VARIABLES = (DOCKER_HOST, DOCKER_API_VERSION, DOCKER_CERT_PATH, DOCKER_TLS_VERIFY)

MICROK8S_DOCKER_HOST = "unix:///var/snap/microk8s/current/docker.sock"


class ClusterKind(str, Enum):
    """Value object identifying the kind of orchestration cluster."""

    UNKNOWN = "unknown"
    GKE = "gke"
    MINIKUBE = "minikube"
    DOCKER_DESKTOP = "docker-for-desktop"
    MICROK8S = "microk8s"
    CRC = "crc"
    KIND = "kind"
    K3D = "k3d"
    NONE = "none"


class RuntimeKind(str, Enum):
    """Value object identifying the cluster's container runtime."""

    DOCKER = "docker"
    CONTAINERD = "containerd"
    CRIO = "cri-o"
    UNKNOWN = "unknown"


class DockerEnvironment(BaseModel):
    """Value object holding the settings used to reach a docker daemon.

    Empty strings mean "unset".
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    host: str = Field(default="", description="Daemon endpoint address")
    api_version: str = Field(default="", description="Docker API version")
    tls_verify: str = Field(default="", description="TLS verify flag")
    cert_path: str = Field(default="", description="Directory holding TLS certificates")
    is_old_runtime_bug: bool = Field(
        default=False,
        description="Daemon is an old minikube docker that cannot build with buildkit",
    )

    def as_env_dict(self) -> dict[str, str]:
        """Return the non-empty connection variables in serialization order."""
        values = {
            DOCKER_HOST: self.host,
            DOCKER_API_VERSION: self.api_version,
            DOCKER_CERT_PATH: self.cert_path,
            DOCKER_TLS_VERIFY: self.tls_verify,
        }
        return {name: values[name] for name in DOCKER_ENV_VARIABLES if values[name]}

    def as_environ(self) -> list[str]:
        """Serialize back to ``NAME=VALUE`` entries for a child process environment."""
        return [f"{name}={value}" for name, value in self.as_env_dict().items()]


class ClusterEnvironment(DockerEnvironment):
    """Environment for talking to the cluster's docker daemon."""


class LocalEnvironment(DockerEnvironment):
    """Environment for the operator's own docker CLI."""


class ResolutionFailure(BaseModel):
    """Terminal result of a resolution that could not produce an environment.

    The failure is carried rather than raised so it can be reported when the
    daemon connection is actually needed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: DockerEnvError

    @property
    def message(self) -> str:
        """Human-readable failure description."""
        return self.error.message


EnvT = TypeVar("EnvT", bound=DockerEnvironment)


def require_environment(resolution: EnvT | ResolutionFailure) -> EnvT:
    """Return the resolved environment or raise the carried error.

    Raises:
        DockerEnvError: If the resolution failed
    """
    if isinstance(resolution, ResolutionFailure):
        raise resolution.error
    return resolution


class ResolverSettings(BaseModel):
    """Configuration for a resolution run."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    cluster_kind: ClusterKind = Field(default=ClusterKind.UNKNOWN, description="Active cluster kind")
    runtime_kind: RuntimeKind = Field(default=RuntimeKind.UNKNOWN, description="Container runtime")
    minikube_binary: str = Field(default="minikube", min_length=1, description="minikube executable")
    minikube_profile: str | None = Field(default=None, description="minikube profile name")
    query_timeout: float = Field(default=10.0, gt=0, description="Per-query timeout in seconds")
    verbose: bool = Field(default=False, description="Enable debug logging")

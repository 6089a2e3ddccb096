"""Infrastructure layer for docker-env."""

from docker_env.infrastructure.console_adapter import ConsoleAdapter
from docker_env.infrastructure.environment_adapter import (
    EnvironmentAdapter,
    MappingEnvironmentAdapter,
)
from docker_env.infrastructure.factory import InfrastructureFactory
from docker_env.infrastructure.minikube_adapter import MinikubeAdapter
from docker_env.infrastructure.process_executor_adapter import ProcessExecutorAdapter
from docker_env.infrastructure.simple_logger import SimpleLogger

__all__ = [
    "ConsoleAdapter",
    "EnvironmentAdapter",
    "InfrastructureFactory",
    "MappingEnvironmentAdapter",
    "MinikubeAdapter",
    "ProcessExecutorAdapter",
    "SimpleLogger",
]

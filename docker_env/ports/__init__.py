"""Ports (interfaces) for docker-env following hexagonal architecture."""

from docker_env.ports.console import ConsolePort
from docker_env.ports.environment import EnvironmentPort
from docker_env.ports.local_cluster import LocalClusterQueryPort
from docker_env.ports.logger import LoggerPort
from docker_env.ports.process import ProcessExecutorPort

__all__ = [
    "ConsolePort",
    "EnvironmentPort",
    "LocalClusterQueryPort",
    "LoggerPort",
    "ProcessExecutorPort",
]

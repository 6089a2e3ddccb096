"""Factory for creating infrastructure adapters and wiring resolvers."""

from __future__ import annotations

import logging

from rich.console import Console

from docker_env.application.cluster_resolver import ClusterEnvironmentResolver
from docker_env.application.local_resolver import LocalEnvironmentResolver
from docker_env.application.overlay import OSEnvironmentOverlay
from docker_env.domain.models import ResolverSettings
from docker_env.infrastructure.console_adapter import ConsoleAdapter
from docker_env.infrastructure.environment_adapter import EnvironmentAdapter
from docker_env.infrastructure.minikube_adapter import MinikubeAdapter
from docker_env.infrastructure.process_executor_adapter import ProcessExecutorAdapter
from docker_env.infrastructure.simple_logger import SimpleLogger
from docker_env.ports.console import ConsolePort
from docker_env.ports.environment import EnvironmentPort
from docker_env.ports.local_cluster import LocalClusterQueryPort
from docker_env.ports.logger import LoggerPort
from docker_env.ports.process import ProcessExecutorPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_environment() -> EnvironmentPort:
        """Create an environment adapter backed by the process environment."""
        return EnvironmentAdapter()

    @staticmethod
    def create_logger(verbose: bool = False) -> LoggerPort:
        """Create a logger adapter.

        Args:
            verbose: Log at DEBUG instead of WARNING
        """
        return SimpleLogger(level=logging.DEBUG if verbose else logging.WARNING)

    @staticmethod
    def create_process_executor() -> ProcessExecutorPort:
        """Create a process executor adapter."""
        return ProcessExecutorAdapter()

    @classmethod
    def create_local_cluster(cls, settings: ResolverSettings) -> LocalClusterQueryPort:
        """Create the minikube query adapter described by ``settings``."""
        return MinikubeAdapter(
            cls.create_process_executor(),
            binary=settings.minikube_binary,
            profile=settings.minikube_profile,
        )

    @classmethod
    def create_resolvers(
        cls,
        settings: ResolverSettings,
        environment: EnvironmentPort | None = None,
        local_cluster: LocalClusterQueryPort | None = None,
        logger: LoggerPort | None = None,
    ) -> tuple[ClusterEnvironmentResolver, LocalEnvironmentResolver]:
        """Wire the cluster and local resolvers.

        Args:
            settings: Resolution settings
            environment: Environment port; the process environment when None
            local_cluster: Local-cluster query port; minikube CLI when None
            logger: Logger port; a SimpleLogger when None

        Returns:
            Tuple of (cluster resolver, local resolver)
        """
        logger = logger or cls.create_logger(settings.verbose)
        overlay = OSEnvironmentOverlay(environment or cls.create_environment(), logger)
        cluster = ClusterEnvironmentResolver(
            overlay,
            local_cluster or cls.create_local_cluster(settings),
            logger,
            query_timeout=settings.query_timeout,
        )
        return cluster, LocalEnvironmentResolver(overlay)

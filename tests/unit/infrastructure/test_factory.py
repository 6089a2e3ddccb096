"""Unit tests for InfrastructureFactory."""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

from docker_env.application.cluster_resolver import ClusterEnvironmentResolver
from docker_env.application.local_resolver import LocalEnvironmentResolver
from docker_env.domain.models import ResolverSettings
from docker_env.infrastructure.console_adapter import ConsoleAdapter
from docker_env.infrastructure.environment_adapter import EnvironmentAdapter
from docker_env.infrastructure.factory import InfrastructureFactory
from docker_env.infrastructure.minikube_adapter import MinikubeAdapter
from docker_env.infrastructure.simple_logger import SimpleLogger


class TestInfrastructureFactory:
    """Test InfrastructureFactory."""

    def test_create_console(self):
        """Test creating the console adapter."""
        assert isinstance(InfrastructureFactory.create_console(), ConsoleAdapter)

    def test_create_environment(self):
        """Test creating the process environment adapter."""
        assert isinstance(InfrastructureFactory.create_environment(), EnvironmentAdapter)

    @patch("docker_env.infrastructure.factory.SimpleLogger")
    def test_create_logger_levels(self, mock_logger_class):
        """Test that verbose selects DEBUG and quiet selects WARNING."""
        InfrastructureFactory.create_logger(verbose=True)
        InfrastructureFactory.create_logger()

        assert mock_logger_class.call_args_list[0].kwargs == {"level": logging.DEBUG}
        assert mock_logger_class.call_args_list[1].kwargs == {"level": logging.WARNING}

    def test_create_local_cluster(self):
        """Test that the minikube adapter follows the settings."""
        settings = ResolverSettings(minikube_binary="/opt/minikube", minikube_profile="dev")

        adapter = InfrastructureFactory.create_local_cluster(settings)

        assert isinstance(adapter, MinikubeAdapter)
        assert adapter._binary == "/opt/minikube"
        assert adapter._profile == "dev"

    def test_create_resolvers_defaults(self):
        """Test wiring with default adapters."""
        cluster, local = InfrastructureFactory.create_resolvers(ResolverSettings())

        assert isinstance(cluster, ClusterEnvironmentResolver)
        assert isinstance(local, LocalEnvironmentResolver)
        assert cluster._query_timeout == 10.0
        assert isinstance(cluster._logger, SimpleLogger)

    def test_create_resolvers_share_overlay(self):
        """Test that both resolvers read the same injected environment."""
        environment = MagicMock()
        environment.get_environment_variable.return_value = None

        cluster, local = InfrastructureFactory.create_resolvers(
            ResolverSettings(), environment=environment, local_cluster=AsyncMock()
        )

        assert cluster._overlay is local._overlay
        assert cluster._overlay._environment is environment

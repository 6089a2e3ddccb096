"""Pytest configuration and shared fixtures for docker-env tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from docker_env.application.overlay import OSEnvironmentOverlay
from docker_env.infrastructure.environment_adapter import MappingEnvironmentAdapter
from docker_env.ports.logger import LoggerPort

MINIKUBE_HOST = "tcp://192.168.99.100:2376"


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create mock logger port."""
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def make_overlay(mock_logger: MagicMock):
    """Build an overlay reading from the given variables.

    Returns:
        Callable taking keyword ``DOCKER_*`` variables
    """

    def _make(**variables: str) -> OSEnvironmentOverlay:
        return OSEnvironmentOverlay(MappingEnvironmentAdapter(variables), mock_logger)

    return _make


@pytest.fixture
def mock_minikube() -> AsyncMock:
    """Create mock local-cluster query port for a minikube at MINIKUBE_HOST."""
    mock = AsyncMock()
    mock.docker_env = AsyncMock(return_value={"DOCKER_HOST": MINIKUBE_HOST})
    mock.version = AsyncMock(return_value="v1.7.0")
    return mock

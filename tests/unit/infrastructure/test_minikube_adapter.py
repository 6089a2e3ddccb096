"""Unit tests for MinikubeAdapter."""

from unittest.mock import AsyncMock

import pytest

from docker_env.domain.exceptions import ClusterQueryError
from docker_env.infrastructure.minikube_adapter import MinikubeAdapter, parse_docker_env_output
from docker_env.ports.local_cluster import LocalClusterQueryPort

DOCKER_ENV_OUTPUT = """\
export DOCKER_TLS_VERIFY="1"
export DOCKER_HOST="tcp://192.168.99.100:2376"
export DOCKER_CERT_PATH="/home/me/.minikube/certs"
export MINIKUBE_ACTIVE_DOCKERD="minikube"

# To point your shell to minikube's docker-daemon, run:
# eval $(minikube -p minikube docker-env)
"""


class TestMinikubeAdapter:
    """Test MinikubeAdapter implementation."""

    @pytest.fixture
    def mock_process(self) -> AsyncMock:
        """Create mock process executor port."""
        mock = AsyncMock()
        mock.execute_command = AsyncMock(return_value=(0, DOCKER_ENV_OUTPUT, ""))
        return mock

    def test_implements_local_cluster_port(self, mock_process):
        """Test that MinikubeAdapter implements LocalClusterQueryPort interface."""
        assert isinstance(MinikubeAdapter(mock_process), LocalClusterQueryPort)

    @pytest.mark.asyncio
    async def test_docker_env(self, mock_process):
        """Test that docker-env output is parsed into a mapping."""
        adapter = MinikubeAdapter(mock_process)

        env = await adapter.docker_env(timeout=3.0)

        assert env == {
            "DOCKER_TLS_VERIFY": "1",
            "DOCKER_HOST": "tcp://192.168.99.100:2376",
            "DOCKER_CERT_PATH": "/home/me/.minikube/certs",
            "MINIKUBE_ACTIVE_DOCKERD": "minikube",
        }
        mock_process.execute_command.assert_awaited_once_with(
            ["minikube", "docker-env", "--shell", "sh"], timeout=3.0
        )

    @pytest.mark.asyncio
    async def test_profile_and_binary(self, mock_process):
        """Test that the binary and profile are passed to the CLI."""
        adapter = MinikubeAdapter(mock_process, binary="/opt/minikube", profile="dev")

        await adapter.docker_env()

        mock_process.execute_command.assert_awaited_once_with(
            ["/opt/minikube", "-p", "dev", "docker-env", "--shell", "sh"], timeout=None
        )

    @pytest.mark.asyncio
    async def test_version(self, mock_process):
        """Test that the version token is extracted."""
        mock_process.execute_command.return_value = (
            0,
            "minikube version: v1.8.2\ncommit: eb13446e786c9ef70cb0a9f85a633194e62396a1\n",
            "",
        )

        assert await MinikubeAdapter(mock_process).version() == "v1.8.2"
        mock_process.execute_command.assert_awaited_once_with(
            ["minikube", "version"], timeout=None
        )

    @pytest.mark.asyncio
    async def test_version_unrecognized_output(self, mock_process):
        """Test that unrecognized output falls back to the first line."""
        mock_process.execute_command.return_value = (0, "v1.9.0\n", "")

        assert await MinikubeAdapter(mock_process).version() == "v1.9.0"

    @pytest.mark.asyncio
    async def test_version_empty_output(self, mock_process):
        """Test that empty output yields an empty version."""
        mock_process.execute_command.return_value = (0, "", "")

        assert await MinikubeAdapter(mock_process).version() == ""

    @pytest.mark.asyncio
    async def test_nonzero_exit_raises(self, mock_process):
        """Test that a failing command raises ClusterQueryError with stderr."""
        mock_process.execute_command.return_value = (
            85,
            "",
            "The control plane node must be running for this command\n",
        )

        with pytest.raises(ClusterQueryError) as exc_info:
            await MinikubeAdapter(mock_process).docker_env()

        assert "exited with code 85" in exc_info.value.message
        assert "control plane node" in exc_info.value.message
        assert exc_info.value.details["command"] == "minikube docker-env --shell sh"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [OSError("Command not found: minikube"), TimeoutError()])
    async def test_execution_errors_raise(self, mock_process, error):
        """Test that missing binaries and timeouts raise ClusterQueryError."""
        mock_process.execute_command.side_effect = error

        with pytest.raises(ClusterQueryError) as exc_info:
            await MinikubeAdapter(mock_process).version(timeout=1.0)

        assert exc_info.value.__cause__ is error
        assert exc_info.value.command == ["minikube", "version"]

    @pytest.mark.asyncio
    async def test_undecodable_output_raises(self, mock_process):
        """Test that non-UTF-8 output raises ClusterQueryError."""
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        mock_process.execute_command.side_effect = error

        with pytest.raises(ClusterQueryError, match="not valid UTF-8") as exc_info:
            await MinikubeAdapter(mock_process).docker_env()

        assert exc_info.value.__cause__ is error
        assert exc_info.value.command == ["minikube", "docker-env", "--shell", "sh"]


class TestParseDockerEnvOutput:
    """Test parse_docker_env_output."""

    def test_strips_quotes(self):
        """Test that double and single quotes are removed."""
        output = "export A=\"1\"\nexport B='2'\nexport C=3\n"

        assert parse_docker_env_output(output) == {"A": "1", "B": "2", "C": "3"}

    def test_ignores_other_lines(self):
        """Test that comments, blanks and unset lines are ignored."""
        output = "# comment\n\nunset DOCKER_TLS_VERIFY\nexport DOCKER_HOST=\"tcp://h:2376\"\n"

        assert parse_docker_env_output(output) == {"DOCKER_HOST": "tcp://h:2376"}

    def test_empty_value(self):
        """Test that an empty quoted value is kept as empty."""
        assert parse_docker_env_output('export DOCKER_CERT_PATH=""') == {"DOCKER_CERT_PATH": ""}

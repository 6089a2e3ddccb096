"""Minikube adapter implementing the local-cluster query port."""

from __future__ import annotations

import re

from docker_env.domain.exceptions import ClusterQueryError
from docker_env.ports.process import ProcessExecutorPort

_EXPORT_LINE = re.compile(r"^export\s+([A-Za-z_][A-Za-z0-9_]*)=(.*)$")
_VERSION_LINE = re.compile(r"minikube version:\s*(\S+)")


class MinikubeAdapter:
    """Queries the minikube CLI for its docker daemon settings."""

    def __init__(
        self,
        process: ProcessExecutorPort,
        binary: str = "minikube",
        profile: str | None = None,
    ):
        """Initialize the adapter.

        Args:
            process: Process executor used to run the minikube CLI
            binary: minikube executable name or path
            profile: minikube profile; the CLI default when None
        """
        self._process = process
        self._binary = binary
        self._profile = profile

    async def docker_env(self, timeout: float | None = None) -> dict[str, str]:
        """Get the docker variables from ``minikube docker-env``."""
        stdout = await self._run(["docker-env", "--shell", "sh"], timeout)
        return parse_docker_env_output(stdout)

    async def version(self, timeout: float | None = None) -> str:
        """Get the minikube version string from ``minikube version``."""
        stdout = await self._run(["version"], timeout)
        match = _VERSION_LINE.search(stdout)
        if match:
            return match.group(1)
        lines = stdout.strip().splitlines()
        return lines[0].strip() if lines else ""

    async def _run(self, args: list[str], timeout: float | None) -> str:
        command = [self._binary]
        if self._profile:
            command += ["-p", self._profile]
        command += args

        try:
            exit_code, stdout, stderr = await self._process.execute_command(
                command, timeout=timeout
            )
        except TimeoutError as e:
            raise ClusterQueryError(f"{' '.join(command)}: {e}", command=command) from e
        except OSError as e:
            raise ClusterQueryError(f"{' '.join(command)}: {e}", command=command) from e
        except UnicodeDecodeError as e:
            raise ClusterQueryError(
                f"{' '.join(command)}: output is not valid UTF-8 ({e.reason})", command=command
            ) from e

        if exit_code != 0:
            detail = stderr.strip() or stdout.strip()
            raise ClusterQueryError(
                f"{' '.join(command)} exited with code {exit_code}: {detail}", command=command
            )
        return stdout


def parse_docker_env_output(output: str) -> dict[str, str]:
    """Parse the ``export KEY="VALUE"`` lines printed by ``docker-env --shell sh``."""
    env: dict[str, str] = {}
    for line in output.splitlines():
        match = _EXPORT_LINE.match(line.strip())
        if not match:
            continue
        name, value = match.groups()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        env[name] = value
    return env

"""Port for querying a local single-node cluster about its docker daemon."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LocalClusterQueryPort(Protocol):
    """Port for a local cluster that exposes its own docker daemon."""

    async def docker_env(self, timeout: float | None = None) -> dict[str, str]:
        """Get the docker connection variables the cluster advertises.

        Args:
            timeout: Query deadline in seconds

        Returns:
            Mapping of variable names (e.g. ``DOCKER_HOST``) to values

        Raises:
            ClusterQueryError: If the query fails or times out
        """
        ...

    async def version(self, timeout: float | None = None) -> str:
        """Get the cluster tool's version string.

        Args:
            timeout: Query deadline in seconds

        Returns:
            Free-form version, possibly prefixed (e.g. ``v1.8.2``)

        Raises:
            ClusterQueryError: If the query fails or times out
        """
        ...

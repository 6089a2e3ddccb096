"""Docker environment CLI.

Prints the docker connection settings a tool should use for the active
cluster (``cluster``), for the operator's own docker CLI (``local``), or both
side by side (``show``).
"""

from __future__ import annotations

import asyncio
import json
import sys

import click

from docker_env.domain.exceptions import DockerEnvError
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
from docker_env.infrastructure.factory import InfrastructureFactory
from docker_env.ports.console import ConsolePort


def _resolve(
    settings: ResolverSettings,
) -> tuple[ClusterEnvironment | ResolutionFailure, LocalEnvironment | ResolutionFailure]:
    cluster_resolver, local_resolver = InfrastructureFactory.create_resolvers(settings)
    cluster = asyncio.run(cluster_resolver.resolve(settings.cluster_kind, settings.runtime_kind))
    return cluster, local_resolver.resolve(cluster)


def _print_environment(console: ConsolePort, env: DockerEnvironment, output_format: str) -> None:
    if output_format == "json":
        console.print(json.dumps(env.model_dump(), indent=2))
        return
    for entry in env.as_environ():
        console.print(entry)


@click.group()
@click.option(
    "--cluster-kind",
    "-c",
    type=click.Choice([kind.value for kind in ClusterKind]),
    default=ClusterKind.UNKNOWN.value,
    envvar="DOCKER_ENV_CLUSTER_KIND",
    show_default=True,
    help="Kind of the active cluster",
)
@click.option(
    "--runtime",
    "-r",
    type=click.Choice([kind.value for kind in RuntimeKind]),
    default=RuntimeKind.UNKNOWN.value,
    envvar="DOCKER_ENV_RUNTIME",
    show_default=True,
    help="Container runtime of the active cluster",
)
@click.option(
    "--minikube-binary",
    default="minikube",
    envvar="DOCKER_ENV_MINIKUBE_BINARY",
    show_default=True,
    help="minikube executable",
)
@click.option("--profile", "-p", envvar="DOCKER_ENV_MINIKUBE_PROFILE", help="minikube profile")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=10.0,
    envvar="DOCKER_ENV_QUERY_TIMEOUT",
    show_default=True,
    help="Timeout in seconds for each minikube query",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    cluster_kind: str,
    runtime: str,
    minikube_binary: str,
    profile: str | None,
    timeout: float,
    verbose: bool,
):
    """Resolve which docker daemon to talk to."""
    ctx.obj = ResolverSettings(
        cluster_kind=ClusterKind(cluster_kind),
        runtime_kind=RuntimeKind(runtime),
        minikube_binary=minikube_binary,
        minikube_profile=profile,
        query_timeout=timeout,
        verbose=verbose,
    )


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["environ", "json"]),
    default="environ",
    help="Output format",
)
@click.pass_obj
def cluster(settings: ResolverSettings, output_format: str):
    """Print the environment for the cluster's docker daemon."""
    console = InfrastructureFactory.create_console()
    resolution, _ = _resolve(settings)
    try:
        env = require_environment(resolution)
    except DockerEnvError as e:
        console.print_error(e.message)
        sys.exit(1)
    _print_environment(console, env, output_format)


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["environ", "json"]),
    default="environ",
    help="Output format",
)
@click.pass_obj
def local(settings: ResolverSettings, output_format: str):
    """Print the environment for the local docker CLI."""
    console = InfrastructureFactory.create_console()
    _, resolution = _resolve(settings)
    try:
        env = require_environment(resolution)
    except DockerEnvError as e:
        console.print_error(e.message)
        sys.exit(1)
    _print_environment(console, env, output_format)


@main.command()
@click.pass_obj
def show(settings: ResolverSettings):
    """Print the cluster and local environments side by side."""
    console = InfrastructureFactory.create_console()
    cluster_resolution, local_resolution = _resolve(settings)

    failed = False
    columns: list[dict[str, str]] = []
    for label, resolution in (("cluster", cluster_resolution), ("local", local_resolution)):
        if isinstance(resolution, ResolutionFailure):
            console.print_error(f"{label}: {resolution.message}")
            failed = True
            columns.append({})
        else:
            values = resolution.as_env_dict()
            values["old runtime bug"] = "yes" if resolution.is_old_runtime_bug else "no"
            columns.append(values)

    names = list(dict.fromkeys([*columns[0], *columns[1]]))
    rows = [[name, columns[0].get(name, ""), columns[1].get(name, "")] for name in names]
    console.print_table(
        ["Variable", "Cluster", "Local"],
        rows,
        title=f"Docker environment ({settings.cluster_kind.value}/{settings.runtime_kind.value})",
    )
    if isinstance(cluster_resolution, ClusterEnvironment) and cluster_resolution.is_old_runtime_bug:
        console.print_warning("This minikube docker daemon cannot build with buildkit")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()

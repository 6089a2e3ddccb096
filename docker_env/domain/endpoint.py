"""Daemon endpoint address parsing.

Normalizes a ``DOCKER_HOST`` style value the same way the docker CLI does, so
that two spellings of the same endpoint compare equal.
"""

from __future__ import annotations

import re

from docker_env.domain.exceptions import EndpointParseError

DEFAULT_HTTP_HOST = "localhost"
DEFAULT_HTTP_PORT = 2375
DEFAULT_TLS_HTTP_PORT = 2376
DEFAULT_UNIX_SOCKET = "/var/run/docker.sock"
DEFAULT_NAMED_PIPE = "//./pipe/docker_engine"

DEFAULT_TCP_HOST = f"tcp://{DEFAULT_HTTP_HOST}:{DEFAULT_HTTP_PORT}"
DEFAULT_TLS_HOST = f"tcp://{DEFAULT_HTTP_HOST}:{DEFAULT_TLS_HTTP_PORT}"
DEFAULT_UNIX_HOST = f"unix://{DEFAULT_UNIX_SOCKET}"

# Hostnames, IPv4 addresses and IPv6 literals (with optional zone).
_HOST_CHARS = re.compile(r"^[A-Za-z0-9._~%:-]*$")


def parse_daemon_host(value: str, default_to_tls: bool = True) -> str:
    """Parse and normalize a daemon endpoint address.

    Args:
        value: Raw address, e.g. ``tcp://192.168.99.100:2376`` or ``unix:///var/run/docker.sock``
        default_to_tls: Use the TLS port default when ``value`` is blank

    Returns:
        Normalized address

    Raises:
        EndpointParseError: If the address is not a valid daemon endpoint
    """
    host = value.strip()
    if not host:
        return DEFAULT_TLS_HOST if default_to_tls else DEFAULT_UNIX_HOST
    return _parse_daemon_address(host)


def _parse_daemon_address(address: str) -> str:
    if "://" in address:
        proto, rest = address.split("://", 1)
    else:
        proto, rest = "tcp", address

    if proto == "tcp":
        return parse_tcp_address(rest, DEFAULT_TCP_HOST)
    if proto == "unix":
        return _parse_simple_proto_address("unix", rest, DEFAULT_UNIX_SOCKET)
    if proto == "npipe":
        return _parse_simple_proto_address("npipe", rest, DEFAULT_NAMED_PIPE)
    if proto in ("fd", "ssh"):
        return address
    raise EndpointParseError(f"Invalid bind address format: {address}", address=address)


def _parse_simple_proto_address(proto: str, address: str, default: str) -> str:
    address = address.removeprefix(f"{proto}://")
    if "://" in address:
        raise EndpointParseError(f"Invalid proto, expected {proto}: {address}", address=address)
    return f"{proto}://{address or default}"


def parse_tcp_address(address: str, default: str) -> str:
    """Parse a TCP daemon address, filling in host and port defaults.

    Args:
        address: Address without or with a ``tcp://`` prefix
        default: Fallback address, also the source of the default host and port

    Returns:
        Normalized ``tcp://host:port[/path]`` address

    Raises:
        EndpointParseError: If the address is malformed
    """
    if address in ("", "tcp://"):
        return default

    addr = address.removeprefix("tcp://")
    if "://" in addr or not addr:
        raise EndpointParseError(f"Invalid proto, expected tcp: {address}", address=address)

    default_host, default_port = _split_host_port(default.removeprefix("tcp://"))

    # Query and fragment are dropped, as is any user info before the host.
    addr = re.split(r"[?#]", addr, maxsplit=1)[0]
    netloc, sep, path = addr.partition("/")
    path = sep + path if sep else ""
    netloc = netloc.rpartition("@")[2]

    if netloc.endswith("]:"):
        netloc += default_port

    try:
        host, port = _split_host_port(netloc)
    except ValueError:
        # A bare IPv6 literal has no port; retry with the default one.
        host, port = netloc, default_port

    if not _HOST_CHARS.match(host):
        raise EndpointParseError(f"Invalid bind address format: {address}", address=address)
    if port and not port.isdigit():
        raise EndpointParseError(f"Invalid bind address format: {address}", address=address)

    return f"tcp://{_join_host_port(host or default_host, port or default_port)}{path}"


def _split_host_port(netloc: str) -> tuple[str, str]:
    if netloc.startswith("["):
        end = netloc.find("]")
        if end == -1:
            raise ValueError(f"missing ']' in address {netloc}")
        host, rest = netloc[1:end], netloc[end + 1 :]
        if rest and not rest.startswith(":"):
            raise ValueError(f"unexpected text after ']' in address {netloc}")
        return host, rest[1:]
    if netloc.count(":") > 1:
        raise ValueError(f"too many colons in address {netloc}")
    host, _, port = netloc.partition(":")
    return host, port


def _join_host_port(host: str, port: str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"

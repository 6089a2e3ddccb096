"""Domain-specific exceptions for docker environment resolution."""


class DockerEnvError(Exception):
    """Base exception for all docker environment errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EndpointParseError(DockerEnvError):
    """Raised when a daemon endpoint address cannot be parsed."""

    def __init__(self, message: str, address: str | None = None):
        super().__init__(message)
        self.address = address
        if address is not None:
            self.details["address"] = address


class ClusterQueryError(DockerEnvError):
    """Raised when the local-cluster client fails to answer a query."""

    def __init__(self, message: str, command: list[str] | None = None):
        super().__init__(message)
        self.command = command
        if command:
            self.details["command"] = " ".join(command)


class VersionParseError(DockerEnvError):
    """Raised when a runtime version string cannot be parsed."""

    pass

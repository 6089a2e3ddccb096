"""Runtime version parsing and the buildkit compatibility threshold."""

from __future__ import annotations

from packaging.version import InvalidVersion, Version

from docker_env.domain.exceptions import VersionParseError

# Last minikube release whose docker daemon cannot build with buildkit.
# See https://github.com/kubernetes/minikube/issues/4143
MIN_BUILDKIT_RUNTIME_VERSION = Version("1.8.0")


def parse_tolerant_version(raw: str) -> Version:
    """Parse a version string, accepting a leading ``v`` and missing components.

    ``v1.7`` parses as ``1.7.0``; build metadata (``+abc``) is dropped.

    Raises:
        VersionParseError: If the string is not a recognizable version
    """
    text = raw.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    try:
        parsed = Version(text)
    except InvalidVersion as e:
        raise VersionParseError(f"Invalid version '{raw}'", details={"version": raw}) from e
    return Version(parsed.public)


def is_buildkit_incompatible(version: Version) -> bool:
    """Whether a runtime at ``version`` is at or below the last buggy release."""
    return MIN_BUILDKIT_RUNTIME_VERSION >= version

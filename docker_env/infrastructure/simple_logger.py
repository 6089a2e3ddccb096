"""Simple logger implementation on top of the standard logging module."""

import logging
from typing import Any

from docker_env.ports.logger import LoggerPort


class SimpleLogger(LoggerPort):
    """Logger implementation using Python's standard logging."""

    def __init__(self, name: str = "docker_env", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "docker_env")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Add stderr handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._logger.error(message, extra=kwargs)

"""Unit tests for SimpleLogger."""

import logging
from unittest.mock import Mock, patch

from docker_env.infrastructure.simple_logger import SimpleLogger
from docker_env.ports.logger import LoggerPort


class TestSimpleLogger:
    """Test cases for SimpleLogger implementation."""

    def test_implements_logger_port(self):
        """Test that SimpleLogger properly implements LoggerPort."""
        assert isinstance(SimpleLogger(), LoggerPort)

    def test_initialization_default_values(self):
        """Test logger initialization with default values."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_get_logger.assert_called_once_with("docker_env")
            mock_logger.setLevel.assert_called_once_with(logging.INFO)

    def test_handler_added_only_once(self):
        """Test that repeated construction does not duplicate handlers."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.handlers = [Mock()]
            mock_get_logger.return_value = mock_logger

            SimpleLogger()

            mock_logger.addHandler.assert_not_called()

    def test_methods_delegate_with_extra(self):
        """Test that each level delegates to the stdlib logger."""
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger
            logger = SimpleLogger()

            logger.debug("d", host="tcp://h:2375")
            logger.info("i")
            logger.warning("w")
            logger.error("e")

            mock_logger.debug.assert_called_once_with("d", extra={"host": "tcp://h:2375"})
            mock_logger.info.assert_called_once_with("i", extra={})
            mock_logger.warning.assert_called_once_with("w", extra={})
            mock_logger.error.assert_called_once_with("e", extra={})

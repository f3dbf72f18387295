"""
Logging configuration for tagtree

Provides an IndentLogger so that work nested inside a single registration
(implicit ancestor creation) is rendered as an indented block.
"""

import logging
import sys
from contextlib import contextmanager

LOGGER_NAME = "tagtree"

INDENT = "  "


class IndentLogger:
    """Logger wrapper that prefixes messages with the current nesting depth"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger
        self._level = 0

    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log debug message with indentation"""
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        """Log info message with indentation"""
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        """Log warning message with indentation"""
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        """Log error message with indentation"""
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        return INDENT * self._level

    @contextmanager
    def indent_block(self, initial_message: str | None = None):
        """
        Context manager for an indented block of log messages

        Args:
            initial_message: Optional debug message to log at block start
        """
        if initial_message:
            self.debug(initial_message)
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1


def setup_logging(level=logging.INFO):
    """
    Configure console logging for tagtree

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: The shared project logger
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # stderr keeps log lines out of command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return logger


# Shared logger; no handler is installed until setup_logging is called
logger = IndentLogger(logging.getLogger(LOGGER_NAME))

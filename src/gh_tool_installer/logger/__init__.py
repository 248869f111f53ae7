"""Logging utilities for gh-tool-installer.

This package provides structured logging with:
- Colored console output with ANSI color codes
- File rotation using standard RotatingFileHandler
- Async-safe logging via QueueHandler/QueueListener
- Hierarchical logger naming (e.g., gh_tool_installer.core.resolver)

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from gh_tool_installer.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Installing %s", tool_name)  # Use %-style formatting

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never use f-strings in log calls
    4. Never log a credential; log token_preview() instead
"""

from gh_tool_installer.logger.config import apply_log_levels as _apply_levels
from gh_tool_installer.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from gh_tool_installer.logger.handlers import ConfigurationError
from gh_tool_installer.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from gh_tool_installer.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "apply_log_levels",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]


def apply_log_levels(console_level: str, file_level: str) -> None:
    """Apply configured log levels to the running handlers.

    Example:
        >>> from gh_tool_installer.logger import apply_log_levels
        >>> apply_log_levels("DEBUG", "DEBUG")

    """
    _apply_levels(get_state(), console_level, file_level)

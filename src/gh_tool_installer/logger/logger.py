"""Main logger module providing public API functions.

- setup_logging(): Configure logging with async-safe QueueHandler architecture
- get_logger(): Get or create logger instance
- flush_all_handlers(): Ensure pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import logging
from pathlib import Path

from gh_tool_installer.logger.config import load_log_settings
from gh_tool_installer.logger.handlers import (
    ROOT_LOGGER_NAME,
    setup_root_logger,
)
from gh_tool_installer.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait up to 5 seconds for queued records, then flush handlers."""
    get_state().drain()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    get_state().stop()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging with async-safe QueueHandler architecture.

    The root ``gh_tool_installer`` logger is initialized exactly once;
    child loggers propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get or create logger instance.

    Best Practice:
        >>> logger = get_logger(__name__)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging on first setup

    Returns:
        Logger instance

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and forgets every
    ``gh_tool_installer`` logger so the next test starts clean.
    """
    state = get_state()
    with state.lock:
        state.stop()

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]

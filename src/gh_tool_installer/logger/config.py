"""Configuration loading and updating for logging system.

Bootstrap defaults are used while modules import; apply_log_levels()
switches handler levels once the settings file has been read.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from gh_tool_installer.constants import (
    APP_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
)

if TYPE_CHECKING:
    from gh_tool_installer.logger.state import LoggingState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        GH_TOOL_INSTALLER_LOG_DIR: Overrides the log directory path. Used
        during pytest runs to keep test logs out of the user's home.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / f"{APP_NAME}.log"
    else:
        log_dir = Path.home() / ".config" / APP_NAME / "logs"
        log_path = log_dir / f"{APP_NAME}.log"

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def apply_log_levels(
    state: "LoggingState", console_level: str, file_level: str
) -> None:
    """Update handler levels on the running QueueListener.

    Only handler levels change; handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)
        console_level: New console level name
        file_level: New file level name

    """
    if state.queue_listener is None:
        return

    state.levels = (console_level, file_level)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(getattr(logging, file_level, logging.INFO))
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, console_level, logging.INFO))

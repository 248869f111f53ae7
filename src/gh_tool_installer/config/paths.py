"""Path constants and utilities for gh-tool-installer configuration."""

import os
from collections.abc import Mapping
from pathlib import Path

from gh_tool_installer.constants import (
    APP_NAME,
    CONFIG_DIR_ENV_VAR,
    CONFIG_FILE_NAME,
)


class Paths:
    """Application paths and directory structure."""

    @staticmethod
    def home_dir(environ: Mapping[str, str]) -> Path:
        """Return the home directory named by ``HOME`` or the OS default."""
        home = environ.get("HOME")
        return Path(home) if home else Path.home()

    @classmethod
    def config_dir(cls, environ: Mapping[str, str]) -> Path:
        """Return the settings directory, honouring the env override."""
        override = environ.get(CONFIG_DIR_ENV_VAR)
        if override:
            return cls.expand_path(override)
        return cls.home_dir(environ) / ".config" / APP_NAME

    @classmethod
    def settings_file(cls, environ: Mapping[str, str]) -> Path:
        """Return the settings.conf path."""
        return cls.config_dir(environ) / CONFIG_FILE_NAME

    @classmethod
    def default_install_root(cls, environ: Mapping[str, str]) -> Path:
        """Return the user-local prefix whose ``bin`` receives the tool."""
        return cls.home_dir(environ) / ".local"

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Example:
            >>> Paths.expand_path("~/Documents")
            Path('/home/user/Documents')

        """
        return Path(os.path.expanduser(path_str)).resolve(strict=False)

"""Settings manager for the INI configuration file.

The file is optional and is only ever read; compiled defaults fill every
key the user leaves out.
"""

import configparser
from pathlib import Path

from gh_tool_installer.config.paths import Paths
from gh_tool_installer.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OWNER,
    DEFAULT_PACKAGE_SUBPATH,
    DEFAULT_REPO,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOOL_NAME,
    SECTION_DEFAULT,
    SECTION_DIRECTORY,
    SECTION_NETWORK,
    SECTION_TARGET,
)
from gh_tool_installer.logger import get_logger
from gh_tool_installer.types import (
    DirectoryConfig,
    NetworkConfig,
    Settings,
    TargetConfig,
)

logger = get_logger(__name__)

RawConfigDict = dict[str, str | dict[str, str]]


class SettingsManager:
    """Loads settings.conf on top of compiled defaults."""

    def __init__(self, settings_file: Path, install_root: Path) -> None:
        """Initialize settings manager.

        Args:
            settings_file: Location of settings.conf (may not exist)
            install_root: Default install prefix used when unset

        """
        self.settings_file = settings_file
        self.install_root = install_root

    def get_defaults(self) -> RawConfigDict:
        """Get default configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            "log_level": DEFAULT_LOG_LEVEL,
            "console_log_level": DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                "retry_attempts": str(DEFAULT_RETRY_ATTEMPTS),
                "timeout_seconds": str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_TARGET: {
                "owner": DEFAULT_OWNER,
                "repo": DEFAULT_REPO,
                "tool": DEFAULT_TOOL_NAME,
                "package_subpath": DEFAULT_PACKAGE_SUBPATH,
            },
            SECTION_DIRECTORY: {"install_root": str(self.install_root)},
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with defaults."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, subvalue)

        return config

    def load(self) -> Settings:
        """Load settings, overriding defaults with the user's file.

        Returns:
            Parsed settings

        """
        config = self._create_config_from_defaults(self.get_defaults())

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
                logger.debug("Loaded settings from %s", self.settings_file)
            except configparser.Error as e:
                logger.warning(
                    "Ignoring unreadable settings file %s: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(self.get_defaults())

        return self._convert(config)

    def _convert(self, config: configparser.ConfigParser) -> Settings:
        """Convert ConfigParser to typed settings."""
        defaults = config[SECTION_DEFAULT]
        network = config[SECTION_NETWORK]
        target = config[SECTION_TARGET]
        directory = config[SECTION_DIRECTORY]

        network_config: NetworkConfig = {
            "retry_attempts": self._as_int(
                network.get("retry_attempts"), DEFAULT_RETRY_ATTEMPTS
            ),
            "timeout_seconds": self._as_int(
                network.get("timeout_seconds"), DEFAULT_TIMEOUT_SECONDS
            ),
        }
        target_config: TargetConfig = {
            "owner": target.get("owner", DEFAULT_OWNER),
            "repo": target.get("repo", DEFAULT_REPO),
            "tool": target.get("tool", DEFAULT_TOOL_NAME),
            "package_subpath": target.get(
                "package_subpath", DEFAULT_PACKAGE_SUBPATH
            ),
        }
        directory_config: DirectoryConfig = {
            "install_root": Paths.expand_path(
                directory.get("install_root", str(self.install_root))
            ),
        }

        return {
            "log_level": defaults.get("log_level", DEFAULT_LOG_LEVEL).upper(),
            "console_log_level": defaults.get(
                "console_log_level", DEFAULT_CONSOLE_LOG_LEVEL
            ).upper(),
            "network": network_config,
            "target": target_config,
            "directory": directory_config,
        }

    @staticmethod
    def _as_int(value: str | None, default: int) -> int:
        """Parse an integer setting, falling back to the default."""
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Invalid integer setting %r, using %s", value, default
            )
            return default

"""Explicit configuration object handed to every resolver component.

The process environment is read exactly once, in from_environment(); after
that nothing in the resolver looks at os.environ, so tests build a
ResolverConfig directly from a fixture mapping.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gh_tool_installer.config.paths import Paths
from gh_tool_installer.config.settings import SettingsManager
from gh_tool_installer.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OWNER,
    DEFAULT_PACKAGE_SUBPATH,
    DEFAULT_REPO,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOOL_NAME,
    GITHUB_API_URL,
    GITHUB_WEB_URL,
    SHELL_PROFILE_NAMES,
    TOKEN_ENV_VAR,
)
from gh_tool_installer.types import Settings


@dataclass(slots=True, frozen=True)
class ResolverConfig:
    """Everything the resolver needs to know about its surroundings.

    Attributes:
        token: Raw credential, None when the variable is unset
        home: Home directory that owns config and profile files
        install_root: Prefix whose ``bin`` directory receives the tool
        path_entries: Directories of the executable search path
        owner: Repository owner
        repo: Repository name
        tool_name: Canonical executable name
        package_subpath: Conventional package location in the source tree
        api_url: GitHub REST API base URL
        web_url: GitHub web base URL used for clone and build
        timeout_seconds: Base network timeout
        retry_attempts: Download retry attempts
        log_level: File log level
        console_log_level: Console log level

    """

    token: str | None
    home: Path
    install_root: Path
    path_entries: tuple[str, ...] = ()
    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    tool_name: str = DEFAULT_TOOL_NAME
    package_subpath: str = DEFAULT_PACKAGE_SUBPATH
    api_url: str = GITHUB_API_URL
    web_url: str = GITHUB_WEB_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str],
        settings: Settings | None = None,
    ) -> "ResolverConfig":
        """Build configuration from an environment mapping and settings.

        Args:
            environ: Environment mapping (usually os.environ)
            settings: Parsed settings; loaded from settings.conf when None

        Returns:
            ResolverConfig instance

        """
        if settings is None:
            settings = SettingsManager(
                Paths.settings_file(environ),
                Paths.default_install_root(environ),
            ).load()

        path_value = environ.get("PATH", "")
        return cls(
            token=environ.get(TOKEN_ENV_VAR) or None,
            home=Paths.home_dir(environ),
            install_root=settings["directory"]["install_root"],
            path_entries=tuple(p for p in path_value.split(os.pathsep) if p),
            owner=settings["target"]["owner"],
            repo=settings["target"]["repo"],
            tool_name=settings["target"]["tool"],
            package_subpath=settings["target"]["package_subpath"],
            timeout_seconds=settings["network"]["timeout_seconds"],
            retry_attempts=settings["network"]["retry_attempts"],
            log_level=settings["log_level"],
            console_log_level=settings["console_log_level"],
        )

    @property
    def repository(self) -> str:
        """Return the ``owner/repo`` coordinate."""
        return f"{self.owner}/{self.repo}"

    @property
    def clone_url(self) -> str:
        """Return the HTTPS source URL of the repository."""
        return f"{self.web_url}/{self.owner}/{self.repo}"

    @property
    def install_dir(self) -> Path:
        """Return the directory the executable is installed into."""
        return self.install_root / "bin"

    @property
    def installed_binary(self) -> Path:
        """Return the final path of the canonical executable."""
        return self.install_dir / self.tool_name

    @property
    def cargo_config_file(self) -> Path:
        """Return the build tool configuration file."""
        return self.home / ".cargo" / "config.toml"

    @property
    def shell_profiles(self) -> tuple[Path, ...]:
        """Return the shell profile files that may receive PATH lines."""
        return tuple(self.home / name for name in SHELL_PROFILE_NAMES)

    @property
    def install_dir_on_path(self) -> bool:
        """Return whether the install directory is already on PATH."""
        return str(self.install_dir) in self.path_entries

    @property
    def search_path(self) -> str:
        """Return PATH extended with the install directory when missing."""
        entries = list(self.path_entries)
        if not self.install_dir_on_path:
            entries.append(str(self.install_dir))
        return os.pathsep.join(entries)

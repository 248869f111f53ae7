"""Centralized type definitions for gh-tool-installer.

TypedDicts describing the settings file sections after parsing.
"""

from pathlib import Path
from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration options."""

    retry_attempts: int
    timeout_seconds: int


class TargetConfig(TypedDict):
    """Repository coordinate and tool naming."""

    owner: str
    repo: str
    tool: str
    package_subpath: str


class DirectoryConfig(TypedDict):
    """Directory paths configuration."""

    install_root: Path


class Settings(TypedDict):
    """Parsed settings.conf contents."""

    log_level: str
    console_log_level: str
    network: NetworkConfig
    target: TargetConfig
    directory: DirectoryConfig

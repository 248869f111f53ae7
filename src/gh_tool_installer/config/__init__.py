"""Configuration: paths, the settings file and the resolver config object."""

from gh_tool_installer.config.paths import Paths
from gh_tool_installer.config.resolver_config import ResolverConfig
from gh_tool_installer.config.settings import SettingsManager

__all__ = ["Paths", "ResolverConfig", "SettingsManager"]

"""GitHub release and asset models."""

from gh_tool_installer.core.github.models.asset import Asset
from gh_tool_installer.core.github.models.release import Release

__all__ = ["Asset", "Release"]

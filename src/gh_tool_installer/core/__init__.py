"""Installation pipeline components."""

from gh_tool_installer.core.outcome import InstallOutcome, InstallStatus
from gh_tool_installer.core.resolver import InstallResolver

__all__ = ["InstallOutcome", "InstallResolver", "InstallStatus"]

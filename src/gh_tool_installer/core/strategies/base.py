"""Common contract for binary acquisition strategies.

Strategies are tried in order. Each either installs the binary and
reports success, or explains why it could not so the next one runs.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.core.github import Release
from gh_tool_installer.core.platform import PlatformDescriptor
from gh_tool_installer.exceptions import InstallerError


@dataclass(slots=True, frozen=True)
class StrategyContext:
    """Inputs shared by every strategy."""

    config: ResolverConfig
    platform: PlatformDescriptor
    release: Release | None


@dataclass(slots=True, frozen=True)
class StrategyResult:
    """Outcome of a single strategy attempt.

    Attributes:
        succeeded: Whether the binary is now installed
        binary_path: Installed binary on success
        error: Why the strategy declined or failed

    """

    succeeded: bool
    binary_path: Path | None = None
    error: InstallerError | None = None

    @classmethod
    def success(cls, binary_path: Path) -> "StrategyResult":
        return cls(succeeded=True, binary_path=binary_path)

    @classmethod
    def failure(cls, error: InstallerError) -> "StrategyResult":
        return cls(succeeded=False, error=error)


class AcquisitionStrategy(Protocol):
    """Attempt to install the binary, returning an outcome or a reason."""

    name: str
    from_source: bool

    async def attempt(self, context: StrategyContext) -> StrategyResult:
        """Try to install the tool."""
        ...

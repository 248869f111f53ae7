"""Terminal outcome of an installation run."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gh_tool_installer.exceptions import InstallerError


class InstallStatus(Enum):
    """How the run ended."""

    SKIPPED = "skipped"
    ACQUIRED_FROM_RELEASE = "acquired_from_release"
    BUILT_FROM_SOURCE = "built_from_source"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class InstallOutcome:
    """Result returned by InstallResolver.run().

    Attributes:
        status: How the run ended
        binary_path: Verified binary path on success
        version_output: Output of ``<tool> --version`` when available
        error: The fatal error on failure

    """

    status: InstallStatus
    binary_path: Path | None = None
    version_output: str | None = None
    error: InstallerError | None = None

    @property
    def exit_code(self) -> int:
        """Return the process exit code for this outcome."""
        return 1 if self.status is InstallStatus.FAILED else 0

    @property
    def succeeded(self) -> bool:
        """Return whether the tool is installed."""
        return self.status in (
            InstallStatus.ACQUIRED_FROM_RELEASE,
            InstallStatus.BUILT_FROM_SOURCE,
        )

"""Exception classes for gh-tool-installer operations.

Fatal errors carry operator hints which the CLI prints before exiting.
``NoReleaseFound`` and ``NoBinaryMatch`` are never raised to the caller;
they describe why a strategy declined so the chain can move on.
"""

from gh_tool_installer.constants import (
    CLASSIC_TOKEN_PREFIX,
    FINE_GRAINED_TOKEN_PREFIX,
)


class InstallerError(Exception):
    """Base exception for gh-tool-installer operations."""

    error_prefix: str = "Operation failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        hints: list[str] | None = None,
    ) -> None:
        """Initialize error with message, optional target and hints.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.
            hints: Operator-facing suggestions for resolving the failure.

        """
        super().__init__(message)
        self.message = message
        self.target = target
        self.hints = hints or []

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InvalidCredentialFormat(InstallerError):
    """Raised when the token matches neither accepted shape."""

    error_prefix = "Invalid GitHub token format"

    def __init__(self) -> None:
        """Describe the accepted shapes without echoing the token."""
        super().__init__(
            f"token should start with '{FINE_GRAINED_TOKEN_PREFIX}' or "
            f"'{CLASSIC_TOKEN_PREFIX}' and contain only alphanumeric "
            "characters and underscores",
            hints=[
                "Both classic and fine-grained personal access tokens "
                "are supported.",
                "Fine-grained tokens start with "
                f"'{FINE_GRAINED_TOKEN_PREFIX}' and classic tokens start "
                f"with '{CLASSIC_TOKEN_PREFIX}'.",
            ],
        )


class AuthenticationFailed(InstallerError):
    """Raised when the identity check does not return 200."""

    error_prefix = "GitHub authentication failed"

    def __init__(self, status: int) -> None:
        """Initialize with the HTTP status returned by the API.

        Args:
            status: HTTP status code, 0 when no response was received.

        """
        super().__init__(
            f"GitHub API returned status {status}",
            hints=[
                "Invalid or expired token",
                "Token lacks necessary permissions",
                "Network connectivity issues",
                "Check that the token has the 'repo' scope for accessing "
                "private repositories.",
            ],
        )
        self.status = status


class ResourceNotFound(InstallerError):
    """Raised when the target repository returns 404."""

    error_prefix = "Repository not found or not accessible"

    def __init__(self, repository: str) -> None:
        """Initialize with the owner/name coordinate."""
        super().__init__(
            "GitHub returned 404",
            target=repository,
            hints=[
                "The repository exists",
                "You have access to the repository",
                "The token has 'repo' scope if it's a private repository",
            ],
        )
        self.repository = repository


class ResourceAccessError(InstallerError):
    """Raised when the repository check returns an unexpected status."""

    error_prefix = "Unable to access repository"

    def __init__(self, repository: str, status: int) -> None:
        """Initialize with the owner/name coordinate and HTTP status."""
        super().__init__(
            f"HTTP status {status}",
            target=repository,
        )
        self.repository = repository
        self.status = status


class NoReleaseFound(InstallerError):
    """No published release exists for the target repository."""

    error_prefix = "No release found"


class NoBinaryMatch(InstallerError):
    """No release asset matched any candidate pattern."""

    error_prefix = "No matching binary"


class PackageNotFound(InstallerError):
    """Raised when the cloned source tree has no buildable package."""

    error_prefix = "Package not found"


class BuildFailed(InstallerError):
    """Raised when every acquisition strategy has failed."""

    error_prefix = "Build failed"


class InstallationUnverified(InstallerError):
    """Raised when the installed binary cannot be located."""

    error_prefix = "Installation could not be verified"


class DownloadError(InstallerError):
    """Raised when an asset download fails."""

    error_prefix = "Download failed"


class CommandError(InstallerError):
    """Raised when an external command exits non-zero or cannot start."""

    error_prefix = "Command failed"

    def __init__(
        self, message: str, target: str | None = None, returncode: int = -1
    ) -> None:
        """Initialize with the command's return code."""
        super().__init__(message, target=target)
        self.returncode = returncode

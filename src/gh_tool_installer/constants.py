"""Centralized constants module for gh-tool-installer.

This module serves as the single source of truth for shared constants
across the codebase. Constants are organized by logical categories and use
typing.Final annotations to ensure immutability.

Usage:
    from gh_tool_installer.constants import DEFAULT_TOOL_NAME
"""

from typing import Final

# =============================================================================
# Target Constants
# =============================================================================

DEFAULT_OWNER: Final[str] = "clearclown"
DEFAULT_REPO: Final[str] = "aida-cli"
DEFAULT_TOOL_NAME: Final[str] = "orchestrobot"

# Conventional location of the buildable package inside the source tree
PACKAGE_SUBPATH_PARENT: Final[str] = "repos"
DEFAULT_PACKAGE_SUBPATH: Final[str] = (
    f"{PACKAGE_SUBPATH_PARENT}/{DEFAULT_TOOL_NAME}"
)

# =============================================================================
# Credential Constants
# =============================================================================

TOKEN_ENV_VAR: Final[str] = "GITHUB_TOKEN"

FINE_GRAINED_TOKEN_PREFIX: Final[str] = "github_pat_"
CLASSIC_TOKEN_PREFIX: Final[str] = "ghp_"

FINE_GRAINED_TOKEN_PATTERN: Final[str] = r"^github_pat_[A-Za-z0-9_]+$"
CLASSIC_TOKEN_PATTERN: Final[str] = r"^ghp_[A-Za-z0-9]+$"

# Only this many leading characters of a token may ever be logged
TOKEN_PREVIEW_LENGTH: Final[int] = 10

# =============================================================================
# Network Constants
# =============================================================================

GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_WEB_URL: Final[str] = "https://github.com"

HTTP_OK: Final[int] = 200
HTTP_NOT_FOUND: Final[int] = 404

DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3

# =============================================================================
# Build Constants
# =============================================================================

BUILD_TOOL: Final[str] = "cargo"
PACKAGE_MANIFEST: Final[str] = "Cargo.toml"
CARGO_NET_CONFIG_BLOCK: Final[str] = "[net]\ngit-fetch-with-cli = true\n"
CARGO_NET_CONFIG_MARKER: Final[str] = "git-fetch-with-cli"

SHELL_PROFILE_NAMES: Final[tuple[str, ...]] = (".bashrc", ".zshrc", ".profile")

# =============================================================================
# Configuration Constants
# =============================================================================

APP_NAME: Final[str] = "gh-tool-installer"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_ENV_VAR: Final[str] = "GH_TOOL_INSTALLER_CONFIG_DIR"
LOG_DIR_ENV_VAR: Final[str] = "GH_TOOL_INSTALLER_LOG_DIR"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_TARGET: Final[str] = "target"
SECTION_DIRECTORY: Final[str] = "directory"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

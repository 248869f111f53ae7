"""Process environment preparation performed before acquisition.

- a global git rule that rewrites GitHub URLs to carry the token, so
  clones and cargo git fetches authenticate transparently
- cargo told to fetch git dependencies with the git CLI
- PATH lines for the install directory in existing shell profiles

The cargo and profile edits are appends guarded by a content check, so
repeated runs leave the files unchanged.
"""

from pathlib import Path

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.constants import (
    CARGO_NET_CONFIG_BLOCK,
    CARGO_NET_CONFIG_MARKER,
)
from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.exceptions import CommandError
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


def append_once(path: Path, block: str, marker: str) -> bool:
    """Append a block to a file unless the marker is already present.

    Args:
        path: File to update (created when missing)
        block: Text to append
        marker: Substring whose presence means the block is already there

    Returns:
        True if the file was modified

    """
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if marker in existing:
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    separator = "\n" if existing and not existing.endswith("\n") else ""
    with path.open("a", encoding="utf-8") as f:
        f.write(f"{separator}{block}")
    return True


class EnvironmentSetup:
    """Configure git, cargo and shell profiles for the install."""

    def __init__(self, config: ResolverConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    async def apply(self, token: str) -> None:
        """Run every setup step.

        Args:
            token: Normalized, validated token

        """
        await self.configure_git_credentials(token)
        self.configure_cargo()
        self.configure_shell_path()

    async def configure_git_credentials(self, token: str) -> None:
        """Register the token-carrying URL rewrite with git."""
        web_url = self.config.web_url
        host = web_url.split("://", 1)[-1]
        rule = f"url.https://oauth2:{token}@{host}/.insteadOf"
        masked = f"url.https://oauth2:***@{host}/.insteadOf"
        try:
            await self.runner.check(
                ["git", "config", "--global", rule, f"{web_url}/"],
                display=f"git config --global {masked} {web_url}/",
            )
        except CommandError as e:
            logger.warning("Could not configure git credentials: %s", e)
            return
        logger.debug("Configured git credential rewrite for %s", host)

    def configure_cargo(self) -> None:
        """Make cargo fetch git sources through the git CLI."""
        cargo_config = self.config.cargo_config_file
        if append_once(
            cargo_config, CARGO_NET_CONFIG_BLOCK, CARGO_NET_CONFIG_MARKER
        ):
            logger.info("Updated %s", cargo_config)
        else:
            logger.debug("%s already configured", cargo_config)

    def configure_shell_path(self) -> None:
        """Add the install directory to PATH in existing shell profiles."""
        if self.config.install_dir_on_path:
            logger.debug("%s already on PATH", self.config.install_dir)
            return

        line = f'export PATH="{self.config.install_dir}:$PATH"\n'
        for profile in self.config.shell_profiles:
            if not profile.exists():
                continue
            if append_once(profile, line, line.strip()):
                logger.info(
                    "Added %s to PATH in %s", self.config.install_dir, profile
                )

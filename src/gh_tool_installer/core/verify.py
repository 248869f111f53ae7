"""Final gate: confirm the installed tool resolves and runs."""

import shutil
from pathlib import Path

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.exceptions import CommandError, InstallationUnverified
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class InstallationVerifier:
    """Locate the tool on the search path and report its version."""

    def __init__(self, config: ResolverConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    async def verify(self) -> tuple[Path, str | None]:
        """Verify the installation.

        Returns:
            Resolved binary path and its version output (None when the
            version could not be printed)

        Raises:
            InstallationUnverified: If the tool cannot be found

        """
        tool = self.config.tool_name
        resolved = shutil.which(tool, path=self.config.search_path)
        if resolved is None:
            raise InstallationUnverified(
                f"'{tool}' was not found on the executable search path",
                target=tool,
                hints=[f"Expected it in {self.config.install_dir}"],
            )

        binary_path = Path(resolved)
        logger.info("%s installed at %s", tool, binary_path)

        try:
            result = await self.runner.check([str(binary_path), "--version"])
        except CommandError as e:
            logger.warning("Could not determine %s version: %s", tool, e)
            return binary_path, None

        version_output = result.stdout.strip() or None
        if version_output:
            logger.info("%s", version_output)
        return binary_path, version_output

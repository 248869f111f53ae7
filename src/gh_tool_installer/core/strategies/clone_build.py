"""Clone the repository and build the located package."""

import tempfile
from pathlib import Path

from gh_tool_installer.core.build import CargoBuilder, locate_package
from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.core.strategies.base import (
    StrategyContext,
    StrategyResult,
)
from gh_tool_installer.exceptions import (
    BuildFailed,
    CommandError,
    PackageNotFound,
)
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class CloneBuildStrategy:
    """Shallow clone into a temporary directory, then build.

    The clone directory is removed on every exit path.
    """

    name = "clone and build"
    from_source = True

    def __init__(self, builder: CargoBuilder, runner: CommandRunner) -> None:
        self.builder = builder
        self.runner = runner

    async def attempt(self, context: StrategyContext) -> StrategyResult:
        config = context.config
        with tempfile.TemporaryDirectory(
            prefix="gh-tool-installer-src-"
        ) as tmp:
            source_root = Path(tmp)
            logger.info("Cloning %s...", config.clone_url)
            try:
                await self.runner.check(
                    [
                        "git",
                        "clone",
                        "--depth",
                        "1",
                        config.clone_url,
                        str(source_root),
                    ]
                )
            except CommandError as e:
                return StrategyResult.failure(
                    BuildFailed(f"clone failed: {e}", config.tool_name)
                )

            try:
                package_dir = locate_package(
                    source_root, config.package_subpath, config.tool_name
                )
            except PackageNotFound as e:
                return StrategyResult.failure(e)

            logger.info("Installing %s...", config.tool_name)
            try:
                binary_path = await self.builder.install_from_path(package_dir)
            except CommandError as e:
                return StrategyResult.failure(
                    BuildFailed(f"build failed: {e}", config.tool_name)
                )

        return StrategyResult.success(binary_path)

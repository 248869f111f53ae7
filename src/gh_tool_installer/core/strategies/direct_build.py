"""Build the tool directly from the remote repository."""

import tempfile
from pathlib import Path

from gh_tool_installer.core.build import CargoBuilder
from gh_tool_installer.core.strategies.base import (
    StrategyContext,
    StrategyResult,
)
from gh_tool_installer.exceptions import BuildFailed, CommandError
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class DirectBuildStrategy:
    """``cargo install --git`` with a private target directory."""

    name = "direct build"
    from_source = True

    def __init__(self, builder: CargoBuilder) -> None:
        self.builder = builder

    async def attempt(self, context: StrategyContext) -> StrategyResult:
        config = context.config
        logger.info(
            "Building %s from %s...", config.tool_name, config.clone_url
        )
        with tempfile.TemporaryDirectory(
            prefix="gh-tool-installer-target-"
        ) as tmp:
            try:
                binary_path = await self.builder.install_from_git(Path(tmp))
            except CommandError as e:
                return StrategyResult.failure(
                    BuildFailed(f"direct build failed: {e}", config.tool_name)
                )
        return StrategyResult.success(binary_path)

"""Install a prebuilt binary attached to the latest release."""

import tempfile
from pathlib import Path

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.core.candidates import generate_candidates
from gh_tool_installer.core.download import DownloadService
from gh_tool_installer.core.file_ops import FileOperations
from gh_tool_installer.core.github import Asset
from gh_tool_installer.core.strategies.base import (
    StrategyContext,
    StrategyResult,
)
from gh_tool_installer.exceptions import DownloadError, NoBinaryMatch
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class ReleaseAssetStrategy:
    """Match candidate filename patterns against release assets.

    Candidates are tried in priority order and the first asset that
    downloads and installs wins. A matched asset that fails to download
    is skipped and the next candidate is consulted.
    """

    name = "release asset"
    from_source = False

    def __init__(self, downloader: DownloadService) -> None:
        self.downloader = downloader

    async def attempt(self, context: StrategyContext) -> StrategyResult:
        release = context.release
        config = context.config

        if release is None:
            return StrategyResult.failure(
                NoBinaryMatch("no release to download from", config.tool_name)
            )
        if not context.platform.is_supported:
            return StrategyResult.failure(
                NoBinaryMatch(
                    f"no prebuilt binaries for platform {context.platform}",
                    config.tool_name,
                )
            )

        candidates = generate_candidates(
            config.tool_name, context.platform, release.tag_name
        )
        failed: dict[str, str] = {}
        for pattern in candidates:
            logger.debug("Trying pattern: %s", pattern)
            asset = release.find_asset(pattern)
            if asset is None or asset.name in failed:
                continue

            logger.info("Downloading release asset %s...", asset.name)
            try:
                binary_path = await self._install(asset, config)
            except (DownloadError, OSError) as e:
                logger.warning(
                    "Could not install asset %s: %s; trying next candidate",
                    asset.name,
                    e,
                )
                failed[asset.name] = str(e)
                continue
            logger.info(
                "Installed %s from release %s", binary_path, release.tag_name
            )
            return StrategyResult.success(binary_path)

        if failed:
            reasons = "; ".join(
                f"{name}: {reason}" for name, reason in failed.items()
            )
            return StrategyResult.failure(
                NoBinaryMatch(
                    f"every matching asset in {release.tag_name} failed "
                    f"to install ({reasons})",
                    config.tool_name,
                )
            )

        available = ", ".join(release.asset_names) or "none"
        logger.info("Available assets in %s: %s", release.tag_name, available)
        return StrategyResult.failure(
            NoBinaryMatch(
                f"no asset in {release.tag_name} matches "
                f"{context.platform} (available: {available})",
                config.tool_name,
            )
        )

    async def _install(self, asset: Asset, config: ResolverConfig) -> Path:
        file_ops = FileOperations(config.install_dir)
        with tempfile.TemporaryDirectory(prefix="gh-tool-installer-") as tmp:
            downloaded = await self.downloader.download_asset(
                asset, Path(tmp) / asset.name
            )
            file_ops.make_executable(downloaded)
            return file_ops.move_to_install_dir(downloaded, config.tool_name)

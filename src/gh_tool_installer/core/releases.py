"""Latest release discovery."""

import aiohttp

from gh_tool_installer.core.github import GitHubAPIClient, Release
from gh_tool_installer.exceptions import NoReleaseFound
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class ReleaseResolver:
    """Look up the latest published release of the target repository."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    async def resolve(self) -> Release | None:
        """Return the latest release, or None when there is none.

        A missing release is a normal state that routes straight to the
        source build, so lookup errors are logged and reported as None.

        Returns:
            Latest release with its assets, or None

        """
        repository = self.client.config.repository
        logger.info("Looking up latest release of %s...", repository)
        try:
            api_data = await self.client.fetch_latest_release()
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning("%s", NoReleaseFound(str(e), target=repository))
            return None

        release = Release.from_api_response(api_data) if api_data else None
        if release is None:
            logger.info(
                "%s",
                NoReleaseFound("no published release", target=repository),
            )
            return None

        logger.info(
            "Latest release: %s (%d assets)",
            release.tag_name,
            len(release.assets),
        )
        for name in release.asset_names:
            logger.debug("  asset: %s", name)
        return release

"""Low-level GitHub API client for HTTP communication.

Every call is a single authoritative request: authorization and access
probes must not be retried, and a missing release is a legitimate answer.
"""

from typing import Any

import aiohttp
import orjson

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.constants import HTTP_OK
from gh_tool_installer.core.auth import GitHubAuthManager
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)

# Status reported when no HTTP response was received at all
NO_RESPONSE_STATUS = 0


class GitHubAPIClient:
    """Handles direct communication with the GitHub REST API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: ResolverConfig,
        auth_manager: GitHubAuthManager,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            config: Resolver configuration (API base URL, repository)
            auth_manager: GitHub authentication manager

        """
        self.session = session
        self.config = config
        self.auth_manager = auth_manager

    @property
    def repo_url(self) -> str:
        """Return the API URL of the target repository."""
        return (
            f"{self.config.api_url}/repos/"
            f"{self.config.owner}/{self.config.repo}"
        )

    async def get_status(self, url: str) -> int:
        """Return the HTTP status of an authenticated GET request.

        Args:
            url: API URL to probe

        Returns:
            HTTP status code, or 0 when the request failed in transport

        """
        headers = self.auth_manager.apply_auth({})
        try:
            async with self.session.get(url, headers=headers) as response:
                self.auth_manager.update_rate_limit_info(
                    dict(response.headers)
                )
                return response.status
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning("Request to %s failed: %s", url, e)
            return NO_RESPONSE_STATUS

    async def check_identity(self) -> int:
        """Probe the authenticated user endpoint."""
        return await self.get_status(f"{self.config.api_url}/user")

    async def check_repository(self) -> int:
        """Probe the target repository endpoint."""
        return await self.get_status(self.repo_url)

    async def fetch_latest_release(self) -> dict[str, Any] | None:
        """Fetch the latest published release.

        Returns:
            Release data dict, or None when the API has no latest release

        Raises:
            aiohttp.ClientError: On transport or decoding failure
            TimeoutError: When the request times out

        """
        url = f"{self.repo_url}/releases/latest"
        headers = self.auth_manager.apply_auth({})

        async with self.session.get(url, headers=headers) as response:
            self.auth_manager.update_rate_limit_info(dict(response.headers))
            if response.status != HTTP_OK:
                logger.debug(
                    "Latest release request returned status %s",
                    response.status,
                )
                return None

            data = await response.json(loads=orjson.loads)

        if not isinstance(data, dict):
            logger.warning(
                "Unexpected API response type for latest release: %s",
                type(data),
            )
            return None

        return data

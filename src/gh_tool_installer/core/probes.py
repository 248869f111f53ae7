"""Authorization and repository access probes.

Both probes run once; any failure aborts the installation because
nothing further can succeed without an authorized, reachable repository.
"""

from gh_tool_installer.constants import HTTP_NOT_FOUND, HTTP_OK
from gh_tool_installer.core.github import GitHubAPIClient
from gh_tool_installer.exceptions import (
    AuthenticationFailed,
    ResourceAccessError,
    ResourceNotFound,
)
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class AuthProbe:
    """Confirm the token authenticates against the GitHub API."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    async def run(self) -> None:
        """Check the identity endpoint.

        Raises:
            AuthenticationFailed: If the API does not answer 200

        """
        logger.info("Testing GitHub API access...")
        status = await self.client.check_identity()
        if status != HTTP_OK:
            if self.client.auth_manager.is_rate_limited():
                logger.warning(
                    "GitHub API rate limit exhausted (resets in %s s)",
                    self.client.auth_manager.get_reset_in_seconds(),
                )
            raise AuthenticationFailed(status)
        logger.info("GitHub API access successful")


class ResourceAccessChecker:
    """Confirm the target repository is visible to the token."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    async def run(self) -> None:
        """Check the repository endpoint.

        Raises:
            ResourceNotFound: On 404
            ResourceAccessError: On any other non-200 status

        """
        repository = self.client.config.repository
        logger.info("Checking repository access...")
        status = await self.client.check_repository()
        if status == HTTP_NOT_FOUND:
            raise ResourceNotFound(repository)
        if status != HTTP_OK:
            raise ResourceAccessError(repository, status)
        logger.info("Repository access confirmed")

"""GitHub authentication and rate limit tracking.

Applies the validated token to outgoing requests and remembers the
rate-limit headers of the last API response so failures can be explained.
"""

import time

from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


class GitHubAuthManager:
    """Apply authentication headers and track rate-limit state."""

    def __init__(self, token: str) -> None:
        """Initialize the auth manager with a normalized token.

        Args:
            token: Token that already passed validate_github_token()

        """
        self._token = token
        self._rate_limit_reset: int | None = None
        self._remaining_requests: int | None = None

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply GitHub authentication to the given request headers.

        Args:
            headers: HTTP headers to update.

        Returns:
            Headers with the Authorization header set.

        """
        headers["Authorization"] = f"token {self._token}"
        return headers

    def update_rate_limit_info(self, headers: dict[str, str]) -> None:
        """Update rate-limit information from GitHub response headers.

        Args:
            headers: Response headers from a GitHub API call.

        """
        if "X-RateLimit-Remaining" not in headers:
            return
        try:
            self._remaining_requests = int(headers["X-RateLimit-Remaining"])
            self._rate_limit_reset = int(headers.get("X-RateLimit-Reset", 0))
        except (ValueError, TypeError):
            # Security: Don't expose header values in error messages
            logger.warning("Invalid rate limit headers received")

    def is_rate_limited(self) -> bool:
        """Return whether the last response reported an exhausted quota."""
        return self._remaining_requests == 0

    def get_reset_in_seconds(self) -> int | None:
        """Return seconds until the quota resets, None when unknown."""
        if not self._rate_limit_reset:
            return None
        return max(self._rate_limit_reset - int(time.time()), 0)

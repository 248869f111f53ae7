"""Download service for release assets.

Assets are fetched through their API URL with
``Accept: application/octet-stream`` so that private-repository assets
authenticate with the token. Partial files are removed after a failed
attempt.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import aiofiles
import aiohttp

from gh_tool_installer.constants import DEFAULT_RETRY_ATTEMPTS
from gh_tool_installer.core.auth import GitHubAuthManager
from gh_tool_installer.core.github import Asset
from gh_tool_installer.exceptions import DownloadError
from gh_tool_installer.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

CHUNK_SIZE = 8192


class DownloadService:
    """Service for downloading release assets to disk."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            auth_manager: GitHub authentication manager
            retry_attempts: Attempts per download before giving up

        """
        self.session = session
        self.auth_manager = auth_manager
        self.retry_attempts = max(retry_attempts, 1)

    async def download_asset(self, asset: Asset, dest: Path) -> Path:
        """Download a release asset.

        Args:
            asset: Release asset to fetch
            dest: Destination path

        Returns:
            Path to the downloaded file

        Raises:
            DownloadError: If download fails after all retry attempts

        """
        await self.download_file(asset.download_url, dest)
        return dest

    async def download_file(self, url: str, dest: Path) -> None:
        """Download a file from URL to destination with retry logic.

        Args:
            url: URL to download from
            dest: Destination path

        Raises:
            DownloadError: If download fails after all retry attempts

        """

        def cleanup() -> None:
            if dest.exists():
                logger.debug("Removing partial download: %s", dest)
                with contextlib.suppress(OSError):
                    dest.unlink()

        async def process(response: aiohttp.ClientResponse) -> None:
            total = int(response.headers.get("Content-Length", 0))
            dest.parent.mkdir(parents=True, exist_ok=True)

            logger.debug("Downloading file: %s", dest.name)
            logger.debug(
                "   Size: %s bytes" if total > 0 else "   Size: Unknown",
                f"{total:,}" if total > 0 else "",
            )

            async with aiofiles.open(dest, mode="wb") as f:
                async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                    if chunk:
                        await f.write(chunk)

            logger.debug("Download completed: %s", dest)

        await self._make_request_with_retry(
            url, process, dest.name, cleanup_callback=cleanup
        )

    async def _make_request_with_retry(
        self,
        url: str,
        process_callback: Callable[[aiohttp.ClientResponse], Awaitable[T]],
        description: str,
        cleanup_callback: Callable[[], None] | None = None,
    ) -> T:
        """Make HTTP request with retry logic."""
        headers = self.auth_manager.apply_auth(
            {"Accept": "application/octet-stream"}
        )

        for attempt in range(1, self.retry_attempts + 1):
            try:
                async with self.session.get(url, headers=headers) as response:
                    response.raise_for_status()
                    return await process_callback(response)

            except (aiohttp.ClientError, TimeoutError) as e:
                logger.warning(
                    "Attempt %s/%s failed for %s: %s",
                    attempt,
                    self.retry_attempts,
                    description,
                    e,
                )

                if cleanup_callback:
                    cleanup_callback()

                if attempt == self.retry_attempts:
                    msg = f"{description} failed after {attempt} attempts"
                    raise DownloadError(msg) from e

                backoff = 2**attempt
                logger.info("Retrying in %s seconds...", backoff)
                await asyncio.sleep(backoff)
            except OSError as e:
                if cleanup_callback:
                    cleanup_callback()
                msg = f"Failed to write {description}: {e}"
                raise DownloadError(msg) from e

        msg = f"Failed to download {description}"
        raise DownloadError(msg)

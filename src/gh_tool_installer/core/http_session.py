"""HTTP session utilities for gh-tool-installer."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from gh_tool_installer.config import ResolverConfig


@asynccontextmanager
async def create_http_session(
    config: ResolverConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        config: Resolver configuration supplying the base timeout

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=config.timeout_seconds * 60,
        sock_read=config.timeout_seconds * 3,
        sock_connect=config.timeout_seconds,
    )
    connector = aiohttp.TCPConnector(limit=4, limit_per_host=2)

    async with aiohttp.ClientSession(
        timeout=timeout,
        connector=connector,
        headers={"Accept": "application/vnd.github+json"},
    ) as session:
        yield session

"""GitHub asset model."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Any


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        size: Asset size in bytes
        id: Numeric asset id
        url: API URL; serves the file with Accept: application/octet-stream
        browser_download_url: Public download URL for the asset

    """

    name: str
    size: int
    id: int
    url: str
    browser_download_url: str

    @classmethod
    def from_api_response(cls, asset_data: dict[str, Any]) -> Asset | None:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance or None if required fields are missing

        """
        try:
            name = asset_data.get("name", "")
            url = asset_data.get("url", "")
            browser_url = asset_data.get("browser_download_url", "")

            if not name or not (url or browser_url):
                return None

            return cls(
                name=name,
                size=int(asset_data.get("size", 0)),
                id=int(asset_data.get("id", 0)),
                url=url,
                browser_download_url=browser_url,
            )
        except (KeyError, TypeError, ValueError, AttributeError):
            return None

    def matches(self, pattern: str) -> bool:
        """Return whether the asset name matches a glob pattern."""
        return fnmatchcase(self.name, pattern)

    @property
    def download_url(self) -> str:
        """Return the URL the downloader should request."""
        return self.url or self.browser_download_url

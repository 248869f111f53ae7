"""GitHub release model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gh_tool_installer.core.github.models.asset import Asset


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its assets.

    Attributes:
        tag_name: Tag the release was published under
        name: Human readable release title
        assets: Release assets in API order

    """

    tag_name: str
    name: str = ""
    assets: tuple[Asset, ...] = field(default_factory=tuple)

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> Release | None:
        """Create Release from GitHub API response data.

        Args:
            api_data: Raw release data from GitHub API

        Returns:
            Release instance, or None when the payload has no tag

        """
        tag_name = api_data.get("tag_name") or ""
        if not tag_name:
            return None

        assets = []
        for asset_data in api_data.get("assets") or []:
            if not isinstance(asset_data, dict):
                continue
            asset = Asset.from_api_response(asset_data)
            if asset:
                assets.append(asset)

        return cls(
            tag_name=tag_name,
            name=api_data.get("name") or "",
            assets=tuple(assets),
        )

    @property
    def asset_names(self) -> list[str]:
        """Return the names of all assets, in order."""
        return [asset.name for asset in self.assets]

    def find_asset(self, pattern: str) -> Asset | None:
        """Return the first asset matching a glob pattern."""
        for asset in self.assets:
            if asset.matches(pattern):
                return asset
        return None

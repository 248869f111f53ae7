"""GitHub infrastructure: API client and release models."""

from gh_tool_installer.core.github.client import GitHubAPIClient
from gh_tool_installer.core.github.models import Asset, Release

__all__ = ["Asset", "GitHubAPIClient", "Release"]

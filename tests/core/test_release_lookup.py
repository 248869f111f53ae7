"""Tests for latest release discovery and the release models."""

import aiohttp
import pytest

from gh_tool_installer.core.auth import GitHubAuthManager
from gh_tool_installer.core.github import GitHubAPIClient, Release
from gh_tool_installer.core.releases import ReleaseResolver
from tests.fakes import (
    API,
    VALID_CLASSIC_TOKEN,
    FakeResponse,
    FakeSession,
    release_payload,
)

LATEST_URL = f"{API}/repos/acme/tool-repo/releases/latest"


def make_resolver(make_config, session) -> ReleaseResolver:
    client = GitHubAPIClient(
        session, make_config(), GitHubAuthManager(VALID_CLASSIC_TOKEN)
    )
    return ReleaseResolver(client)


@pytest.mark.asyncio
async def test_latest_release_with_assets(make_config) -> None:
    """The tag and the ordered assets are returned."""
    session = FakeSession(
        {
            LATEST_URL: FakeResponse(
                200,
                payload=release_payload(
                    "v1.2.0", ["tool-linux-x86_64", "tool-generic"]
                ),
            )
        }
    )

    release = await make_resolver(make_config, session).resolve()

    assert release is not None
    assert release.tag_name == "v1.2.0"
    assert release.asset_names == ["tool-linux-x86_64", "tool-generic"]
    assert release.assets[0].download_url.endswith("/releases/assets/1")


@pytest.mark.asyncio
async def test_no_release_is_not_an_error(make_config) -> None:
    """A 404 from releases/latest yields None."""
    session = FakeSession({LATEST_URL: FakeResponse(404)})
    assert await make_resolver(make_config, session).resolve() is None


@pytest.mark.asyncio
async def test_lookup_error_yields_none(make_config) -> None:
    """Transport failures during lookup route to the fallback, not abort."""

    class BrokenSession(FakeSession):
        def get(self, url, headers=None, **kwargs):
            raise aiohttp.ClientConnectionError("reset by peer")

    assert await make_resolver(make_config, BrokenSession()).resolve() is None


@pytest.mark.asyncio
async def test_unexpected_payload_yields_none(make_config) -> None:
    """A non-object JSON body is treated as no release."""
    session = FakeSession({LATEST_URL: FakeResponse(200, payload=[1, 2])})
    assert await make_resolver(make_config, session).resolve() is None


def test_release_without_tag_is_ignored() -> None:
    """A payload with no tag name does not produce a Release."""
    assert Release.from_api_response({"assets": []}) is None


def test_malformed_assets_are_skipped() -> None:
    """Assets missing a name or URL are dropped."""
    release = Release.from_api_response(
        {
            "tag_name": "v1",
            "assets": [
                {"name": "", "url": "x"},
                {"name": "tool", "size": "not-a-number", "url": "x"},
                "junk",
                {"name": "tool-linux-x86_64", "url": "u", "size": 3, "id": 7},
            ],
        }
    )
    assert release is not None
    assert release.asset_names == ["tool-linux-x86_64"]


def test_find_asset_uses_glob_patterns() -> None:
    """find_asset returns the first asset matching a pattern."""
    release = Release.from_api_response(
        release_payload("v2", ["tool-a", "tool-b.tar.gz"])
    )
    assert release is not None
    assert release.find_asset("tool-b*").name == "tool-b.tar.gz"
    assert release.find_asset("tool-c") is None

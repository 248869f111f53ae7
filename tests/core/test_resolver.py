"""End-to-end tests for the installation pipeline with fake I/O."""

import pytest

from gh_tool_installer.core import InstallResolver, InstallStatus
from gh_tool_installer.exceptions import (
    AuthenticationFailed,
    InstallationUnverified,
    InvalidCredentialFormat,
    PackageNotFound,
    ResourceAccessError,
    ResourceNotFound,
)
from tests.fakes import (
    API,
    VALID_CLASSIC_TOKEN,
    FakeResponse,
    FakeRunner,
    FakeSession,
    failed,
    install_fake_binary,
    ok,
    release_payload,
)

USER_URL = f"{API}/user"
REPO_URL = f"{API}/repos/acme/tool-repo"
LATEST_URL = f"{REPO_URL}/releases/latest"
ASSET_1 = f"{REPO_URL}/releases/assets/1"


def healthy_routes(**extra: FakeResponse) -> dict[str, FakeResponse]:
    routes = {
        USER_URL: FakeResponse(200, payload={"login": "octocat"}),
        REPO_URL: FakeResponse(200, payload={"full_name": "acme/tool-repo"}),
    }
    routes.update(extra)
    return routes


def version_handler(args, cwd):
    if args[-1] == "--version":
        return ok("tool 1.2.0\n")
    return None


@pytest.mark.asyncio
async def test_absent_token_skips_without_side_effects(
    make_config, linux_x86_64, caplog
):
    """No token means exit 0, no requests and no files written."""
    config = make_config(token=None)
    session = FakeSession()
    runner = FakeRunner()

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=runner
    ).run()

    assert outcome.status is InstallStatus.SKIPPED
    assert outcome.exit_code == 0
    assert session.requested == []
    assert runner.calls == []
    assert list(config.home.iterdir()) == []
    assert not config.install_root.exists()
    assert "GITHUB_TOKEN not set" in caplog.text


@pytest.mark.asyncio
async def test_malformed_token_fails_before_network(
    make_config, linux_x86_64, caplog
):
    """A malformed token fails with no request made."""
    config = make_config(token="foo_123")
    session = FakeSession()

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=FakeRunner()
    ).run()

    assert outcome.status is InstallStatus.FAILED
    assert outcome.exit_code == 1
    assert isinstance(outcome.error, InvalidCredentialFormat)
    assert session.requested == []
    assert "github_pat_" in caplog.text
    assert "ghp_" in caplog.text


@pytest.mark.asyncio
async def test_unauthorized_token_stops_after_identity_check(
    make_config, linux_x86_64
):
    """A 401 from /user aborts before any repository or release call."""
    config = make_config()
    session = FakeSession({USER_URL: FakeResponse(401)})
    runner = FakeRunner()

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=runner
    ).run()

    assert outcome.exit_code == 1
    assert isinstance(outcome.error, AuthenticationFailed)
    assert outcome.error.status == 401
    assert session.requested == [USER_URL]
    assert runner.calls == []


@pytest.mark.asyncio
async def test_missing_repository(make_config, linux_x86_64, caplog):
    """A 404 repository check is fatal and lists the usual causes."""
    config = make_config()
    session = FakeSession({USER_URL: FakeResponse(200)})

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=FakeRunner()
    ).run()

    assert isinstance(outcome.error, ResourceNotFound)
    assert session.requested == [USER_URL, REPO_URL]
    assert "acme/tool-repo" in caplog.text
    assert "repo' scope" in caplog.text


@pytest.mark.asyncio
async def test_repository_server_error(make_config, linux_x86_64):
    """Any other non-200 repository status is an access error."""
    config = make_config()
    session = FakeSession(
        {USER_URL: FakeResponse(200), REPO_URL: FakeResponse(500)}
    )

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=FakeRunner()
    ).run()

    assert isinstance(outcome.error, ResourceAccessError)
    assert outcome.error.status == 500
    assert LATEST_URL not in session.requested


@pytest.mark.asyncio
async def test_release_asset_install(make_config, linux_x86_64, caplog):
    """A matching release asset is installed and verified."""
    config = make_config()
    session = FakeSession(
        healthy_routes(
            **{
                LATEST_URL: FakeResponse(
                    200,
                    payload=release_payload(
                        "v1.2.0", ["tool-linux-x86_64", "tool-macos"]
                    ),
                ),
                ASSET_1: FakeResponse(200, body=b"\x7fELF binary"),
            }
        )
    )
    runner = FakeRunner(version_handler)

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=runner
    ).run()

    assert outcome.status is InstallStatus.ACQUIRED_FROM_RELEASE
    assert outcome.exit_code == 0
    assert outcome.binary_path == config.installed_binary
    assert outcome.version_output == "tool 1.2.0"
    assert config.installed_binary.read_bytes() == b"\x7fELF binary"
    assert not any(args[0] == "cargo" for args in runner.calls)
    assert "git-fetch-with-cli" in config.cargo_config_file.read_text()
    assert VALID_CLASSIC_TOKEN not in caplog.text


@pytest.mark.asyncio
async def test_no_matching_asset_falls_back_to_direct_build(
    make_config, linux_x86_64
):
    """Without a matching asset the tool is built from the repository."""
    config = make_config()
    session = FakeSession(
        healthy_routes(
            **{
                LATEST_URL: FakeResponse(
                    200, payload=release_payload("v1.2.0", ["tool.msi"])
                )
            }
        )
    )

    def handler(args, cwd):
        if args[:3] == ["cargo", "install", "--git"]:
            install_fake_binary(config.install_dir, "tool")
            return None
        return version_handler(args, cwd)

    runner = FakeRunner(handler)

    outcome = await InstallResolver(
        config, session=session, platform=linux_x86_64, runner=runner
    ).run()

    assert outcome.status is InstallStatus.BUILT_FROM_SOURCE
    assert outcome.exit_code == 0
    assert ASSET_1 not in session.requested
    assert not any(args[:2] == ["git", "clone"] for args in runner.calls)


@pytest.mark.asyncio
async def test_missing_release_goes_straight_to_builds(
    make_config, linux_x86_64
):
    """A 404 latest release is not an error; source builds run."""
    config = make_config()
    session = FakeSession(healthy_routes())

    def handler(args, cwd):
        if args[:2] == ["cargo", "install"]:
            install_fake_binary(config.install_dir, "tool")
        return version_handler(args, cwd)

    outcome = await InstallResolver(
        config,
        session=session,
        platform=linux_x86_64,
        runner=FakeRunner(handler),
        setup_environment=False,
    ).run()

    assert outcome.status is InstallStatus.BUILT_FROM_SOURCE
    assert LATEST_URL in session.requested
    assert not config.cargo_config_file.exists()


@pytest.mark.asyncio
async def test_every_strategy_failing_reports_package_not_found(
    make_config, linux_x86_64, caplog
):
    """Direct build failure plus an empty clone is PackageNotFound."""
    config = make_config()
    session = FakeSession(healthy_routes())

    def handler(args, cwd):
        if args[:3] == ["cargo", "install", "--git"]:
            return failed("could not find `tool` in the repository")
        return None

    runner = FakeRunner(handler)

    outcome = await InstallResolver(
        config,
        session=session,
        platform=linux_x86_64,
        runner=runner,
        setup_environment=False,
    ).run()

    assert outcome.exit_code == 1
    assert isinstance(outcome.error, PackageNotFound)
    assert any(args[:2] == ["git", "clone"] for args in runner.calls)
    assert "direct build" in caplog.text


@pytest.mark.asyncio
async def test_unverifiable_install_fails(make_config, linux_x86_64):
    """A build that leaves no binary behind fails verification."""
    config = make_config()
    session = FakeSession(healthy_routes())

    outcome = await InstallResolver(
        config,
        session=session,
        platform=linux_x86_64,
        runner=FakeRunner(),
        setup_environment=False,
    ).run()

    assert outcome.exit_code == 1
    assert isinstance(outcome.error, InstallationUnverified)

"""Tests for the installation verifier."""

import pytest

from gh_tool_installer.core.verify import InstallationVerifier
from gh_tool_installer.exceptions import InstallationUnverified
from tests.fakes import FakeRunner, failed, install_fake_binary, ok


@pytest.mark.asyncio
async def test_verify_reports_path_and_version(make_config) -> None:
    """The binary is found in the install dir and its version read."""
    config = make_config()
    binary = install_fake_binary(config.install_dir, "tool")
    runner = FakeRunner(lambda args, cwd: ok("tool 1.2.0\n"))

    path, version = await InstallationVerifier(config, runner).verify()

    assert path == binary
    assert version == "tool 1.2.0"
    assert runner.calls == [[str(binary), "--version"]]


@pytest.mark.asyncio
async def test_verify_missing_binary(make_config) -> None:
    """A tool that cannot be found is InstallationUnverified."""
    config = make_config()
    runner = FakeRunner()

    with pytest.raises(InstallationUnverified) as exc_info:
        await InstallationVerifier(config, runner).verify()

    assert str(config.install_dir) in exc_info.value.hints[0]
    assert runner.calls == []


@pytest.mark.asyncio
async def test_version_failure_is_not_fatal(make_config, caplog) -> None:
    """A failing --version still counts as installed."""
    config = make_config()
    binary = install_fake_binary(config.install_dir, "tool")
    runner = FakeRunner(lambda args, cwd: failed("unknown flag"))

    path, version = await InstallationVerifier(config, runner).verify()

    assert path == binary
    assert version is None
    assert "Could not determine tool version" in caplog.text

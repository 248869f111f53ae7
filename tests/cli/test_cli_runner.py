"""Tests for the CLI parser and runner."""

import pytest

from gh_tool_installer.cli import CLIRunner, runner
from gh_tool_installer.cli.parser import CLIParser
from gh_tool_installer.core import InstallOutcome, InstallStatus


@pytest.fixture
def environ(tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    return {"HOME": str(home), "PATH": "/usr/bin"}


@pytest.fixture
def fake_resolver(monkeypatch):
    """Replace the resolver with one that records how it was built."""
    created = {}

    class DummyResolver:
        status = InstallStatus.ACQUIRED_FROM_RELEASE

        def __init__(self, config, setup_environment=True):
            created["config"] = config
            created["setup_environment"] = setup_environment

        async def run(self):
            return InstallOutcome(status=DummyResolver.status)

    monkeypatch.setattr(runner, "InstallResolver", DummyResolver)
    return created, DummyResolver


def test_parser_defaults() -> None:
    args = CLIParser().parse_args([])
    assert args.owner is None
    assert args.tool is None
    assert not args.skip_environment_setup
    assert not args.debug


def test_cli_overrides_settings(environ, tmp_path) -> None:
    """Flags win over settings and compiled defaults."""
    args = CLIParser().parse_args(
        [
            "--owner",
            "acme",
            "--tool",
            "widget",
            "--package-subpath",
            "crates/widget",
            "--install-root",
            str(tmp_path / "opt"),
            "--debug",
        ]
    )

    config = CLIRunner(environ).build_config(args)

    assert config.owner == "acme"
    assert config.tool_name == "widget"
    assert config.package_subpath == "crates/widget"
    assert config.install_dir == (tmp_path / "opt").resolve() / "bin"
    assert config.console_log_level == "DEBUG"
    assert config.repo == "aida-cli"


@pytest.mark.asyncio
async def test_run_returns_outcome_exit_code(environ, fake_resolver) -> None:
    created, resolver_cls = fake_resolver

    assert await CLIRunner(environ).run([]) == 0
    assert created["setup_environment"] is True

    resolver_cls.status = InstallStatus.FAILED
    assert await CLIRunner(environ).run(["--skip-environment-setup"]) == 1
    assert created["setup_environment"] is False


@pytest.mark.asyncio
async def test_skipped_run_exits_zero(environ, fake_resolver) -> None:
    _, resolver_cls = fake_resolver
    resolver_cls.status = InstallStatus.SKIPPED
    assert await CLIRunner(environ).run([]) == 0


@pytest.mark.asyncio
async def test_version_flag(environ, fake_resolver) -> None:
    created, _ = fake_resolver
    assert await CLIRunner(environ).run(["--version"]) == 0
    assert "config" not in created


def test_tool_flag_derives_package_subpath(environ) -> None:
    """--tool alone points the subpath at repos/<tool>."""
    args = CLIParser().parse_args(["--tool", "widget"])

    config = CLIRunner(environ).build_config(args)

    assert config.tool_name == "widget"
    assert config.package_subpath == "repos/widget"


def test_explicit_subpath_wins_over_derived(environ) -> None:
    args = CLIParser().parse_args(
        ["--tool", "widget", "--package-subpath", "crates/widget"]
    )
    config = CLIRunner(environ).build_config(args)
    assert config.package_subpath == "crates/widget"

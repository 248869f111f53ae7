"""Pytest configuration and fixtures for gh-tool-installer tests."""

import logging
import os
import tempfile
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

import pytest

# Keep test logs out of the user's home; must happen before any
# gh_tool_installer module creates its logger.
os.environ.setdefault(
    "GH_TOOL_INSTALLER_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "gh-tool-installer-test-logs"),
)

from gh_tool_installer.config import ResolverConfig  # noqa: E402
from gh_tool_installer.core.platform import PlatformDescriptor  # noqa: E402
from tests.fakes import VALID_CLASSIC_TOKEN  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so pytest's caplog sees our records.

    The gh_tool_installer root logger has propagate=False in production.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gh_tool_installer"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ResolverConfig]:
    """Return a factory for isolated resolver configurations."""
    home = tmp_path / "home"
    home.mkdir()

    def factory(**overrides: object) -> ResolverConfig:
        config = ResolverConfig(
            token=VALID_CLASSIC_TOKEN,
            home=home,
            install_root=tmp_path / "local",
            path_entries=(),
            owner="acme",
            repo="tool-repo",
            tool_name="tool",
            package_subpath="repos/tool",
            retry_attempts=1,
        )
        return replace(config, **overrides)

    return factory


@pytest.fixture
def linux_x86_64() -> PlatformDescriptor:
    """Linux on x86_64."""
    return PlatformDescriptor.from_values("Linux", "x86_64")

"""Source build helpers: package discovery and cargo invocations."""

import os
import tomllib
from pathlib import Path

from gh_tool_installer.config import ResolverConfig
from gh_tool_installer.constants import BUILD_TOOL, PACKAGE_MANIFEST
from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.exceptions import PackageNotFound
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


def read_package_name(manifest: Path) -> str | None:
    """Return ``[package].name`` from a Cargo manifest, if declared."""
    try:
        with manifest.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", manifest, e)
        return None

    package = data.get("package")
    if not isinstance(package, dict):
        return None
    name = package.get("name")
    return name if isinstance(name, str) else None


def locate_package(source_root: Path, package_subpath: str, tool: str) -> Path:
    """Find the buildable package inside a source checkout.

    Checks the conventional subpath first, then a root manifest whose
    package name equals the tool name.

    Args:
        source_root: Root of the cloned repository
        package_subpath: Conventional package location
        tool: Canonical tool name

    Returns:
        Directory containing the package manifest

    Raises:
        PackageNotFound: If neither location holds the package

    """
    conventional = source_root / package_subpath
    if (conventional / PACKAGE_MANIFEST).is_file():
        logger.info("Found package at %s", package_subpath)
        return conventional

    root_manifest = source_root / PACKAGE_MANIFEST
    if root_manifest.is_file() and read_package_name(root_manifest) == tool:
        logger.info("Found package '%s' at repository root", tool)
        return source_root

    raise PackageNotFound(
        f"no {PACKAGE_MANIFEST} at '{package_subpath}' and no root "
        f"package named '{tool}'",
        target=tool,
        hints=[
            f"Checked {package_subpath}/{PACKAGE_MANIFEST}",
            f"Checked {PACKAGE_MANIFEST} at the repository root",
        ],
    )


class CargoBuilder:
    """Build and install the tool with ``cargo install``."""

    def __init__(self, config: ResolverConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    def _env(self, target_dir: Path | None = None) -> dict[str, str]:
        env = dict(os.environ)
        env["PATH"] = self.config.search_path
        if target_dir is not None:
            env["CARGO_TARGET_DIR"] = str(target_dir)
        return env

    async def install_from_git(self, target_dir: Path) -> Path:
        """Build straight from the remote repository.

        Args:
            target_dir: Private build directory, isolating the ambient cache

        Returns:
            Path of the installed binary

        Raises:
            CommandError: If cargo fails

        """
        await self.runner.check(
            [
                BUILD_TOOL,
                "install",
                "--git",
                self.config.clone_url,
                "--root",
                str(self.config.install_root),
                "--force",
                self.config.tool_name,
            ],
            env=self._env(target_dir),
        )
        return self.config.installed_binary

    async def install_from_path(self, package_dir: Path) -> Path:
        """Build a local package directory.

        Raises:
            CommandError: If cargo fails

        """
        await self.runner.check(
            [
                BUILD_TOOL,
                "install",
                "--path",
                str(package_dir),
                "--root",
                str(self.config.install_root),
                "--force",
            ],
            cwd=package_dir,
            env=self._env(),
        )
        return self.config.installed_binary

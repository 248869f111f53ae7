"""CLI runner for gh-tool-installer.

Turns parsed arguments into a ResolverConfig, runs the resolver and
returns the process exit code.
"""

import os
from argparse import Namespace
from collections.abc import Mapping, Sequence
from dataclasses import replace

from gh_tool_installer import __version__
from gh_tool_installer.cli.parser import CLIParser
from gh_tool_installer.config import Paths, ResolverConfig
from gh_tool_installer.constants import PACKAGE_SUBPATH_PARENT
from gh_tool_installer.core import InstallResolver
from gh_tool_installer.logger import apply_log_levels, get_logger

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize CLI runner.

        Args:
            environ: Environment mapping, os.environ when None

        """
        self.environ = os.environ if environ is None else environ

    def build_config(self, args: Namespace) -> ResolverConfig:
        """Create the resolver configuration, applying CLI overrides."""
        config = ResolverConfig.from_environment(self.environ)

        package_subpath = args.package_subpath
        if args.tool and not package_subpath:
            package_subpath = f"{PACKAGE_SUBPATH_PARENT}/{args.tool}"

        overrides = {
            "owner": args.owner,
            "repo": args.repo,
            "tool_name": args.tool,
            "package_subpath": package_subpath,
        }
        if args.install_root:
            overrides["install_root"] = Paths.expand_path(args.install_root)
        if args.debug:
            overrides["console_log_level"] = "DEBUG"
            overrides["log_level"] = "DEBUG"

        return replace(
            config, **{k: v for k, v in overrides.items() if v is not None}
        )

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments, sys.argv[1:] when None

        Returns:
            Process exit code

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            logger.info("gh-tool-installer %s", __version__)
            return 0

        config = self.build_config(args)
        apply_log_levels(config.console_log_level, config.log_level)

        resolver = InstallResolver(
            config, setup_environment=not args.skip_environment_setup
        )
        outcome = await resolver.run()
        logger.debug("Outcome: %s", outcome.status.value)
        return outcome.exit_code

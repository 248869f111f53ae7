"""CLI argument parser for gh-tool-installer."""

import argparse
from argparse import Namespace
from collections.abc import Sequence


class CLIParser:
    """Command-line argument parser for gh-tool-installer."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse, sys.argv[1:] when None

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_target_options(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="gh-tool-installer",
            description=(
                "Install a GitHub-hosted tool using the token in "
                "GITHUB_TOKEN. Without a token the install is skipped."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Install the default tool into ~/.local/bin
  GITHUB_TOKEN=ghp_xxx %(prog)s

  # Install another tool from another repository
  %(prog)s --owner acme --repo tools --tool widget \\
      --package-subpath crates/widget

  # Only fetch and build, leave git, cargo and shell profiles alone
  %(prog)s --skip-environment-setup
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show gh-tool-installer version and exit",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Show debug output on the console",
        )

    def _add_target_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--owner", help="Repository owner")
        parser.add_argument("--repo", help="Repository name")
        parser.add_argument("--tool", help="Executable name to install")
        parser.add_argument(
            "--package-subpath",
            help=(
                "Package location inside the repository "
                "(default: repos/<tool> when --tool is given)"
            ),
        )
        parser.add_argument(
            "--install-root",
            help="Prefix whose bin directory receives the tool",
        )
        parser.add_argument(
            "--skip-environment-setup",
            action="store_true",
            help="Do not configure git credentials, cargo or shell PATH",
        )

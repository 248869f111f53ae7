"""Command-line interface for gh-tool-installer."""

from gh_tool_installer.cli.parser import CLIParser
from gh_tool_installer.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]

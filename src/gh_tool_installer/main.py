"""Main CLI entry point for gh-tool-installer.

Exit codes: 0 when the tool is installed or the install is skipped for
lack of a token, 1 on any fatal failure.
"""

import sys

import uvloop

from gh_tool_installer.cli import CLIRunner
from gh_tool_installer.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return its exit code."""
    logger.debug("CLI started")
    runner = CLIRunner()
    return await runner.run()


def main() -> None:
    """Run the CLI application under uvloop."""
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Installation cancelled by user")
        exit_code = 1
    except Exception:
        logger.exception("Unexpected error")
        exit_code = 1
    flush_all_handlers()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

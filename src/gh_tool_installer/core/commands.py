"""Asynchronous external command execution."""

import asyncio
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from gh_tool_installer.exceptions import CommandError
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Outcome of a finished command."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """Return whether the command exited with status 0."""
        return self.returncode == 0


class CommandRunner:
    """Run external commands without blocking the event loop."""

    async def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        display: str | None = None,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Program and arguments
            cwd: Working directory
            env: Full environment for the child, inherited when None
            display: Command text for logs when args hold secrets

        Returns:
            CommandResult with decoded output

        Raises:
            CommandError: If the program cannot be started

        """
        shown = display or " ".join(args)
        logger.debug("Running: %s", shown)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=str(cwd) if cwd else None,
                env=dict(env) if env is not None else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            msg = f"could not start {args[0]}: {e}"
            raise CommandError(msg, target=shown) from e

        stdout, stderr = await process.communicate()
        result = CommandResult(
            returncode=(
                process.returncode if process.returncode is not None else -1
            ),
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )
        logger.debug("Exit status %s: %s", result.returncode, shown)
        return result

    async def check(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        display: str | None = None,
    ) -> CommandResult:
        """Run a command and raise when it exits non-zero.

        Raises:
            CommandError: If the command fails or cannot be started

        """
        result = await self.run(args, cwd=cwd, env=env, display=display)
        if not result.ok:
            tail = (result.stderr or result.stdout).strip().splitlines()[-5:]
            msg = f"exit status {result.returncode}"
            if tail:
                msg += ": " + " | ".join(tail)
            raise CommandError(
                msg,
                target=display or " ".join(args),
                returncode=result.returncode,
            )
        return result

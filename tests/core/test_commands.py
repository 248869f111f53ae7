"""Tests for the subprocess-backed command runner."""

import sys

import pytest

from gh_tool_installer.core.commands import CommandRunner
from gh_tool_installer.exceptions import CommandError


@pytest.mark.asyncio
async def test_run_captures_output_and_status(tmp_path) -> None:
    """stdout, stderr and the exit status of a real process are captured."""
    script = (
        "import os, sys; print(os.getcwd()); "
        "print('warn', file=sys.stderr); sys.exit(3)"
    )

    result = await CommandRunner().run(
        [sys.executable, "-c", script], cwd=tmp_path
    )

    assert result.returncode == 3
    assert not result.ok
    assert result.stdout.strip() == str(tmp_path)
    assert result.stderr.strip() == "warn"


@pytest.mark.asyncio
async def test_run_passes_environment() -> None:
    env = {"GH_TOOL_INSTALLER_TEST_VALUE": "42"}
    result = await CommandRunner().run(
        [
            sys.executable,
            "-c",
            "import os; print(os.environ['GH_TOOL_INSTALLER_TEST_VALUE'])",
        ],
        env=env,
    )
    assert result.ok
    assert result.stdout.strip() == "42"


@pytest.mark.asyncio
async def test_check_raises_with_stderr_tail() -> None:
    """A non-zero exit raises CommandError carrying stderr."""
    script = "import sys; sys.stderr.write('boom\\n'); sys.exit(2)"

    with pytest.raises(CommandError) as exc_info:
        await CommandRunner().check([sys.executable, "-c", script])

    assert exc_info.value.returncode == 2
    assert "boom" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_program_cannot_start(tmp_path) -> None:
    """A program that does not exist raises CommandError."""
    missing = str(tmp_path / "no-such-program")

    with pytest.raises(CommandError, match="could not start"):
        await CommandRunner().run([missing, "--version"])


@pytest.mark.asyncio
async def test_display_hides_arguments(caplog) -> None:
    """The display text replaces the real arguments in logs."""
    caplog.set_level("DEBUG", logger="gh_tool_installer")
    await CommandRunner().run(
        [sys.executable, "-c", "pass", "secret-value"], display="python ***"
    )
    assert "secret-value" not in caplog.text
    assert "python ***" in caplog.text

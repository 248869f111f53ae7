"""Tests for the console entry point."""

import pytest

from gh_tool_installer import main as main_module


class StubRunner:
    result: int | BaseException = 0

    async def run(self):
        if isinstance(StubRunner.result, BaseException):
            raise StubRunner.result
        return StubRunner.result


@pytest.fixture(autouse=True)
def stub_runner(monkeypatch):
    monkeypatch.setattr(main_module, "CLIRunner", StubRunner)
    StubRunner.result = 0


@pytest.mark.parametrize("code", [0, 1])
def test_main_exits_with_runner_code(code) -> None:
    StubRunner.result = code
    with pytest.raises(SystemExit) as exc_info:
        main_module.main()
    assert exc_info.value.code == code


def test_unexpected_error_exits_one(caplog) -> None:
    StubRunner.result = RuntimeError("boom")
    with pytest.raises(SystemExit) as exc_info:
        main_module.main()
    assert exc_info.value.code == 1
    assert "Unexpected error" in caplog.text

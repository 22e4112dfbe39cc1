"""Tests for the blocking ProcessRunner.

Commands are run through the current interpreter so the tests do not depend
on any particular tool being installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from repoinit.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from repoinit.runners import CommandResult, ProcessRunner


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestCommandResult:
    def test_success_requires_zero_returncode(self) -> None:
        assert CommandResult(0, "", "", 1).success is True
        assert CommandResult(1, "", "", 1).success is False

    def test_output_combines_streams(self) -> None:
        assert CommandResult(1, "out", "err", 1).output == "out\nerr"
        assert CommandResult(1, "", "err", 1).output == "err"
        assert CommandResult(0, "out", "", 1).output == "out"

    def test_is_frozen(self) -> None:
        result = CommandResult(0, "", "", 1)
        with pytest.raises(AttributeError):
            result.returncode = 2  # type: ignore[misc]


class TestExec:
    def test_success_returns_none(self) -> None:
        assert ProcessRunner().exec(_python("pass")) is None

    def test_runs_in_working_directory(self, temp_dir: Path) -> None:
        ProcessRunner().exec(
            _python("open('marker', 'w').close()"),
            cwd=temp_dir,
        )
        assert (temp_dir / "marker").exists()

    def test_nonzero_exit_raises_with_captured_output(self) -> None:
        code = "import sys; print('partial'); sys.stderr.write('boom'); sys.exit(3)"
        with pytest.raises(CommandFailedError) as exc_info:
            ProcessRunner().exec(_python(code))

        error = exc_info.value
        assert error.returncode == 3
        assert error.result is not None
        assert error.result.stderr == "boom"
        assert error.result.stdout.strip() == "partial"
        assert error.command is not None
        assert error.command[0] == sys.executable

    def test_missing_executable_raises_not_found(self) -> None:
        with pytest.raises(CommandNotFoundError) as exc_info:
            ProcessRunner().exec(["repoinit-definitely-missing-tool", "init"])

        assert exc_info.value.executable == "repoinit-definitely-missing-tool"
        assert "Command not found" in exc_info.value.message

    def test_missing_working_directory_raises_not_found(self, temp_dir: Path) -> None:
        missing = temp_dir / "missing"
        with pytest.raises(CommandNotFoundError) as exc_info:
            ProcessRunner().exec(_python("pass"), cwd=missing)

        assert "Working directory does not exist" in exc_info.value.message

    def test_unloadable_executable_raises_not_found(
        self, corrupt_executable: Path
    ) -> None:
        with pytest.raises(CommandNotFoundError) as exc_info:
            ProcessRunner().exec([corrupt_executable, "init"])

        assert exc_info.value.executable == str(corrupt_executable)

    def test_timeout_raises(self) -> None:
        runner = ProcessRunner(timeout=0.2)
        with pytest.raises(CommandTimeoutError) as exc_info:
            runner.exec(_python("import time; time.sleep(10)"))

        assert exc_info.value.timeout_seconds == 0.2

    def test_accepts_path_arguments(self, temp_dir: Path) -> None:
        script = temp_dir / "script.py"
        script.write_text("print('ok')\n")
        ProcessRunner().exec([sys.executable, script])


class TestExecWithOutput:
    def test_returns_captured_stdout(self) -> None:
        result = ProcessRunner().exec_with_output(_python("print('/work/repo')"))

        assert result.success
        assert result.stdout.strip() == "/work/repo"
        assert result.duration_ms >= 0

    def test_empty_stdout_is_a_failure(self) -> None:
        with pytest.raises(CommandFailedError, match="produced no output"):
            ProcessRunner().exec_with_output(_python("pass"))

    def test_nonzero_exit_is_a_failure(self) -> None:
        with pytest.raises(CommandFailedError) as exc_info:
            ProcessRunner().exec_with_output(
                _python("import sys; print('x'); sys.exit(255)")
            )
        assert exc_info.value.returncode == 255

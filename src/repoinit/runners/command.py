"""Blocking process runner for external version control tools.

The runner exposes two operations with distinct contracts:

- :meth:`ProcessRunner.exec` runs a command and only checks its exit status.
- :meth:`ProcessRunner.exec_with_output` also requires the command to have
  printed something on stdout, and returns the captured result.

Both capture output so that failures carry the tool's diagnostics.
"""

from __future__ import annotations

import os
import subprocess
import time
from pathlib import Path
from typing import TYPE_CHECKING

from repoinit.exceptions import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from repoinit.logging import get_logger
from repoinit.runners.models import CommandResult

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["ProcessRunner"]

logger = get_logger(__name__)


def _describe(command: Sequence[str]) -> str:
    return " ".join(str(part) for part in command)


class ProcessRunner:
    """Execute external commands synchronously.

    Every call blocks until the child exits. There is no retry; a timeout is
    applied only when one was configured.

    Attributes:
        timeout: Timeout in seconds, or None to wait indefinitely.

    Example:
        ```python
        runner = ProcessRunner()
        runner.exec(["hg", "init", "project"], cwd=Path("/work"))
        result = runner.exec_with_output(["hg", "--cwd", "project", "root"])
        print(result.stdout.strip())
        ```
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        """Timeout in seconds applied to each command."""
        return self._timeout

    def exec(self, command: Sequence[str], *, cwd: Path | None = None) -> None:
        """Run a command and check that it exited successfully.

        Args:
            command: Command and arguments (no shell expansion).
            cwd: Working directory for the child process.

        Raises:
            CommandNotFoundError: If the process could not be spawned.
            CommandFailedError: If the process exited with a nonzero status.
            CommandTimeoutError: If the configured timeout elapsed.
        """
        result = self._run(command, cwd)
        if not result.success:
            raise CommandFailedError(
                f"`{_describe(command)}` exited with status {result.returncode}",
                command=command,
                result=result,
            )

    def exec_with_output(
        self, command: Sequence[str], *, cwd: Path | None = None
    ) -> CommandResult:
        """Run a command, check its exit status and require stdout output.

        Args:
            command: Command and arguments (no shell expansion).
            cwd: Working directory for the child process.

        Returns:
            CommandResult with the captured stdout and stderr.

        Raises:
            CommandNotFoundError: If the process could not be spawned.
            CommandFailedError: If the process exited with a nonzero status
                or printed nothing on stdout.
            CommandTimeoutError: If the configured timeout elapsed.
        """
        result = self._run(command, cwd)
        if not result.success:
            raise CommandFailedError(
                f"`{_describe(command)}` exited with status {result.returncode}",
                command=command,
                result=result,
            )
        if not result.stdout.strip():
            raise CommandFailedError(
                f"`{_describe(command)}` produced no output",
                command=command,
                result=result,
            )
        return result

    def _run(self, command: Sequence[str], cwd: Path | None) -> CommandResult:
        args = [os.fspath(part) for part in command]
        logger.debug(
            "command_started",
            command=_describe(args),
            cwd=str(cwd) if cwd is not None else None,
        )
        start_time = time.monotonic()

        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError) as e:
            if cwd is not None and not cwd.is_dir():
                message = f"Working directory does not exist: {cwd}"
            else:
                message = f"Command not found: {args[0]}"
            raise CommandNotFoundError(message, executable=args[0]) from e
        except PermissionError as e:
            raise CommandNotFoundError(
                f"Permission denied: {args[0]}", executable=args[0]
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CommandTimeoutError(
                f"`{_describe(args)}` timed out after {self._timeout}s",
                timeout_seconds=self._timeout,
                command=args,
            ) from e
        except OSError as e:
            raise CommandNotFoundError(
                f"Failed to launch {args[0]}: {e.strerror or e}",
                executable=args[0],
            ) from e

        result = CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
            duration_ms=int((time.monotonic() - start_time) * 1000),
        )
        logger.debug(
            "command_finished",
            command=_describe(args),
            returncode=result.returncode,
            duration_ms=result.duration_ms,
        )
        return result

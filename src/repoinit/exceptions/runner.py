from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from repoinit.exceptions.base import RepoInitError

if TYPE_CHECKING:
    from repoinit.runners.models import CommandResult
    from repoinit.vcs.kinds import VcsKind


class RunnerError(RepoInitError):
    """Base exception for runner failures.

    Attributes:
        message: Human-readable error message.
        kind: Version control system whose tool failed, once known.
    """

    kind: VcsKind | None = None


class CommandNotFoundError(RunnerError):
    """Executable could not be launched.

    Raised when the executable is missing from PATH, is not executable or
    not loadable, or when the working directory it should start in does not
    exist.

    Attributes:
        message: Human-readable error message.
        executable: The command that could not be spawned.
    """

    def __init__(self, message: str, executable: str | None = None) -> None:
        """Initialize the CommandNotFoundError.

        Args:
            message: Human-readable error message.
            executable: The command that could not be spawned.
        """
        self.executable = executable
        super().__init__(message)


class CommandFailedError(RunnerError):
    """Executable ran but did not succeed.

    Attributes:
        message: Human-readable error message.
        command: The command that failed.
        result: Captured result, including stdout and stderr.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] | None = None,
        result: CommandResult | None = None,
    ) -> None:
        """Initialize the CommandFailedError.

        Args:
            message: Human-readable error message.
            command: The command that failed.
            result: Captured result of the failed command.
        """
        self.command = list(command) if command is not None else None
        self.result = result
        super().__init__(message)

    @property
    def returncode(self) -> int | None:
        """Exit status of the failed command, if it ran."""
        return self.result.returncode if self.result is not None else None


class CommandTimeoutError(RunnerError):
    """Command execution exceeded timeout.

    Attributes:
        message: Human-readable error message.
        timeout_seconds: The timeout that was exceeded.
        command: The command that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout_seconds: float | None = None,
        command: Sequence[str] | None = None,
    ) -> None:
        """Initialize the CommandTimeoutError.

        Args:
            message: Human-readable error message.
            timeout_seconds: The timeout value that was exceeded.
            command: The command that timed out.
        """
        self.timeout_seconds = timeout_seconds
        self.command = list(command) if command is not None else None
        super().__init__(message)

from __future__ import annotations

from pathlib import Path

from repoinit.exceptions.base import RepoInitError


class GitError(RepoInitError):
    """Exception for git operation failures.

    Attributes:
        message: Human-readable error message.
        operation: Git operation that failed (e.g., "discover", "check_ignore").
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize the GitError.

        Args:
            message: Human-readable error message.
            operation: Git operation that failed.
        """
        self.operation = operation
        super().__init__(message)


class GitNotFoundError(GitError):
    """Exception raised when git CLI is not installed or not in PATH."""

    def __init__(self, message: str = "Git CLI not found") -> None:
        super().__init__(message, operation="git_check")


class NotARepositoryError(GitError):
    """Exception raised when no git repository contains a path.

    Attributes:
        message: Human-readable error message.
        path: Directory that is not inside a repo.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        """Initialize the NotARepositoryError.

        Args:
            message: Human-readable error message.
            path: Directory that is not inside a repo.
        """
        self.path = path
        super().__init__(message, operation="discover")

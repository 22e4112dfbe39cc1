"""repoinit exception hierarchy.

All exceptions can be imported from this package:
    from repoinit.exceptions import RepoInitError, VcsInitError
"""

from __future__ import annotations

# Base exception
from repoinit.exceptions.base import RepoInitError

# Configuration exceptions
from repoinit.exceptions.config import ConfigError

# Runner exceptions
from repoinit.exceptions.runner import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
    RunnerError,
)

# Git-related exceptions
from repoinit.exceptions.git import GitError, GitNotFoundError, NotARepositoryError

# Repository initialization exceptions
from repoinit.exceptions.vcs import (
    FilesystemError,
    NativeInitError,
    UrlConversionError,
    VcsInitError,
)

__all__ = [
    "RepoInitError",
    "ConfigError",
    "RunnerError",
    "CommandNotFoundError",
    "CommandFailedError",
    "CommandTimeoutError",
    "GitError",
    "GitNotFoundError",
    "NotARepositoryError",
    "VcsInitError",
    "FilesystemError",
    "UrlConversionError",
    "NativeInitError",
]

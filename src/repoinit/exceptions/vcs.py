"""Repository initialization exception hierarchy."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from repoinit.exceptions.base import RepoInitError

if TYPE_CHECKING:
    from repoinit.vcs.kinds import VcsKind

__all__ = [
    "VcsInitError",
    "FilesystemError",
    "UrlConversionError",
    "NativeInitError",
]


class VcsInitError(RepoInitError):
    """Base exception for repository initialization failures.

    Attributes:
        message: Human-readable error message.
        kind: Version control system being initialized.
        step: Initialization step that failed (e.g., "create_dir").
    """

    def __init__(
        self,
        message: str,
        kind: VcsKind | None = None,
        step: str | None = None,
    ) -> None:
        """Initialize the VcsInitError.

        Args:
            message: Human-readable error message.
            kind: Version control system being initialized.
            step: Initialization step that failed.
        """
        self.kind = kind
        self.step = step
        super().__init__(message)


class FilesystemError(VcsInitError):
    """Target directory could not be created.

    Attributes:
        message: Human-readable error message.
        path: Directory that could not be created.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        kind: VcsKind | None = None,
    ) -> None:
        """Initialize the FilesystemError.

        Args:
            message: Human-readable error message.
            path: Directory that could not be created.
            kind: Version control system being initialized.
        """
        self.path = path
        super().__init__(message, kind=kind, step="create_dir")


class UrlConversionError(VcsInitError):
    """Path could not be converted to a ``file://`` URL.

    Attributes:
        message: Human-readable error message.
        path: Path that failed conversion.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        kind: VcsKind | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, kind=kind, step="path_to_url")


class NativeInitError(VcsInitError):
    """GitPython reported an error while creating a repository."""

    def __init__(self, message: str, kind: VcsKind | None = None) -> None:
        super().__init__(message, kind=kind, step="native_init")

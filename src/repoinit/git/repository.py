"""GitPython-backed discovery, ignore checks and repository creation.

This is the in-process backend: repository discovery walks up from a path
the same way ``git`` itself does, and ignore rules are evaluated by the
repository's own ``check-ignore`` machinery.

Example:
    ```python
    from repoinit.git import GitRepository

    with GitRepository.discover("/work/monorepo/crates/new") as repo:
        if repo.workdir != Path("/work/monorepo/crates/new"):
            ignored = repo.is_path_ignored(Path("/work/monorepo/crates/new"))

    GitRepository.init(Path("/work/fresh")).close()
    ```
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import GitCommandNotFound

from repoinit.exceptions import (
    GitError,
    GitNotFoundError,
    NativeInitError,
    NotARepositoryError,
)
from repoinit.logging import get_logger

logger = get_logger(__name__)

__all__ = ["GitRepository"]


class GitRepository:
    """Thin wrapper over a GitPython ``Repo``.

    Instances own the underlying ``Repo`` and should be closed after use,
    either explicitly or by using the instance as a context manager.
    """

    def __init__(self, repo: Repo) -> None:
        self._repo = repo

    @classmethod
    def discover(cls, path: Path | str) -> GitRepository:
        """Find the repository containing *path*, searching parent directories.

        Args:
            path: Directory to start the search from.

        Returns:
            GitRepository for the nearest enclosing repository.

        Raises:
            NotARepositoryError: If no repository encloses *path*.
            GitNotFoundError: If git is not installed.
        """
        try:
            repo = Repo(path, search_parent_directories=True)
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotARepositoryError(
                f"Not inside a git repository: {path}",
                path=path,
            ) from e
        return cls(repo)

    @classmethod
    def init(cls, path: Path | str) -> GitRepository:
        """Create a new, empty repository at *path*.

        Missing directories, including *path* itself, are created.

        Raises:
            NativeInitError: If git could not create the repository.
        """
        try:
            repo = Repo.init(path, mkdir=True)
        except GitCommandNotFound as e:
            raise NativeInitError(f"Git CLI not found: {e}") from e
        except (GitCommandError, OSError) as e:
            raise NativeInitError(f"Failed to initialize git repository: {e}") from e
        logger.debug("git_repository_created", path=str(path))
        return cls(repo)

    @property
    def workdir(self) -> Path | None:
        """Root of the working tree, or None for a bare repository."""
        working_tree = self._repo.working_tree_dir
        return Path(working_tree) if working_tree is not None else None

    def is_path_ignored(self, path: Path) -> bool:
        """Check whether *path* is excluded by the repository's ignore rules.

        The path is tested as given and with a trailing slash, so that
        directory-only patterns (``target/``) also match a directory that
        has not been created yet.

        Raises:
            GitError: If the ignore rules could not be evaluated.
        """
        workdir = self.workdir
        if workdir is None:
            raise GitError(
                "Bare repositories have no ignore rules", operation="check_ignore"
            )
        try:
            relative = path.resolve().relative_to(workdir.resolve())
        except ValueError as e:
            raise GitError(
                f"{path} is outside the working tree {workdir}",
                operation="check_ignore",
            ) from e

        # leading "." keeps names such as "-scratch" from parsing as options
        candidate = f"./{relative.as_posix()}"
        try:
            ignored = self._repo.ignored(candidate, f"{candidate}/")
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except GitCommandError as e:
            raise GitError(str(e), operation="check_ignore") from e
        return any(entry for entry in ignored)

    def close(self) -> None:
        """Release file handles and child processes held by GitPython."""
        self._repo.close()

    def __enter__(self) -> GitRepository:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

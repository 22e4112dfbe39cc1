"""Creation of empty repositories for every supported :class:`VcsKind`.

Git is created in-process through GitPython; the other kinds shell out to
their own command-line tools. Multi-step backends (Fossil, Subversion) are
not transactional: when a later step fails, the directory and any
repository files created by earlier steps stay on disk.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from repoinit.config import ToolsConfig
from repoinit.exceptions import (
    FilesystemError,
    RunnerError,
    UrlConversionError,
    VcsInitError,
)
from repoinit.git import GitRepository
from repoinit.logging import get_logger
from repoinit.runners import ProcessRunner
from repoinit.vcs.kinds import RepositoryHandle, VcsKind

__all__ = ["init_repository", "FOSSIL_DB_NAME"]

logger = get_logger(__name__)

#: Name of the Fossil repository database created inside the project.
FOSSIL_DB_NAME = ".fossil"

_Initializer = Callable[[Path, Path, ProcessRunner, ToolsConfig], None]


def init_repository(
    kind: VcsKind,
    path: Path,
    cwd: Path,
    *,
    runner: ProcessRunner | None = None,
    tools: ToolsConfig | None = None,
) -> RepositoryHandle:
    """Create a new, empty repository of *kind* rooted at *path*.

    Args:
        kind: Version control system to initialize.
        path: Repository root to create.
        cwd: Working directory for the external tools.
        runner: Process runner for the tool-backed kinds.
        tools: Executable names; defaults to ``ToolsConfig()``.

    Returns:
        RepositoryHandle for *kind*.

    Raises:
        NativeInitError: Git could not create the repository.
        FilesystemError: The target directory could not be created.
        UrlConversionError: *path* has no ``file://`` form (Subversion).
        CommandNotFoundError: A tool could not be spawned.
        CommandFailedError: A tool exited with a nonzero status.
        CommandTimeoutError: A tool exceeded the configured timeout.
    """
    tools = tools or ToolsConfig()
    runner = runner or ProcessRunner(timeout=tools.timeout_seconds)
    log = logger.bind(kind=kind.value, path=str(path))

    log.info("repository_init_started")
    try:
        _INITIALIZERS[kind](path, cwd, runner, tools)
    except VcsInitError as e:
        e.kind = kind
        log.error("repository_init_failed", step=e.step, error=e.message)
        raise
    except RunnerError as e:
        e.kind = kind
        log.error("repository_init_failed", step="run_tool", error=e.message)
        raise
    log.info("repository_initialized")
    return RepositoryHandle(kind)


def _init_git(path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig) -> None:
    GitRepository.init(path).close()


def _init_hg(path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig) -> None:
    runner.exec([tools.hg, "init", str(path)], cwd=cwd)


def _init_pijul(
    path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig
) -> None:
    runner.exec([tools.pijul, "init", str(path)], cwd=cwd)


def _init_fossil(
    path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig
) -> None:
    # fossil does not create the directory itself
    _create_dir(path)
    runner.exec([tools.fossil, "init", str(path / FOSSIL_DB_NAME)], cwd=cwd)
    runner.exec([tools.fossil, "open", FOSSIL_DB_NAME], cwd=path)


def _init_svn(path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig) -> None:
    url = _file_url(path)
    # svnadmin does not create the directory itself
    _create_dir(path)
    runner.exec([tools.svnadmin, "create", str(path)], cwd=cwd)
    runner.exec([tools.svn, "checkout", url], cwd=cwd)


_INITIALIZERS: dict[VcsKind, _Initializer] = {
    VcsKind.GIT: _init_git,
    VcsKind.MERCURIAL: _init_hg,
    VcsKind.PIJUL: _init_pijul,
    VcsKind.FOSSIL: _init_fossil,
    VcsKind.SUBVERSION: _init_svn,
}


def _create_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            f"Failed to create directory {path}: {e.strerror or e}",
            path=path,
        ) from e


def _file_url(path: Path) -> str:
    """Convert an absolute path to a ``file://`` URL."""
    try:
        str(path).encode("utf-8")
    except UnicodeEncodeError as e:
        raise UrlConversionError(
            f"Path is not valid UTF-8: {path!r}", path=path
        ) from e
    try:
        return path.as_uri()
    except ValueError as e:
        raise UrlConversionError(
            f"Cannot convert {path} to a file URL: path must be absolute",
            path=path,
        ) from e

"""Detection of an existing version-controlled tree around a path.

A path counts as already tracked when either:

1. it lies inside a git repository and is not excluded by that repository's
   ignore rules (the repository root itself is never treated as excluded), or
2. Mercurial reports a repository root for it.

Detection never raises: anything that prevents an answer is treated as
"not a repository", which leaves the caller free to initialize one.
"""

from __future__ import annotations

from pathlib import Path

from repoinit.config import ToolsConfig
from repoinit.exceptions import GitError, RepoInitError
from repoinit.git import GitRepository
from repoinit.logging import get_logger
from repoinit.runners import ProcessRunner

__all__ = ["existing_vcs_repo"]

logger = get_logger(__name__)


def existing_vcs_repo(
    path: Path,
    cwd: Path,
    *,
    runner: ProcessRunner | None = None,
    tools: ToolsConfig | None = None,
) -> bool:
    """Return True if *path* is already under version control.

    Args:
        path: Location of the prospective new project.
        cwd: Working directory for the Mercurial probe.
        runner: Process runner for the Mercurial probe.
        tools: Executable names; defaults to ``ToolsConfig()``.
    """
    tools = tools or ToolsConfig()
    runner = runner or ProcessRunner(timeout=tools.timeout_seconds)
    return _in_git_repo(path) or _in_hg_repo(path, cwd, runner, tools)


def _in_git_repo(path: Path) -> bool:
    try:
        repo = GitRepository.discover(path)
    except GitError as e:
        logger.debug("git_discovery_failed", path=str(path), error=e.message)
        return False

    with repo:
        workdir = repo.workdir
        if workdir is not None and _same_path(workdir, path):
            return True
        try:
            ignored = repo.is_path_ignored(path)
        except GitError as e:
            logger.debug("git_ignore_check_failed", path=str(path), error=e.message)
            return True

    if ignored:
        logger.debug("path_ignored_by_git", path=str(path), workdir=str(workdir))
    return not ignored


def _in_hg_repo(
    path: Path, cwd: Path, runner: ProcessRunner, tools: ToolsConfig
) -> bool:
    try:
        result = runner.exec_with_output(
            [tools.hg, "--cwd", str(path), "root"], cwd=cwd
        )
    except RepoInitError as e:
        logger.debug("hg_discovery_failed", path=str(path), error=e.message)
        return False
    logger.debug("hg_root_found", path=str(path), root=result.stdout.strip())
    return True


def _same_path(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a == b

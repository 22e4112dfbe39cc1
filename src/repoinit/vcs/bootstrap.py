"""Decide whether a new project gets a repository, and create it.

This is the glue a project-creation command runs once the project
directory has been chosen:

- an explicit request (including ``none``) is always honoured;
- otherwise a project that lands inside an existing repository gets none;
- otherwise the configured default kind is initialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from repoinit.config import RepoInitConfig
from repoinit.logging import get_logger
from repoinit.runners import ProcessRunner
from repoinit.vcs.detector import existing_vcs_repo
from repoinit.vcs.initializer import init_repository
from repoinit.vcs.kinds import NO_VCS, RepositoryHandle, VcsChoice, VcsKind

__all__ = ["BootstrapOutcome", "bootstrap_repository", "resolve_vcs"]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BootstrapOutcome:
    """What :func:`bootstrap_repository` did for one project path.

    Attributes:
        path: Project path that was considered.
        kind: Kind that was initialized, or None when skipped.
        handle: Handle returned by the initializer, or None when skipped.
        skipped_reason: Why no repository was created, if none was.
    """

    path: Path
    kind: VcsKind | None = None
    handle: RepositoryHandle | None = None
    skipped_reason: str | None = None

    @property
    def initialized(self) -> bool:
        """True if a new repository was created."""
        return self.handle is not None


def resolve_vcs(
    requested: VcsChoice | None,
    configured: VcsKind,
    in_existing_repo: bool,
) -> VcsKind | None:
    """Pick the kind to initialize, or None to skip initialization.

    Args:
        requested: Explicit user choice; ``NO_VCS`` disables version control.
        configured: Default kind from configuration.
        in_existing_repo: Whether the project lands in a tracked tree.
    """
    if requested == NO_VCS:
        return None
    if isinstance(requested, VcsKind):
        return requested
    if in_existing_repo:
        return None
    return configured


def bootstrap_repository(
    path: Path,
    cwd: Path,
    requested: VcsChoice | None = None,
    *,
    config: RepoInitConfig | None = None,
    runner: ProcessRunner | None = None,
) -> BootstrapOutcome:
    """Initialize a repository for a new project at *path* when appropriate.

    Detection runs on the directory that will contain the project, and only
    when the caller did not request a kind explicitly.

    Raises:
        RepoInitError: Any initialization failure, unchanged.
    """
    config = config or RepoInitConfig()
    tools = config.tools
    runner = runner or ProcessRunner(timeout=tools.timeout_seconds)

    in_existing_repo = False
    if requested is None:
        in_existing_repo = existing_vcs_repo(
            path.parent, cwd, runner=runner, tools=tools
        )

    kind = resolve_vcs(requested, config.default_vcs, in_existing_repo)
    if kind is None:
        reason = (
            "version control disabled"
            if requested == NO_VCS
            else "already inside a version-controlled tree"
        )
        logger.info("repository_init_skipped", path=str(path), reason=reason)
        return BootstrapOutcome(path=path, skipped_reason=reason)

    handle = init_repository(kind, path, cwd, runner=runner, tools=tools)
    return BootstrapOutcome(path=path, kind=kind, handle=handle)

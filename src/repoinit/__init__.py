"""repoinit - detect existing version control and bootstrap new repositories."""

from __future__ import annotations

from repoinit.vcs import (
    NO_VCS,
    BootstrapOutcome,
    RepositoryHandle,
    VcsKind,
    bootstrap_repository,
    existing_vcs_repo,
    init_repository,
    parse_vcs_choice,
    resolve_vcs,
)

__version__ = "0.1.0"

__all__ = [
    "NO_VCS",
    "BootstrapOutcome",
    "RepositoryHandle",
    "VcsKind",
    "__version__",
    "bootstrap_repository",
    "existing_vcs_repo",
    "init_repository",
    "parse_vcs_choice",
    "resolve_vcs",
]

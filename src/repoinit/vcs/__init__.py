"""Version control detection and repository bootstrapping.

Provides :func:`existing_vcs_repo` to decide whether a path is already
tracked, :func:`init_repository` to create an empty repository for any
:class:`VcsKind`, and :func:`bootstrap_repository` combining the two the
way a project-creation command needs.
"""

from __future__ import annotations

from repoinit.vcs.kinds import (
    NO_VCS,
    RepositoryHandle,
    VcsChoice,
    VcsKind,
    parse_vcs_choice,
)

from repoinit.vcs.detector import existing_vcs_repo  # isort: skip
from repoinit.vcs.initializer import init_repository  # isort: skip
from repoinit.vcs.bootstrap import (  # isort: skip
    BootstrapOutcome,
    bootstrap_repository,
    resolve_vcs,
)

__all__ = [
    "NO_VCS",
    "BootstrapOutcome",
    "RepositoryHandle",
    "VcsChoice",
    "VcsKind",
    "bootstrap_repository",
    "existing_vcs_repo",
    "init_repository",
    "parse_vcs_choice",
    "resolve_vcs",
]

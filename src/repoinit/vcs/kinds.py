"""Version control kinds and the success token returned by initialization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal, TypeAlias

__all__ = [
    "NO_VCS",
    "RepositoryHandle",
    "VcsChoice",
    "VcsKind",
    "parse_vcs_choice",
]


class VcsKind(str, Enum):
    """Supported version control systems.

    Values:
        GIT: Git, driven in-process through GitPython.
        MERCURIAL: Mercurial (``hg``).
        PIJUL: Pijul (``pijul``).
        FOSSIL: Fossil (``fossil``).
        SUBVERSION: Subversion (``svnadmin`` + ``svn``).
    """

    GIT = "git"
    MERCURIAL = "mercurial"
    PIJUL = "pijul"
    FOSSIL = "fossil"
    SUBVERSION = "subversion"

    @classmethod
    def parse(cls, name: str) -> VcsKind:
        """Parse a kind from its name or command-line alias.

        Args:
            name: ``git``, ``hg``/``mercurial``, ``pijul``, ``fossil`` or
                ``svn``/``subversion``, in any case.

        Raises:
            ValueError: If *name* is not a known kind.
        """
        key = name.strip().lower()
        kind = _ALIASES.get(key)
        if kind is None:
            choices = ", ".join(sorted(_ALIASES))
            raise ValueError(f"Unknown VCS kind {name!r} (expected one of: {choices})")
        return kind

    def __str__(self) -> str:
        return self.value


_ALIASES: Final[dict[str, VcsKind]] = {
    "git": VcsKind.GIT,
    "hg": VcsKind.MERCURIAL,
    "mercurial": VcsKind.MERCURIAL,
    "pijul": VcsKind.PIJUL,
    "fossil": VcsKind.FOSSIL,
    "svn": VcsKind.SUBVERSION,
    "subversion": VcsKind.SUBVERSION,
}

#: Explicit request for no version control at all.
NO_VCS: Final = "none"

VcsChoice: TypeAlias = VcsKind | Literal["none"]


def parse_vcs_choice(name: str) -> VcsChoice:
    """Parse a user selection that may also be ``none``.

    Raises:
        ValueError: If *name* is neither ``none`` nor a known kind.
    """
    if name.strip().lower() == NO_VCS:
        return NO_VCS
    return VcsKind.parse(name)


@dataclass(frozen=True, slots=True)
class RepositoryHandle:
    """Proof that a repository of *kind* now exists at the requested path.

    Carries no other state; use GitPython or the tool itself to inspect the
    new repository.

    Attributes:
        kind: Backend that created the repository.
    """

    kind: VcsKind

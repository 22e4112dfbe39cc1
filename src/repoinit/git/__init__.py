"""In-process git backend built on GitPython."""

from __future__ import annotations

from repoinit.git.repository import GitRepository

__all__ = ["GitRepository"]

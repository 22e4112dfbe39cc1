"""Synchronous subprocess execution for the tool-backed VCS backends."""

from __future__ import annotations

from repoinit.runners.command import ProcessRunner
from repoinit.runners.models import CommandResult

__all__ = [
    "CommandResult",
    "ProcessRunner",
]

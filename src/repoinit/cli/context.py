"""CLI context and exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from repoinit.config import RepoInitConfig

__all__ = ["ExitCode", "CLIContext"]


class ExitCode(IntEnum):
    """Exit codes for the repoinit CLI.

    ``detect`` reuses FAILURE to mean "not tracked" so it composes in shell
    conditionals.
    """

    SUCCESS = 0
    FAILURE = 1


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and configuration shared by subcommands.

    Attributes:
        config: Loaded configuration.
        quiet: Suppress non-essential output.
    """

    config: RepoInitConfig
    quiet: bool = False

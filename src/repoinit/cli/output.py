"""Output formatting helpers for CLI commands."""

from __future__ import annotations

from repoinit.exceptions import (
    CommandFailedError,
    RepoInitError,
    RunnerError,
    VcsInitError,
)

__all__ = ["format_error", "error_details"]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("hg not found", suggestion="Install Mercurial"))
        Error: hg not found
        Suggestion: Install Mercurial
    """
    lines = [f"Error: {message}"]
    for detail in details or []:
        lines.append(f"  {detail}")
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)


def error_details(error: RepoInitError) -> list[str]:
    """Collect the diagnostic context carried by *error*."""
    details: list[str] = []
    if isinstance(error, (VcsInitError, RunnerError)) and error.kind is not None:
        details.append(f"VCS: {error.kind}")
    if isinstance(error, VcsInitError) and error.step is not None:
        details.append(f"Step: {error.step}")
    if isinstance(error, CommandFailedError) and error.result is not None:
        output = error.result.output.strip()
        if output:
            details.extend(output.splitlines())
    return details

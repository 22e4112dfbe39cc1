"""Shared click options for repoinit commands."""

from __future__ import annotations

from pathlib import Path

import click

from repoinit.vcs import VcsChoice, VcsKind, parse_vcs_choice

__all__ = ["cwd_option", "parse_kind", "parse_choice"]

cwd_option = click.option(
    "--cwd",
    "cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory for external tools (default: current directory).",
)


def parse_kind(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> VcsKind | None:
    """Click callback turning a --vcs value into a VcsKind."""
    if value is None:
        return None
    try:
        return VcsKind.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def parse_choice(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> VcsChoice | None:
    """Click callback accepting a VcsKind or ``none``."""
    if value is None:
        return None
    try:
        return parse_vcs_choice(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e

from __future__ import annotations

from pathlib import Path

import click

from repoinit.cli.console import console
from repoinit.cli.context import CLIContext, ExitCode
from repoinit.cli.options import cwd_option, parse_choice
from repoinit.cli.output import error_details, format_error
from repoinit.exceptions import RepoInitError
from repoinit.vcs import VcsChoice, bootstrap_repository


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--vcs",
    "requested",
    default=None,
    callback=parse_choice,
    help="Force a version control system, or 'none' to skip it.",
)
@cwd_option
@click.pass_context
def bootstrap(
    ctx: click.Context,
    path: Path,
    requested: VcsChoice | None,
    cwd: Path | None,
) -> None:
    """Give a new project at PATH a repository unless one already covers it.

    Without --vcs, the directory containing PATH is checked first; if it is
    already tracked (and PATH is not ignored there) nothing is created.
    Otherwise the configured default_vcs is used.

    Examples:
        repoinit bootstrap crates/new-crate
        repoinit bootstrap scratch --vcs none
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    cwd = cwd or Path.cwd()

    try:
        outcome = bootstrap_repository(
            path.absolute(), cwd, requested, config=cli_ctx.config
        )
    except RepoInitError as e:
        click.echo(format_error(e.message, details=error_details(e)), err=True)
        ctx.exit(ExitCode.FAILURE)

    if cli_ctx.quiet:
        return
    if outcome.initialized:
        console.print(
            f"Initialized empty {outcome.kind} repository in {path}", soft_wrap=True
        )
    else:
        console.print(f"Skipped {path}: {outcome.skipped_reason}", soft_wrap=True)

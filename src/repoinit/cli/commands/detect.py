from __future__ import annotations

from pathlib import Path

import click

from repoinit.cli.console import console
from repoinit.cli.context import CLIContext, ExitCode
from repoinit.cli.options import cwd_option
from repoinit.vcs import existing_vcs_repo


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@cwd_option
@click.pass_context
def detect(ctx: click.Context, path: Path, cwd: Path | None) -> None:
    """Report whether PATH is already under version control.

    Exits 0 when PATH is tracked by git or Mercurial and 1 otherwise, so it
    can be used directly in shell conditionals.

    Examples:
        repoinit detect .
        repoinit detect build/new-project --cwd /work
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    cwd = cwd or Path.cwd()

    tracked = existing_vcs_repo(
        path.absolute(), cwd, tools=cli_ctx.config.tools
    )

    if not cli_ctx.quiet:
        if tracked:
            console.print(f"{path} is under version control", soft_wrap=True)
        else:
            console.print(f"{path} is not under version control", soft_wrap=True)
    ctx.exit(ExitCode.SUCCESS if tracked else ExitCode.FAILURE)

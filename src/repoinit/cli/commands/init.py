from __future__ import annotations

from pathlib import Path

import click

from repoinit.cli.console import console
from repoinit.cli.context import CLIContext, ExitCode
from repoinit.cli.options import cwd_option, parse_kind
from repoinit.cli.output import error_details, format_error
from repoinit.exceptions import CommandNotFoundError, RepoInitError
from repoinit.logging import get_logger
from repoinit.vcs import VcsKind, init_repository


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--vcs",
    "kind",
    required=True,
    callback=parse_kind,
    help="Version control system: git, hg, pijul, fossil or svn.",
)
@cwd_option
@click.pass_context
def init(ctx: click.Context, path: Path, kind: VcsKind, cwd: Path | None) -> None:
    """Create an empty repository at PATH, whether or not it is tracked.

    Examples:
        repoinit init my-project --vcs git
        repoinit init /srv/projects/wiki --vcs fossil
    """
    logger = get_logger(__name__)
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    cwd = cwd or Path.cwd()

    try:
        init_repository(kind, path.absolute(), cwd, tools=cli_ctx.config.tools)
    except CommandNotFoundError as e:
        logger.debug("init_command_failed", error=e.message)
        click.echo(
            format_error(
                e.message,
                details=[f"VCS: {kind}"],
                suggestion=f"Install {e.executable} or set tools in repoinit.yaml",
            ),
            err=True,
        )
        ctx.exit(ExitCode.FAILURE)
    except RepoInitError as e:
        logger.debug("init_command_failed", error=e.message)
        click.echo(format_error(e.message, details=error_details(e)), err=True)
        ctx.exit(ExitCode.FAILURE)

    if not cli_ctx.quiet:
        console.print(f"Initialized empty {kind} repository in {path}", soft_wrap=True)

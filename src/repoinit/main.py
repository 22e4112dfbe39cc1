"""CLI entry point for repoinit.

This module defines the Click-based command-line interface.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from repoinit import __version__
from repoinit.cli.commands.bootstrap import bootstrap
from repoinit.cli.commands.detect import detect
from repoinit.cli.commands.init import init
from repoinit.cli.context import CLIContext, ExitCode
from repoinit.cli.output import format_error
from repoinit.config import load_config
from repoinit.exceptions import ConfigError
from repoinit.logging import configure_logging

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@click.group()
@click.version_option(version=__version__, prog_name="repoinit")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file (overrides project/user config).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: int,
    quiet: bool,
) -> None:
    """repoinit - detect version control and bootstrap new repositories."""
    ctx.ensure_object(dict)

    # Load configuration first (before logging setup)
    try:
        config = load_config(config_file)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    ctx.obj["cli_ctx"] = CLIContext(config=config, quiet=quiet)

    # Priority: quiet > verbose > config
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)

    configure_logging(level=level)


cli.add_command(detect)
cli.add_command(init)
cli.add_command(bootstrap)

if __name__ == "__main__":
    cli()

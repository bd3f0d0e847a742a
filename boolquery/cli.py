"""Command-line interface for boolquery."""

from __future__ import annotations

import os
from pathlib import Path

import click

from boolquery import __version__
from boolquery.commands.init_config import cli as init_config_cmd
from boolquery.commands.parse import cli as parse_cmd
from boolquery.config import load_config
from boolquery.context import Context
from boolquery.exceptions import BoolQueryError
from boolquery.utils.output import (
    configure_logging,
    error,
    set_color,
    set_verbosity,
    warning,
)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/boolquery/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="boolquery")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """boolquery: Parse boolean queries into query trees.

    Queries are groups of space-separated literals joined with '+'.
    Literals in a group are AND-ed, groups are OR-ed. A literal may be
    a term, a "quoted phrase" or a wildcard such as comp*, and a
    leading '-' negates it.

    Configuration is loaded from ~/.config/boolquery/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # Show the tree for a query
        boolquery parse 'cat -dog + "big fish"'
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet

    set_verbosity(verbose=verbose, debug=debug)
    configure_logging(debug=debug)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
    except BoolQueryError as e:
        error(str(e))
        ctx.exit(1)
        return

    app_ctx.config = loaded_config

    if not disable_color and not loaded_config.colored_output:
        set_color(False)

    # Show warnings unless quiet
    if not quiet:
        for warn in warnings:
            warning(warn)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    click.echo(group.get_help(ctx))


cli.add_command(init_config_cmd)
cli.add_command(parse_cmd)

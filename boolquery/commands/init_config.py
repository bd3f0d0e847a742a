"""Initialize configuration file for boolquery."""

from __future__ import annotations

from pathlib import Path

import click

from boolquery.context import Context, pass_context
from boolquery.config import Config, get_default_config_path, save_config
from boolquery.utils.output import error, success


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/boolquery/config.toml)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    Examples:

    \b
      # Create config at default location
      boolquery init-config

    \b
      # Create config at custom location
      boolquery init-config --output ./my-config.toml
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        written = save_config(Config(), config_path)
    except OSError as e:
        error(f"Failed to write config: {e}")
        raise SystemExit(1) from e

    if ctx.verbose or not ctx.quiet:
        success(f"Created config file: {written}")

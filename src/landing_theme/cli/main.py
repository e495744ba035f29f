"""Root command group of the landing-theme CLI."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import get_config, load_config
from .theme_cmds import get_theme_commands


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="landing-theme")
@click.pass_context
def main(ctx, config, verbose):
    """Landing Theme - accessible color tokens for landing pages."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Load configuration
    try:
        engine_config = load_config(Path(config)) if config else get_config()
    except (ValueError, TypeError, OSError) as e:
        Console(stderr=True).print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)
    ctx.obj['config'] = engine_config

    logging.basicConfig(
        level=logging.DEBUG if verbose else engine_config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


main.add_command(get_theme_commands())

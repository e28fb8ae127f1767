"""Mockery CLI - mockery command."""

from pathlib import Path

import click

from mockery import __version__
from mockery.cli.create import create_command
from mockery.cli.dump import dump_command
from mockery.cli.update import update_command
from mockery.config.loader import load_config
from mockery.core.errors import ConfigError
from mockery.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="mockery")
@click.option(
    "--compile-commands",
    type=click.Path(path_type=Path),
    help="Directory holding compile_commands.json (skips the search)",
)
@click.option(
    "-r",
    "--search-radius",
    type=click.IntRange(min=0),
    default=None,
    help="Directory hops to search for compile_commands.json [default: 2]",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    compile_commands: Path | None,
    search_radius: int | None,
    verbose: bool,
) -> None:
    """Mockery - generate Google Mock classes from C++ interfaces."""
    ctx.ensure_object(dict)
    overrides = {} if search_radius is None else {"search": {"radius": search_radius}}
    try:
        config = load_config(**overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    configure_logging(config=config.logging, level="DEBUG" if verbose else None)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    ctx.obj["compile_commands"] = compile_commands


cli.add_command(create_command, name="create")
cli.add_command(update_command, name="update")
cli.add_command(dump_command, name="dump")


if __name__ == "__main__":
    cli()

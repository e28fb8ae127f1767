"""mockery dump command - print the parsed AST."""

from pathlib import Path

import click

from mockery.cli.utils import open_app, reported_errors


@click.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.option("-c", "--class", "class_name", help="Dump only this class")
@click.pass_context
def dump_command(ctx: click.Context, source: Path, class_name: str | None) -> None:
    """Print the AST of SOURCE, or of one class in it.

    Each line shows an entity's name, kind, access, const marker, reference
    qualifier and exception specification, indented by depth.
    """
    with reported_errors(ctx):
        app = open_app(ctx, source)
        text = app.run_dump(class_name)
    click.echo(text, nl=False)

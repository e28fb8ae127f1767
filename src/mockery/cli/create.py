"""mockery create command - generate a Google Mock class for an interface."""

from pathlib import Path

import click

from mockery.cli.utils import open_app, reported_errors
from mockery.core.progress import status


def write_output(text: str, output: Path | None) -> None:
    """Print ``text`` to stdout, or write it to ``output`` with a trailing newline."""
    if output is None:
        click.echo(text)
        return
    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Failed to write {output}: {e.strerror or e}") from e
    status(f"Wrote {output}", style="success")


@click.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.option("-i", "--interface", "interface_name", help="Interface class (default: file stem)")
@click.option("-m", "--mock", "mock_name", help="Mock class name (default: <interface>Mock)")
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the mock here"
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print to stdout even with --output")
@click.pass_context
def create_command(
    ctx: click.Context,
    source: Path,
    interface_name: str | None,
    mock_name: str | None,
    output: Path | None,
    to_stdout: bool,
) -> None:
    """Generate a mock for the interface declared in SOURCE.

    SOURCE is a C++ file listed in the compilation database. The interface
    class defaults to the file's stem, so Foo.h mocks class Foo.
    """
    with reported_errors(ctx):
        app = open_app(ctx, source)
        text = app.run_create(interface_name, mock_name)
    write_output(text, None if to_stdout else output)

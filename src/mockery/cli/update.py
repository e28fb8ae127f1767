"""mockery update command - refresh an existing mock."""

from pathlib import Path

import click

from mockery.cli.utils import open_app, reported_errors


@click.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.option("-m", "--mock", "mock_name", help="Mock class to update")
@click.option("--dry-run", is_flag=True, help="Show what would change without writing")
@click.option("-d", "--diff", "show_diff", is_flag=True, help="Print a diff of the changes")
@click.option(
    "-p", "--patch", type=click.Path(dir_okay=False, path_type=Path), help="Write a patch file"
)
@click.pass_context
def update_command(
    ctx: click.Context,
    source: Path,
    mock_name: str | None,
    dry_run: bool,
    show_diff: bool,
    patch: Path | None,
) -> None:
    """Update the mock of the interface declared in SOURCE."""
    with reported_errors(ctx):
        app = open_app(ctx, source)
        app.run_update(mock_name)

"""CLI utilities."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
import structlog

from mockery.app import MockeryApp
from mockery.core.errors import MockeryError
from mockery.core.logging import bind_invocation, clear_invocation, get_log_file_path
from mockery.core.progress import status

log = structlog.get_logger()


@contextmanager
def reported_errors(ctx: click.Context) -> Iterator[None]:
    """Render a MockeryError once on stderr and exit with status 1."""
    try:
        yield
    except MockeryError as e:
        log.debug("cli.failed", **e.to_dict())
        status(e.message, style="error")
        log_file = get_log_file_path()
        if log_file is not None:
            status(f"Details in {log_file}", indent=2)
        ctx.exit(1)
    finally:
        clear_invocation()


def open_app(ctx: click.Context, source: Path) -> MockeryApp:
    """Parse ``source`` using the group-level options stored on the context."""
    bind_invocation(ctx.info_name or "mockery", source)
    obj = ctx.find_root().obj
    return MockeryApp.open(
        source,
        obj.get("compile_commands"),
        config=obj["config"],
        front_end=obj.get("front_end"),
    )

"""Structured logging for mockery runs.

structlog events are rendered by stdlib handlers, one per configured output
(stderr, stdout or a file), each with its own level and renderer. stdout
carries generated code, so the default output is stderr at WARNING.

Every event logged during a subcommand carries the invocation context bound
with :func:`bind_invocation` (command and source file).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from mockery.config.models import LoggingConfig, LogOutputConfig

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# First file output of the active configuration
_log_file_path: Path | None = None


def get_log_file_path() -> Path | None:
    """File that receives logs, if any; the CLI points at it after a failure."""
    return _log_file_path


def bind_invocation(command: str, source: Path | str) -> None:
    """Attach the running subcommand and its source file to subsequent events."""
    structlog.contextvars.bind_contextvars(command=command, source=str(source))


def clear_invocation() -> None:
    structlog.contextvars.unbind_contextvars("command", "source")


def _level(name: str | None, default: int = logging.WARNING) -> int:
    if name is None:
        return default
    return _LEVELS.get(name.upper(), default)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]


def _open_stream(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    is_console = output.destination in ("stderr", "stdout")
    stream = sys.stderr if output.destination == "stderr" else sys.stdout
    return structlog.dev.ConsoleRenderer(
        colors=is_console and stream.isatty(),
        pad_event_to=0,
        pad_level=False,
    )


def _build_handler(
    output: LogOutputConfig,
    root_level: int,
    shared: list[structlog.types.Processor],
) -> logging.Handler:
    handler = _open_stream(output.destination)
    handler.setLevel(_level(output.level, root_level))
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(output),
            foreign_pre_chain=shared,
        )
    )
    return handler


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str | None = None,
) -> None:
    """Route structlog through stdlib handlers built from ``config``.

    Args:
        config: Outputs and root level. Without it a single stderr output is
            used, rendered as JSON when ``json_format`` is set.
        json_format: Renderer for the implicit stderr output.
        level: Root level override (``--verbose`` passes DEBUG); takes
            precedence over ``config.level``.
    """
    global _log_file_path

    from mockery.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(outputs=[LogOutputConfig(format="json" if json_format else "console")])
    if level is not None:
        config = config.model_copy(update={"level": level})

    root_level = _level(config.level)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached so a later configure_logging() call takes effect
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    for output in config.outputs:
        root.addHandler(_build_handler(output, root_level, shared))

    _log_file_path = next(
        (Path(o.destination) for o in config.outputs if o.destination not in ("stderr", "stdout")),
        None,
    )

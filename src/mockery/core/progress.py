"""Status lines for the CLI, printed with rich on stderr.

stdout carries generated mock text and AST dumps, so nothing here may write
to it::

    status("Wrote FooMock.h", style="success")    # ✓ Wrote FooMock.h
    status("No interface class named `Foo`", style="error")
"""

from __future__ import annotations

import structlog
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "status.success": "green",
        "status.error": "bold red",
        "status.warning": "yellow",
    }
)

# Marker printed before the message, per style
_MARKERS = {
    "success": "✓",
    "error": "✗",
    "warning": "!",
    "info": " ",
    "none": "",
}

_console = Console(stderr=True, theme=_THEME)

log = structlog.get_logger()


def get_console() -> Console:
    return _console


def _prefix(style: str) -> str:
    marker = _MARKERS.get(style, "")
    if not marker:
        return ""
    if marker.isspace():
        return marker + " "
    return f"[status.{style}]{marker}[/status.{style}] "


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print ``message`` to stderr behind the marker for ``style``.

    Rich markup in ``message`` is escaped, so C++ spellings such as
    ``[[nodiscard]]`` come out verbatim.
    """
    line = " " * indent + _prefix(style) + escape(message)
    _console.print(line, highlight=False, soft_wrap=True)
    log.debug("cli.status", message=message, style=style)

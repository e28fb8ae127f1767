"""Locate the directory holding the compile commands database.

The database may sit in an ancestor of the source file (an in-source build),
in a sibling's subtree (``../build``) or below the source directory, so the
search radiates in both directions from the source file's directory.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from mockery.config.constants import COMPILE_COMMANDS_FILENAME
from mockery.core.errors import CompilationDatabaseError
from mockery.tree import DirectoryNode

log = structlog.get_logger()


def find_compilation_database(
    starting_point: Path,
    radius: int,
    marker: str = COMPILE_COMMANDS_FILENAME,
) -> Path:
    """Nearest directory within ``radius`` levels that contains ``marker``.

    Args:
        starting_point: Directory to search around (usually the source file's).
        radius: Maximum number of levels up or down.
        marker: Database file name.

    Raises:
        CompilationDatabaseError: If the starting point cannot be resolved or
            no directory within the radius contains the marker file.
    """
    try:
        start = starting_point.resolve(strict=True)
    except OSError as e:
        raise CompilationDatabaseError.bad_starting_point(str(starting_point), str(e)) from e

    log.debug("compdb.search.start", start=str(start), radius=radius, marker=marker)
    for directory in DirectoryNode(start).search(radius):
        if (directory / marker).is_file():
            log.debug("compdb.found", directory=str(directory))
            return directory

    raise CompilationDatabaseError.not_found(str(start), radius, marker)


def validate_compilation_database(path: Path, marker: str = COMPILE_COMMANDS_FILENAME) -> Path:
    """Check an explicitly given database location.

    ``path`` may be the database directory or the database file itself.

    Raises:
        CompilationDatabaseError: If the path does not exist or lacks the marker.
    """
    if not path.exists():
        raise CompilationDatabaseError.explicit_missing(str(path))
    directory = path.parent if path.is_file() and path.name == marker else path
    if not (directory / marker).is_file():
        raise CompilationDatabaseError.marker_missing(str(directory), marker)
    return directory.resolve()


def resolve_compilation_database_dir(
    source_file: Path,
    explicit: Path | None,
    radius: int,
    marker: str = COMPILE_COMMANDS_FILENAME,
) -> Path:
    """Database directory for ``source_file``; an explicit path skips the search."""
    if explicit is not None:
        return validate_compilation_database(explicit, marker)
    return find_compilation_database(source_file.parent, radius, marker)

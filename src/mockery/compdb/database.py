"""JSON compilation database (compile_commands.json) loading and lookup.

Each entry names a working directory, a source file and either a shell
``command`` string or an ``arguments`` array. Relative paths in an entry are
relative to its directory; nothing here changes the process working
directory.
"""

from __future__ import annotations

import json
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from mockery.config.constants import COMPILE_COMMANDS_FILENAME, MSVC_SOURCE_FLAGS, PATH_FLAGS
from mockery.core.errors import CompilationDatabaseError

log = structlog.get_logger()


class CompileCommandEntry(BaseModel):
    """One raw object of the JSON array."""

    directory: str
    file: str
    command: str | None = None
    arguments: list[str] | None = None
    output: str | None = None

    @model_validator(mode="after")
    def _require_command_or_arguments(self) -> CompileCommandEntry:
        if self.command is None and self.arguments is None:
            raise ValueError("entry needs either 'command' or 'arguments'")
        return self

    def argv(self) -> list[str]:
        if self.arguments is None:
            return shlex.split(self.command or "")
        return list(self.arguments)


_ENTRIES = TypeAdapter(list[CompileCommandEntry])


@dataclass(frozen=True)
class CompileCommand:
    """A resolved compiler invocation for one source file."""

    directory: Path
    filename: Path
    arguments: list[str] = field(default_factory=list)
    raw_filename: str = ""


def _resolve(directory: Path, path: str) -> Path:
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = directory / candidate
    return Path(os.path.normpath(candidate))


class CompilationDatabase:
    """In-memory view of a compile_commands.json file."""

    def __init__(self, path: Path, commands: list[CompileCommand]) -> None:
        self.path = path
        self.commands = commands

    @classmethod
    def from_directory(
        cls, directory: Path, marker: str = COMPILE_COMMANDS_FILENAME
    ) -> CompilationDatabase:
        return cls.from_file(directory / marker)

    @classmethod
    def from_file(cls, path: Path) -> CompilationDatabase:
        """Load and validate a database file.

        Raises:
            CompilationDatabaseError: If the file is unreadable, not JSON, or
                its entries do not match the compilation database format.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CompilationDatabaseError.invalid(str(path), str(e)) from e
        try:
            entries = _ENTRIES.validate_python(json.loads(text))
        except json.JSONDecodeError as e:
            raise CompilationDatabaseError.invalid(str(path), f"invalid JSON: {e}") from e
        except ValidationError as e:
            err = e.errors()[0]
            where = ".".join(str(loc) for loc in err["loc"])
            raise CompilationDatabaseError.invalid(str(path), f"{where}: {err['msg']}") from e

        base = path.parent
        commands = []
        for entry in entries:
            directory = _resolve(base, entry.directory)
            commands.append(
                CompileCommand(
                    directory=directory,
                    filename=_resolve(directory, entry.file),
                    arguments=entry.argv(),
                    raw_filename=entry.file,
                )
            )
        log.debug("compdb.loaded", path=str(path), entries=len(commands))
        return cls(path, commands)

    def get_compile_commands(self, source: Path) -> list[CompileCommand]:
        """All commands for ``source`` in database order."""
        wanted = Path(os.path.normpath(source.resolve()))
        return [c for c in self.commands if c.filename == wanted or _same_file(c.filename, wanted)]

    def first_command(self, source: Path) -> CompileCommand:
        """The command used to parse ``source``; later duplicates are ignored.

        Raises:
            CompilationDatabaseError: If no entry exists for the source file.
        """
        commands = self.get_compile_commands(source)
        if not commands:
            raise CompilationDatabaseError.no_command(str(source), str(self.path))
        if len(commands) > 1:
            log.debug("compdb.multiple_commands", source=str(source), count=len(commands))
        return commands[0]


def _same_file(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b
    except OSError:
        return False


def _absolutize(value: str, directory: Path) -> str:
    if not value or Path(value).is_absolute():
        return value
    return str(directory / value)


def parser_arguments(command: CompileCommand, extra_args: list[str] | None = None) -> list[str]:
    """Arguments to hand the front end when reparsing ``command``'s file.

    Drops the compiler executable, the source file itself and MSVC
    source-designation flags. Path arguments of include-style flags are
    resolved against the command's directory.
    """
    filenames = {command.raw_filename, str(command.filename)}
    args = command.arguments[1:]
    result: list[str] = []
    pending_path = False

    for arg in args:
        if pending_path:
            result.append(_absolutize(arg, command.directory))
            pending_path = False
            continue
        if arg in filenames or arg in MSVC_SOURCE_FLAGS:
            continue
        if _resolve(command.directory, arg) == command.filename:
            continue
        if arg in PATH_FLAGS:
            result.append(arg)
            pending_path = True
            continue
        result.append(_join_path_flag(arg, command.directory))

    return result + list(extra_args or [])


def _join_path_flag(arg: str, directory: Path) -> str:
    """Resolve joined path flags such as ``-Ifoo``, ``-isystemfoo`` or ``--sysroot=foo``."""
    # Longest first so no flag is mistaken for a shorter one it starts with
    for flag in sorted(PATH_FLAGS, key=len, reverse=True):
        prefix = f"{flag}=" if flag.startswith("--") else flag
        if arg.startswith(prefix) and len(arg) > len(prefix):
            return prefix + _absolutize(arg[len(prefix) :], directory)
    return arg

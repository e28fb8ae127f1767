"""Application orchestration: from a source file to mock text or an AST dump."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from mockery.ast.dump import dump_ast_to_string
from mockery.ast.entity import Entity
from mockery.ast.locate import class_definition, find_class_entity
from mockery.compdb.database import CompilationDatabase, parser_arguments
from mockery.compdb.locator import resolve_compilation_database_dir
from mockery.config.models import MockeryConfig
from mockery.core.errors import GenerationError, InternalError, SourceFileError
from mockery.mock.synthesis import generate_mock_definition

if TYPE_CHECKING:
    from mockery.ast.clang import FrontEnd

log = structlog.get_logger()


def canonicalize_source(source: Path) -> Path:
    """Absolute, symlink-free path of an existing source file.

    Raises:
        SourceFileError: If the file does not exist or cannot be resolved.
    """
    try:
        resolved = source.resolve(strict=True)
    except OSError as e:
        raise SourceFileError.unreadable(str(source), e.strerror or str(e)) from e
    if not resolved.is_file():
        raise SourceFileError.unreadable(str(source), "not a regular file")
    return resolved


def _default_front_end(config: MockeryConfig) -> FrontEnd:
    from mockery.ast.clang import ClangFrontEnd

    return ClangFrontEnd(config.parser.libclang_path)


class MockeryApp:
    """A parsed translation unit plus the settings to generate from it.

    Build one with :meth:`open`; each subcommand is a ``run_*`` method.
    """

    def __init__(self, source: Path, root: Entity, config: MockeryConfig) -> None:
        self.source = source
        self.root = root
        self.config = config

    @classmethod
    def open(
        cls,
        source: Path,
        compile_commands: Path | None = None,
        *,
        config: MockeryConfig | None = None,
        front_end: FrontEnd | None = None,
    ) -> MockeryApp:
        """Locate the compile command for ``source`` and parse it.

        Args:
            source: The C++ file holding the interface.
            compile_commands: Explicit database directory (or file); skips the
                proximity search when given.
            config: Resolved configuration; defaults apply when omitted.
            front_end: Parser producing the translation unit root; libclang
                when omitted.

        Raises:
            SourceFileError: If ``source`` cannot be resolved.
            CompilationDatabaseError: If no usable compile command is found.
            ParseError: If the front end fails.
        """
        config = config or MockeryConfig()
        source = canonicalize_source(source)
        marker = config.search.marker

        database_dir = resolve_compilation_database_dir(
            source, compile_commands, config.search.radius, marker
        )
        database = CompilationDatabase.from_directory(database_dir, marker)
        command = database.first_command(source)
        arguments = parser_arguments(command, config.parser.extra_args)
        log.info(
            "app.open",
            source=str(source),
            database=str(database.path),
            directory=str(command.directory),
        )

        if front_end is None:
            front_end = _default_front_end(config)
        root = front_end.parse(source, arguments)
        return cls(source, root, config)

    def run_create(self, interface_name: str | None = None, mock_name: str | None = None) -> str:
        """Mock class text for ``interface_name`` (default: the source file stem).

        Raises:
            GenerationError: If no class or struct of that name is in the
                translation unit.
        """
        interface_name = interface_name or self.source.stem
        found = find_class_entity(self.root, interface_name)
        if found is None:
            raise GenerationError.class_not_found(interface_name)
        interface = class_definition(found)

        generation = self.config.generation
        mock_name = mock_name or f"{interface.display_name or interface_name}{generation.mock_suffix}"
        log.info("app.create", interface=interface_name, mock=mock_name)
        return generate_mock_definition(interface, mock_name, generation.indent)

    def run_update(self, mock_name: str | None = None) -> str:
        raise InternalError.not_implemented("update")

    def run_dump(self, class_name: str | None = None) -> str:
        """AST dump of ``class_name``, or of the whole translation unit.

        A class that cannot be found falls back to the translation unit.
        """
        target = self.root
        if class_name is not None:
            found = find_class_entity(self.root, class_name)
            if found is None:
                log.warning("app.dump.class_not_found", class_name=class_name)
            else:
                target = found
        return dump_ast_to_string(target)

"""libclang front end.

Parses a translation unit with ``clang.cindex`` and exposes its cursors
through the ``Entity`` protocol. Cursors keep their translation unit alive,
so entities stay valid as long as any of them is referenced.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import structlog
from clang import cindex

from mockery.ast.entity import (
    Accessibility,
    Entity,
    EntityKind,
    ExceptionSpec,
    RefQualifier,
    Token,
    TokenKind,
)
from mockery.core.errors import ParseError

log = structlog.get_logger()

_KINDS = {
    cindex.CursorKind.TRANSLATION_UNIT: EntityKind.TRANSLATION_UNIT,
    cindex.CursorKind.NAMESPACE: EntityKind.NAMESPACE,
    cindex.CursorKind.CLASS_DECL: EntityKind.CLASS,
    cindex.CursorKind.STRUCT_DECL: EntityKind.STRUCT,
    cindex.CursorKind.CLASS_TEMPLATE: EntityKind.CLASS_TEMPLATE,
    cindex.CursorKind.CXX_BASE_SPECIFIER: EntityKind.BASE_SPECIFIER,
    cindex.CursorKind.CXX_METHOD: EntityKind.METHOD,
    cindex.CursorKind.PARM_DECL: EntityKind.PARAMETER,
    cindex.CursorKind.FIELD_DECL: EntityKind.FIELD,
}

_FUNCTION_KINDS = frozenset(
    {
        cindex.CursorKind.CXX_METHOD,
        cindex.CursorKind.FUNCTION_DECL,
        cindex.CursorKind.FUNCTION_TEMPLATE,
        cindex.CursorKind.CONSTRUCTOR,
        cindex.CursorKind.DESTRUCTOR,
        cindex.CursorKind.CONVERSION_FUNCTION,
    }
)

_ACCESS = {
    "PUBLIC": Accessibility.PUBLIC,
    "PROTECTED": Accessibility.PROTECTED,
    "PRIVATE": Accessibility.PRIVATE,
}

_REF_QUALIFIERS = {
    "LVALUE": RefQualifier.LVALUE,
    "RVALUE": RefQualifier.RVALUE,
}

_TOKEN_KINDS = {
    "PUNCTUATION": TokenKind.PUNCTUATION,
    "KEYWORD": TokenKind.KEYWORD,
    "IDENTIFIER": TokenKind.IDENTIFIER,
    "LITERAL": TokenKind.LITERAL,
    "COMMENT": TokenKind.COMMENT,
}


class FrontEnd(Protocol):
    """Produces the root entity of a parsed translation unit."""

    def parse(self, filename: Path, arguments: Sequence[str]) -> Entity: ...


class ClangEntity:
    """``Entity`` backed by a ``clang.cindex.Cursor``."""

    __slots__ = ("cursor",)

    def __init__(self, cursor: cindex.Cursor) -> None:
        self.cursor = cursor

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ClangEntity) and self.cursor == other.cursor

    def __hash__(self) -> int:
        return hash(self.cursor)

    def __repr__(self) -> str:
        return f"ClangEntity({self.kind_name} {self.name!r})"

    @property
    def kind(self) -> EntityKind:
        return _KINDS.get(self.cursor.kind, EntityKind.OTHER)

    @property
    def kind_name(self) -> str:
        return str(self.cursor.kind.name)

    @property
    def name(self) -> str | None:
        return self.cursor.spelling or None

    @property
    def display_name(self) -> str | None:
        return self.cursor.displayname or None

    @property
    def accessibility(self) -> Accessibility | None:
        return _ACCESS.get(self.cursor.access_specifier.name)

    @property
    def is_const_method(self) -> bool:
        return self.cursor.kind == cindex.CursorKind.CXX_METHOD and self.cursor.is_const_method()

    @property
    def ref_qualifier(self) -> RefQualifier:
        if self.cursor.kind not in _FUNCTION_KINDS:
            return RefQualifier.NONE
        return _REF_QUALIFIERS.get(self.cursor.type.get_ref_qualifier().name, RefQualifier.NONE)

    @property
    def exception_spec(self) -> ExceptionSpec | None:
        if self.cursor.kind not in _FUNCTION_KINDS:
            return None
        try:
            kind = self.cursor.exception_specification_kind
        except ValueError:
            # Bindings older than the library may not know newer kinds.
            log.debug("clang.unknown_exception_spec", entity=self.name)
            return None
        if kind.name == "NONE":
            return None
        try:
            return ExceptionSpec[kind.name]
        except KeyError:
            return None

    @property
    def is_pure_virtual(self) -> bool:
        return (
            self.cursor.kind == cindex.CursorKind.CXX_METHOD
            and self.cursor.is_pure_virtual_method()
        )

    @property
    def type_spelling(self) -> str | None:
        return self.cursor.type.spelling or None

    @property
    def result_type_spelling(self) -> str | None:
        if self.cursor.kind not in _FUNCTION_KINDS:
            return None
        return self.cursor.result_type.spelling or None

    def children(self) -> list[ClangEntity]:
        return [ClangEntity(c) for c in self.cursor.get_children()]

    def semantic_parent(self) -> ClangEntity | None:
        parent = self.cursor.semantic_parent
        return ClangEntity(parent) if parent is not None else None

    def arguments(self) -> list[ClangEntity]:
        if self.cursor.kind not in _FUNCTION_KINDS:
            return []
        return [ClangEntity(a) for a in self.cursor.get_arguments()]

    def tokens(self) -> list[Token]:
        return [
            Token(
                spelling=t.spelling,
                kind=_TOKEN_KINDS.get(t.kind.name, TokenKind.PUNCTUATION),
                start=t.extent.start.offset,
                end=t.extent.end.offset,
            )
            for t in self.cursor.get_tokens()
        ]

    def definition(self) -> ClangEntity | None:
        definition = self.cursor.get_definition()
        return ClangEntity(definition) if definition is not None else None

    def referenced(self) -> ClangEntity | None:
        referenced = self.cursor.referenced
        return ClangEntity(referenced) if referenced is not None else None


def _severity_name(severity: int) -> str:
    return {
        cindex.Diagnostic.Ignored: "ignored",
        cindex.Diagnostic.Note: "note",
        cindex.Diagnostic.Warning: "warning",
        cindex.Diagnostic.Error: "error",
        cindex.Diagnostic.Fatal: "fatal",
    }.get(severity, str(severity))


class ClangFrontEnd:
    """Parses C++ sources with libclang."""

    def __init__(self, libclang_path: str | None = None) -> None:
        if libclang_path and not cindex.Config.loaded:
            cindex.Config.set_library_file(libclang_path)
        self._index: cindex.Index | None = None

    def _get_index(self, filename: str) -> cindex.Index:
        if self._index is None:
            try:
                self._index = cindex.Index.create()
            except cindex.LibclangError as e:
                raise ParseError.failed(filename, f"libclang is unavailable: {e}") from e
        return self._index

    def parse(self, filename: Path, arguments: Sequence[str]) -> ClangEntity:
        """Parse ``filename`` with the given compiler arguments.

        Raises:
            ParseError: If libclang cannot be loaded or refuses the file.
        """
        return self._parse(str(filename), list(arguments), None)

    def parse_source(
        self, code: str, filename: str = "interface.cpp", arguments: Sequence[str] = ()
    ) -> ClangEntity:
        """Parse an in-memory buffer as if it were ``filename``."""
        return self._parse(filename, list(arguments), [(filename, code)])

    def _parse(
        self,
        filename: str,
        arguments: list[str],
        unsaved_files: list[tuple[str, str]] | None,
    ) -> ClangEntity:
        index = self._get_index(filename)
        log.debug("parse.start", filename=filename, arguments=arguments)
        try:
            tu = index.parse(filename, args=arguments, unsaved_files=unsaved_files)
        except cindex.TranslationUnitLoadError as e:
            raise ParseError.failed(filename, str(e)) from e

        for diagnostic in tu.diagnostics:
            if diagnostic.severity >= cindex.Diagnostic.Error:
                log.warning(
                    "parse.diagnostic",
                    severity=_severity_name(diagnostic.severity),
                    message=diagnostic.spelling,
                    location=f"{diagnostic.location.file}:{diagnostic.location.line}",
                )
        return ClangEntity(tu.cursor)

"""Read-only view of a parsed C++ translation unit.

The core never builds or mutates AST nodes; it walks entities handed out by a
front end (see ``mockery.ast.clang``). ``Entity`` is the structural protocol
those handles satisfy.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class EntityKind(str, Enum):
    """Entity kinds the mock generator distinguishes."""

    TRANSLATION_UNIT = "translation_unit"
    NAMESPACE = "namespace"
    CLASS = "class"
    STRUCT = "struct"
    CLASS_TEMPLATE = "class_template"
    BASE_SPECIFIER = "base_specifier"
    METHOD = "method"
    PARAMETER = "parameter"
    FIELD = "field"
    OTHER = "other"


CLASS_KINDS = frozenset({EntityKind.CLASS, EntityKind.STRUCT})


class Accessibility(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class RefQualifier(str, Enum):
    """Method reference qualifier (``&`` / ``&&`` after the parameter list)."""

    NONE = "none"
    LVALUE = "lvalue"
    RVALUE = "rvalue"


class ExceptionSpec(str, Enum):
    """Exception specification of a function; absent specs are ``None``."""

    BASIC_NOEXCEPT = "basic_noexcept"
    COMPUTED_NOEXCEPT = "computed_noexcept"
    DYNAMIC_NONE = "dynamic_none"
    DYNAMIC = "dynamic"
    MS_ANY = "ms_any"
    NOTHROW = "nothrow"
    UNEVALUATED = "unevaluated"
    UNINSTANTIATED = "uninstantiated"
    UNPARSED = "unparsed"


class TokenKind(str, Enum):
    PUNCTUATION = "punctuation"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token with its byte offsets in the original source."""

    spelling: str
    kind: TokenKind
    start: int
    end: int


@runtime_checkable
class Entity(Protocol):
    """Handle to one AST entity, valid while its translation unit lives."""

    @property
    def kind(self) -> EntityKind: ...

    @property
    def kind_name(self) -> str:
        """Front-end specific kind name, used for dumps."""
        ...

    @property
    def name(self) -> str | None: ...

    @property
    def display_name(self) -> str | None: ...

    @property
    def accessibility(self) -> Accessibility | None: ...

    @property
    def is_const_method(self) -> bool: ...

    @property
    def ref_qualifier(self) -> RefQualifier: ...

    @property
    def exception_spec(self) -> ExceptionSpec | None: ...

    @property
    def is_pure_virtual(self) -> bool: ...

    @property
    def type_spelling(self) -> str | None:
        """The front end's display name of the entity's type."""
        ...

    @property
    def result_type_spelling(self) -> str | None:
        """The front end's display name of a function's result type."""
        ...

    def children(self) -> Sequence[Entity]: ...

    def semantic_parent(self) -> Entity | None: ...

    def arguments(self) -> Sequence[Entity]:
        """Parameter entities of a function, in declaration order."""
        ...

    def tokens(self) -> Sequence[Token]:
        """Tokens of the entity's source range, comments included."""
        ...

    def definition(self) -> Entity | None:
        """Defining declaration, if visible in the translation unit."""
        ...

    def referenced(self) -> Entity | None:
        """Entity a reference (e.g. a base specifier) points to."""
        ...


def semantic_parents(entity: Entity) -> list[Entity]:
    """Enclosing scopes of ``entity``, innermost first, excluding the root.

    The entity itself leads the list; the translation unit (the one scope
    without a parent) is left out.
    """
    chain: list[Entity] = []
    current: Entity | None = entity
    while current is not None:
        parent = current.semantic_parent()
        if parent is None:
            break
        chain.append(current)
        current = parent
    return chain


def qualified_name(entity: Entity) -> str:
    """``Outer::Inner::Name`` spelling of ``entity`` from the global scope."""
    names = [e.display_name or "" for e in semantic_parents(entity)]
    return "::".join(reversed(names))

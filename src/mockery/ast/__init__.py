"""AST access: entity protocol, libclang front end, class lookup, dumps."""

from mockery.ast.dump import dump_ast, dump_ast_to_string
from mockery.ast.entity import (
    CLASS_KINDS,
    Accessibility,
    Entity,
    EntityKind,
    ExceptionSpec,
    RefQualifier,
    Token,
    TokenKind,
    qualified_name,
    semantic_parents,
)
from mockery.ast.locate import class_definition, find_class_entity

__all__ = [
    "CLASS_KINDS",
    "Accessibility",
    "Entity",
    "EntityKind",
    "ExceptionSpec",
    "RefQualifier",
    "Token",
    "TokenKind",
    "class_definition",
    "dump_ast",
    "dump_ast_to_string",
    "find_class_entity",
    "qualified_name",
    "semantic_parents",
]

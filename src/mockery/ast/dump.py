"""Textual AST dumps for the ``dump`` subcommand."""

from __future__ import annotations

from mockery.ast.entity import Entity, RefQualifier


def _optional(value: str | None) -> str:
    return "None" if value is None else value


def format_entity_line(entity: Entity, depth: int) -> str:
    """One dump line: ``"name": KIND (access, const, ref, exception)``."""
    access = entity.accessibility.name if entity.accessibility is not None else None
    const = '"const"' if entity.is_const_method else None
    ref = entity.ref_qualifier.name if entity.ref_qualifier is not RefQualifier.NONE else None
    exception = entity.exception_spec.name if entity.exception_spec is not None else None
    indent = "\t" * depth
    return (
        f'{indent}"{entity.name or ""}": {entity.kind_name} '
        f"({_optional(access)}, {_optional(const)}, {_optional(ref)}, {_optional(exception)})"
    )


def dump_ast(entity: Entity, depth: int = 0) -> list[str]:
    """Dump lines for ``entity`` and its subtree, pre-order."""
    lines = [format_entity_line(entity, depth)]
    for child in entity.children():
        lines.extend(dump_ast(child, depth + 1))
    return lines


def dump_ast_to_string(entity: Entity) -> str:
    return "\n".join(dump_ast(entity)) + "\n"

"""Find a class by name in a translation unit."""

from __future__ import annotations

from mockery.ast.entity import CLASS_KINDS, Entity


def find_class_entity(root: Entity, class_name: str) -> Entity | None:
    """First class or struct named ``class_name``, searched level by level.

    Every entity of a level is checked before any of their children, so a
    class at namespace scope wins over a nested class of the same name. Among
    matches on one level, child enumeration order decides. Entities of other
    kinds (variables, functions, namespaces) never match.
    """
    level = list(root.children())
    while level:
        for entity in level:
            if entity.kind in CLASS_KINDS and entity.name == class_name:
                return entity
        level = [child for entity in level for child in entity.children()]
    return None


def class_definition(entity: Entity) -> Entity:
    """The defining declaration of a class, or the entity itself if none is visible."""
    definition = entity.definition()
    return definition if definition is not None else entity

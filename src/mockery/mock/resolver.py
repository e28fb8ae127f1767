"""Resolve the pure-virtual methods an interface inherits and declares."""

from __future__ import annotations

import structlog

from mockery.ast.entity import Entity, EntityKind
from mockery.ast.locate import class_definition

log = structlog.get_logger()


def direct_bases(class_entity: Entity) -> list[Entity]:
    """Defining declarations of the classes named in the base-specifier list.

    Public, protected and private bases are all followed.
    """
    bases: list[Entity] = []
    for child in class_entity.children():
        if child.kind is not EntityKind.BASE_SPECIFIER:
            continue
        target = child.referenced()
        if target is None:
            log.debug("mock.unresolved_base", base=child.display_name)
            continue
        bases.append(class_definition(target))
    return bases


def base_closure(class_entity: Entity) -> list[Entity]:
    """All direct and indirect bases, every ancestor ahead of the class deriving from it.

    Not deduplicated: in a diamond, the shared ancestor is listed once per
    path through which it is inherited.
    """
    closure: list[Entity] = []
    for base in direct_bases(class_entity):
        closure.extend(base_closure(base))
        closure.append(base)
    return closure


def abstract_methods(class_entity: Entity) -> list[Entity]:
    """Pure-virtual methods of the bases (ancestors first), then of the class itself.

    Within one class, methods keep their declaration order.
    """
    methods: list[Entity] = []
    for scope in [*base_closure(class_entity), class_entity]:
        methods.extend(child for child in scope.children() if child.is_pure_virtual)
    return methods

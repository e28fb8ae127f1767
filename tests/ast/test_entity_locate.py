"""Tests for finding interface classes in a translation unit."""

from mockery.ast import EntityKind, class_definition, find_class_entity
from tests.fakes import (
    FakeEntity,
    class_,
    forward_declaration,
    method,
    namespace,
    struct,
    translation_unit,
    variable,
)


class TestFindClassEntity:
    """Level-order, kind-filtered lookup."""

    def test_finds_top_level_struct(self) -> None:
        foo = struct("Foo")
        root = translation_unit(struct("Bar"), foo)
        assert find_class_entity(root, "Foo") is foo

    def test_non_class_entity_with_same_name_never_matches(self) -> None:
        """A variable named like the class is skipped even though it comes first."""
        foo = class_("Foo")
        root = translation_unit(variable("Foo"), FakeEntity(EntityKind.FIELD, "Foo"), foo)
        assert find_class_entity(root, "Foo") is foo

    def test_namespace_with_same_name_is_not_a_class(self) -> None:
        inner = class_("Foo")
        root = translation_unit(namespace("Foo", inner))
        assert find_class_entity(root, "Foo") is inner

    def test_class_template_is_not_an_interface(self) -> None:
        root = translation_unit(FakeEntity(EntityKind.CLASS_TEMPLATE, "Box"))
        assert find_class_entity(root, "Box") is None

    def test_finds_class_inside_namespace(self) -> None:
        widget = class_("Widget")
        root = translation_unit(namespace("ui", namespace("detail", widget)))
        assert find_class_entity(root, "Widget") is widget

    def test_shallower_match_wins(self) -> None:
        """A nested class is only found if no class of that name sits closer to the root."""
        nested = class_("Foo")
        shallow = class_("Foo")
        root = translation_unit(namespace("a", class_("Outer", nested)), namespace("b", shallow))
        assert find_class_entity(root, "Foo") is shallow

    def test_earlier_sibling_wins(self) -> None:
        first = struct("Foo")
        root = translation_unit(first, class_("Foo"))
        assert find_class_entity(root, "Foo") is first

    def test_missing_class_returns_none(self) -> None:
        root = translation_unit(class_("Bar", method("virtual void Foo() = 0;", "Foo")))
        assert find_class_entity(root, "Foo") is None

    def test_root_itself_is_not_a_candidate(self) -> None:
        root = translation_unit()
        root.name = "Foo"
        assert find_class_entity(root, "Foo") is None


class TestClassDefinition:
    """Forward declarations resolve to their definitions."""

    def test_forward_declaration_resolves_to_definition(self) -> None:
        definition = class_("Foo", method("virtual void f() = 0;", "f"))
        declaration = forward_declaration(definition)
        root = translation_unit(declaration, definition)

        found = find_class_entity(root, "Foo")

        assert found is declaration
        assert class_definition(found) is definition

    def test_declaration_without_definition_is_kept(self) -> None:
        declaration = FakeEntity(EntityKind.CLASS, "Foo")
        assert class_definition(declaration) is declaration

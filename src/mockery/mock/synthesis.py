"""Google Mock class text for an interface's pure-virtual methods."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from mockery.ast.entity import Entity, ExceptionSpec, RefQualifier, qualified_name
from mockery.config.constants import MOCK_MACRO
from mockery.mock.resolver import abstract_methods
from mockery.mock.spelling import parameter_type_spelling, result_type_spelling

log = structlog.get_logger()

_REF_ATTRIBUTES = {
    RefQualifier.LVALUE: "ref(&)",
    RefQualifier.RVALUE: "ref(&&)",
}


def protect_commas(spelling: str) -> str:
    """Parenthesize a type whose commas would split a macro argument.

    Only commas outside parentheses need protection; ``pair<int, double>``
    does, ``function<void(int, int)>`` does not.
    """
    depth = 0
    for char in spelling:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            return f"({spelling})"
    return spelling


def method_attributes(method: Entity) -> list[str]:
    """Qualifiers for the fourth MOCK_METHOD argument; ``override`` comes last."""
    attributes = []
    if method.is_const_method:
        attributes.append("const")
    if method.ref_qualifier in _REF_ATTRIBUTES:
        attributes.append(_REF_ATTRIBUTES[method.ref_qualifier])
    if method.exception_spec is ExceptionSpec.BASIC_NOEXCEPT:
        attributes.append("noexcept")
    attributes.append("override")
    return attributes


def format_mock_method(method: Entity) -> str:
    """``MOCK_METHOD(<return>, <name>, (<params>), (<attributes>));``"""
    parameters = ", ".join(protect_commas(parameter_type_spelling(p)) for p in method.arguments())
    return (
        f"{MOCK_MACRO}({protect_commas(result_type_spelling(method))}, {method.name}, "
        f"({parameters}), ({', '.join(method_attributes(method))}));"
    )


@dataclass
class MockDefinition:
    """A generated mock class, ready to render."""

    class_name: str
    base: str
    methods: list[str] = field(default_factory=list)

    def render(self, indent: str = "    ") -> str:
        body = "".join(f"{indent}{method}\n" for method in self.methods)
        return f"struct {self.class_name} : {self.base} {{\n{body}}};"


def build_mock_definition(interface: Entity, mock_class_name: str) -> MockDefinition:
    """Mock of ``interface`` covering every inherited and declared pure-virtual method."""
    methods = []
    for method in abstract_methods(interface):
        line = format_mock_method(method)
        log.debug("mock.method", method=method.name, declaration=line)
        methods.append(line)
    return MockDefinition(
        class_name=mock_class_name,
        base=qualified_name(interface),
        methods=methods,
    )


def generate_mock_definition(interface: Entity, mock_class_name: str, indent: str = "    ") -> str:
    return build_mock_definition(interface, mock_class_name).render(indent)

"""Mock generation: abstract method resolution, type spellings, MOCK_METHOD text."""

from mockery.mock.resolver import abstract_methods, base_closure, direct_bases
from mockery.mock.spelling import (
    parameter_type_spelling,
    reconstruct_spelling,
    result_type_spelling,
)
from mockery.mock.synthesis import (
    MockDefinition,
    build_mock_definition,
    format_mock_method,
    generate_mock_definition,
    method_attributes,
    protect_commas,
)

__all__ = [
    "MockDefinition",
    "abstract_methods",
    "base_closure",
    "build_mock_definition",
    "direct_bases",
    "format_mock_method",
    "generate_mock_definition",
    "method_attributes",
    "parameter_type_spelling",
    "protect_commas",
    "reconstruct_spelling",
    "result_type_spelling",
]

"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py.
"""

# =============================================================================
# Compilation Database
# =============================================================================

COMPILE_COMMANDS_FILENAME = "compile_commands.json"
"""Default marker file for the database directory."""

DEFAULT_SEARCH_RADIUS = 2
"""Default proximity search radius around the source file's directory."""

MSVC_SOURCE_FLAGS = frozenset({"/Tc", "/TC", "/Tp", "/TP"})
"""MSVC source-designation flags; they would re-add the source file when reparsing."""

PATH_FLAGS = (
    "-I",
    "-isystem",
    "-iquote",
    "-idirafter",
    "-include",
    "-imacros",
    "-isysroot",
    "--sysroot",
    "-F",
)
"""Compiler flags whose value is a path relative to the command's directory."""

# =============================================================================
# Mock Generation
# =============================================================================

MOCK_MACRO = "MOCK_METHOD"
"""Google Mock macro emitted per pure-virtual method."""

DECL_SPECIFIERS = frozenset({"virtual", "static", "inline", "constexpr", "explicit", "friend"})
"""Declaration specifiers that precede a method's return type but are not part of it."""

VIRT_SPECIFIERS = frozenset({"override", "final"})
"""C++ virt-specifiers; either one also ends a trailing return type."""

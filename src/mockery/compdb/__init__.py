"""Compilation database discovery and compile command resolution."""

from mockery.compdb.database import (
    CompilationDatabase,
    CompileCommand,
    CompileCommandEntry,
    parser_arguments,
)
from mockery.compdb.locator import (
    find_compilation_database,
    resolve_compilation_database_dir,
    validate_compilation_database,
)

__all__ = [
    "CompilationDatabase",
    "CompileCommand",
    "CompileCommandEntry",
    "find_compilation_database",
    "parser_arguments",
    "resolve_compilation_database_dir",
    "validate_compilation_database",
]

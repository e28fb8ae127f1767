"""Mockery error types with typed error codes.

Error code ranges:
- 1xxx: Source file
- 2xxx: Config
- 3xxx: Compilation database
- 4xxx: Parse
- 5xxx: Generation
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Source file (1xxx)
    SOURCE_UNREADABLE = 1001

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Compilation database (3xxx)
    COMPDB_EXPLICIT_MISSING = 3001
    COMPDB_MARKER_MISSING = 3002
    COMPDB_NOT_FOUND = 3003
    COMPDB_BAD_STARTING_POINT = 3004
    COMPDB_INVALID = 3005
    COMPDB_NO_COMMAND = 3006

    # Parse (4xxx)
    PARSE_FAILED = 4001

    # Generation (5xxx)
    CLASS_NOT_FOUND = 5001

    # Internal (9xxx)
    INTERNAL_ERROR = 9001
    NOT_IMPLEMENTED = 9003


@dataclass(frozen=True, slots=True)
class MockeryError(Exception):
    """Base error with structured context for CLI rendering."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'COMPDB_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class SourceFileError(MockeryError):
    """The source file handed to a subcommand is unusable."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "SourceFileError":
        return cls(
            code=ErrorCode.SOURCE_UNREADABLE,
            message=f"Failed to open source file {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ConfigError(MockeryError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CompilationDatabaseError(MockeryError):
    """Locating or reading the compile commands database failed."""

    @classmethod
    def explicit_missing(cls, path: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_EXPLICIT_MISSING,
            message=f"Compile commands database path does not exist: {path}",
            details={"path": path},
        )

    @classmethod
    def marker_missing(cls, path: str, marker: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_MARKER_MISSING,
            message=f"Could not find {marker} in the specified directory {path}",
            details={"path": path, "marker": marker},
        )

    @classmethod
    def not_found(cls, start: str, radius: int, marker: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_NOT_FOUND,
            message=(
                f"Could not find {marker} within a search radius of {radius} around {start}"
            ),
            details={"start": start, "radius": radius, "marker": marker},
        )

    @classmethod
    def bad_starting_point(cls, path: str, reason: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_BAD_STARTING_POINT,
            message=(
                f"Could not find the starting point '{path}' for the compile commands "
                f"database search: {reason}"
            ),
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid(cls, path: str, reason: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_INVALID,
            message=f"Malformed compile commands database {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def no_command(cls, source: str, database: str) -> "CompilationDatabaseError":
        return cls(
            code=ErrorCode.COMPDB_NO_COMMAND,
            message=f"Failed to find compile command for {source} in database {database}",
            details={"source": source, "database": database},
        )


class ParseError(MockeryError):
    """The C++ front end could not produce a translation unit."""

    @classmethod
    def failed(cls, path: str, reason: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_FAILED,
            message=f"The source file {path} could not be parsed: {reason}",
            details={"path": path, "reason": reason},
        )


class GenerationError(MockeryError):
    """Mock generation could not proceed."""

    @classmethod
    def class_not_found(cls, name: str) -> "GenerationError":
        return cls(
            code=ErrorCode.CLASS_NOT_FOUND,
            message=(
                f"No interface class named `{name}` was found in the specified "
                "translation unit"
            ),
            details={"name": name},
        )


class InternalError(MockeryError):
    """Internal/unexpected errors."""

    @classmethod
    def not_implemented(cls, feature: str) -> "InternalError":
        return cls(
            code=ErrorCode.NOT_IMPLEMENTED,
            message=f"Not yet implemented: {feature}",
            details={"feature": feature},
        )

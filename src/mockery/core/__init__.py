"""Core module exports."""

from mockery.core.errors import (
    CompilationDatabaseError,
    ConfigError,
    ErrorCode,
    GenerationError,
    InternalError,
    MockeryError,
    ParseError,
    SourceFileError,
)
from mockery.core.logging import (
    bind_invocation,
    clear_invocation,
    configure_logging,
    get_log_file_path,
)
from mockery.core.progress import get_console, status

__all__ = [
    # Errors
    "CompilationDatabaseError",
    "ConfigError",
    "ErrorCode",
    "GenerationError",
    "InternalError",
    "MockeryError",
    "ParseError",
    "SourceFileError",
    # Logging
    "bind_invocation",
    "clear_invocation",
    "configure_logging",
    "get_log_file_path",
    # Console
    "get_console",
    "status",
]

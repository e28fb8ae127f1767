"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI options land here)
2. Environment variables (MOCKERY__SECTION__KEY)
3. Project YAML (.mockery.yaml in the working directory)
4. Global YAML (~/.config/mockery/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    MOCKERY__<SECTION>__<KEY>=<VALUE>

Examples:
    MOCKERY__LOGGING__LEVEL=DEBUG
    MOCKERY__SEARCH__RADIUS=4
    MOCKERY__PARSER__LIBCLANG_PATH=/usr/lib/llvm-17/lib/libclang.so
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mockery.config.constants import COMPILE_COMMANDS_FILENAME, DEFAULT_SEARCH_RADIUS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        MOCKERY__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Use --verbose for DEBUG.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SearchConfig(BaseModel):
    """Compile commands database search.

    Env vars:
        MOCKERY__SEARCH__RADIUS: Levels up or down around the source file
        MOCKERY__SEARCH__MARKER: File name that marks the database directory
    """

    radius: int = Field(
        default=DEFAULT_SEARCH_RADIUS,
        description="Directories up to this many levels away from the source file "
        "(toward the root or into subdirectories) are searched.",
    )
    marker: str = Field(
        default=COMPILE_COMMANDS_FILENAME,
        description="Name of the compilation database file.",
    )

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Search radius must be non-negative, got {v}")
        return v

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"Marker must be a plain file name: {v!r}")
        return v


class ParserConfig(BaseModel):
    """C++ front end configuration.

    Env vars:
        MOCKERY__PARSER__LIBCLANG_PATH: Explicit libclang shared library
    """

    libclang_path: str | None = Field(
        default=None,
        description="Path to the libclang shared library. Default: the library "
        "bundled with the clang bindings.",
    )
    extra_args: list[str] = Field(
        default_factory=list,
        description="Arguments appended to the compile command, e.g. -Wno-everything.",
    )


class GenerationConfig(BaseModel):
    """Mock class text generation.

    Env vars:
        MOCKERY__GENERATION__MOCK_SUFFIX: Suffix for the default mock name
        MOCKERY__GENERATION__INDENT: Indentation of MOCK_METHOD lines
    """

    mock_suffix: str = Field(
        default="Mock",
        description="Default mock class name is the interface name plus this suffix.",
    )
    indent: str = Field(
        default="    ",
        description="Indentation placed before each MOCK_METHOD line.",
    )

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        if v.strip():
            raise ValueError("Indent must consist of whitespace only")
        return v


class MockeryConfig(BaseModel):
    """Root configuration for mockery.

    All settings can be configured via:
    1. Environment variables: MOCKERY__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

"""Config module exports."""

from mockery.config.loader import load_config
from mockery.config.models import (
    GenerationConfig,
    LoggingConfig,
    LogOutputConfig,
    MockeryConfig,
    ParserConfig,
    SearchConfig,
)

__all__ = [
    "load_config",
    "MockeryConfig",
    "GenerationConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ParserConfig",
    "SearchConfig",
]

"""Core infrastructure for complexity-engine."""

from complexity_engine.core.config import (
    CliSettings,
    parse_args_and_get_config,
    validate_config_file,
)
from complexity_engine.core.exceptions import (
    AnalysisError,
    CalculationError,
    ComplexityEngineError,
    ConfigurationError,
    FileSystemError,
    InvalidFileTypeError,
    ValidationError,
)
from complexity_engine.core.logging import (
    configure_logging,
    get_logger,
)
from complexity_engine.core.sentry import (
    init_sentry,
)

__all__ = [
    # Exceptions
    "ComplexityEngineError",
    "AnalysisError",
    "InvalidFileTypeError",
    "FileSystemError",
    "ValidationError",
    "ConfigurationError",
    "CalculationError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "CliSettings",
    "validate_config_file",
    "parse_args_and_get_config",
    # Sentry
    "init_sentry",
]

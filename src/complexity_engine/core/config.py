"""Configuration management for complexity-engine."""

import argparse
import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from complexity_engine.constants import AnalysisDefaults, EnvVars, LoggingDefaults
from complexity_engine.core.exceptions import ConfigurationError
from complexity_engine.core.logging import configure_logging, get_logger
from complexity_engine.models.config import EngineConfig


@dataclass
class CliSettings:
    """Resolved command-line settings."""

    path: str
    config: EngineConfig = field(default_factory=EngineConfig)
    config_path: Optional[str] = None
    log_level: str = LoggingDefaults.DEFAULT_LEVEL
    log_file: Optional[str] = None


def validate_config_file(config_path: str) -> EngineConfig:
    """Load and validate a YAML config file.

    Args:
        config_path: Path to the YAML config file

    Returns:
        Validated EngineConfig model

    Raises:
        ConfigurationError: If config file is invalid
    """
    if not os.path.exists(config_path):
        raise ConfigurationError(config_path, "File does not exist")

    if not os.path.isfile(config_path):
        raise ConfigurationError(config_path, "Path is not a file")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(config_path, f"YAML parsing failed: {e}") from e
    except OSError as e:
        raise ConfigurationError(config_path, f"Failed to read file: {e}") from e

    if config_data is None:
        raise ConfigurationError(config_path, "Config file is empty")

    if not isinstance(config_data, dict):
        raise ConfigurationError(config_path, "Config must be a YAML dictionary")

    try:
        return EngineConfig(**config_data)
    except PydanticValidationError as e:
        raise ConfigurationError(config_path, f"Validation failed: {e}") from e


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Analysis flags default to None so that values from the config file are
    only overridden when a flag is actually given.
    """
    parser = argparse.ArgumentParser(
        prog="complexity-engine",
        description="Analyze cyclomatic, cognitive, Halstead and maintainability metrics "
                    "of TypeScript/JavaScript files and directories",
        epilog=f"""
environment variables:
  {EnvVars.CONFIG}  Path to a YAML config file (overridden by --config)
  {EnvVars.LOG_LEVEL}                 Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  {EnvVars.LOG_FILE}                  Path to log file (logs to stderr by default)
  {EnvVars.SENTRY_DSN}                Enables Sentry error reporting when set
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="File or directory to analyze")
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="YAML config file overriding thresholds and analysis options",
    )
    parser.add_argument(
        "--recursive",
        dest="recursive",
        action="store_true",
        default=None,
        help="Descend into subdirectories (default)",
    )
    parser.add_argument(
        "--no-recursive",
        dest="recursive",
        action="store_false",
        default=None,
        help="Only analyze files directly inside the target directory",
    )
    parser.add_argument(
        "--format",
        choices=list(AnalysisDefaults.FORMATS),
        default=None,
        help="Output format: full tree (detailed) or root node only (summary)",
    )
    parser.add_argument(
        "--include-halstead",
        dest="include_halstead",
        action="store_true",
        default=None,
        help="Compute Halstead metrics",
    )
    parser.add_argument(
        "--no-maintainability",
        dest="include_maintainability",
        action="store_false",
        default=None,
        help="Skip the maintainability index",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(LoggingDefaults.LEVELS),
        default=None,
        metavar="LEVEL",
        help=f"Logging level. Can also be set via {EnvVars.LOG_LEVEL} env var. Default: INFO",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help=f"Path to log file (stderr by default). Can also be set via {EnvVars.LOG_FILE} env var.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> tuple[Optional[str], EngineConfig]:
    """Resolve the config file path and load it.

    Precedence: --config flag > COMPLEXITY_ENGINE_CONFIG env > built-in defaults

    Raises:
        ConfigurationError: If the selected config file is invalid
    """
    config_path = args.config or os.environ.get(EnvVars.CONFIG) or None
    if config_path is None:
        return None, EngineConfig()
    return config_path, validate_config_file(config_path)


def _apply_flag_overrides(args: argparse.Namespace, config: EngineConfig) -> EngineConfig:
    """Overlay explicitly given CLI flags on the analysis section."""
    overrides = {
        name: getattr(args, name)
        for name in ("recursive", "format", "include_halstead", "include_maintainability")
        if getattr(args, name) is not None
    }
    if not overrides:
        return config
    analysis = config.analysis.model_copy(update=overrides)
    return config.model_copy(update={"analysis": analysis})


def parse_args_and_get_config(argv: Optional[List[str]] = None) -> CliSettings:
    """Parse command-line arguments, load config and configure logging.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Resolved CliSettings

    Raises:
        ConfigurationError: If the config file is invalid
    """
    args = _create_argument_parser().parse_args(argv)

    # Precedence: flag > env > default
    log_level = args.log_level or os.environ.get(EnvVars.LOG_LEVEL, LoggingDefaults.DEFAULT_LEVEL)
    log_file = args.log_file or os.environ.get(EnvVars.LOG_FILE)
    configure_logging(log_level=log_level, log_file=log_file)

    config_path, config = _resolve_config(args)
    config = _apply_flag_overrides(args, config)

    get_logger("config").debug(
        "config_resolved",
        config_path=config_path,
        analysis=config.analysis.model_dump(),
    )

    return CliSettings(
        path=args.path,
        config=config,
        config_path=config_path,
        log_level=log_level,
        log_file=log_file,
    )

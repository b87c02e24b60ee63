"""Structured logging setup for complexity-engine.

Every component logs snake_case events with key/value context through
structlog. Output goes to stderr so JSON results printed by the CLI on
stdout stay machine-readable.
"""
import sys
from typing import Any, List, Optional, TextIO

import structlog

from complexity_engine.constants import LoggingDefaults

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


def _resolve_level(log_level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    return _LEVELS.get(log_level.upper(), _LEVELS[LoggingDefaults.DEFAULT_LEVEL])


def _build_processors(json_output: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    log_level: str = LoggingDefaults.DEFAULT_LEVEL,
    log_file: Optional[str] = None,
    json_output: bool = True,
) -> None:
    """Configure structlog for the engine.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path to append logs to (stderr by default)
        json_output: Render JSON lines (True) or plain key=value text (False)
    """
    stream: TextIO = sys.stderr if log_file is None else open(log_file, "a", encoding="utf-8")

    structlog.configure(
        processors=_build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(log_level)),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a logger bound to a component name.

    Args:
        name: Component name, e.g. ``complexity.aggregator``

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name)

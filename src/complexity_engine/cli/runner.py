"""CLI entry point."""

import json
import sys
from typing import List, Optional

from complexity_engine.core.config import parse_args_and_get_config
from complexity_engine.core.exceptions import ComplexityEngineError, ConfigurationError
from complexity_engine.core.logging import get_logger
from complexity_engine.core.sentry import init_sentry
from complexity_engine.features.complexity.tools import analyze_complexity_tool


def main(argv: Optional[List[str]] = None) -> int:
    """Run one analysis and print the JSON result to stdout.

    This function:
    1. Parses command-line arguments, configures logging and loads config
    2. Initializes Sentry error tracking (if configured)
    3. Analyzes the requested path
    4. Prints the result, or the error response on failure

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on analysis or config errors
    """
    try:
        settings = parse_args_and_get_config(argv)
    except ConfigurationError as e:
        get_logger("config").error("config_validation_failed", config_path=e.config_path, error=e.reason)
        print(str(e), file=sys.stderr)
        return 1

    init_sentry()

    try:
        output = analyze_complexity_tool(
            settings.path,
            thresholds=settings.config.to_thresholds(),
            options=settings.config.to_options(),
        )
    except ComplexityEngineError as e:
        print(json.dumps(e.to_response(), indent=2))
        return 1

    print(json.dumps(output, indent=2))
    return 0


def run_cli() -> None:
    """Console script entry point."""
    sys.exit(main())

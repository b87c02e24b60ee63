"""
Complexity analysis tool entry point.

``analyze_complexity_tool`` is what callers outside the engine invoke: it
validates arguments, runs the aggregator, renders the result into a
JSON-ready dict and reports failures to logs and Sentry.
"""

import time
from typing import Any, Dict, Optional

import sentry_sdk

from complexity_engine.constants import AnalysisDefaults
from complexity_engine.core.exceptions import ValidationError
from complexity_engine.core.logging import get_logger
from complexity_engine.models.complexity import (
    AnalysisOptions,
    AnalysisResult,
    ComplexityThresholds,
    DirectoryAnalysisResult,
)

from .aggregator import ComplexityAggregator


def _validate_inputs(path: str, format: str) -> None:
    """Validate tool arguments.

    Raises:
        ValidationError: If the path is empty or the format is unknown
    """
    if not path or not path.strip():
        raise ValidationError("Path is required")
    if format not in AnalysisDefaults.FORMATS:
        raise ValidationError(
            f"Unsupported format '{format}'. Supported: {', '.join(AnalysisDefaults.FORMATS)}",
            details={"format": format},
        )


def render_result(result: AnalysisResult, format: str = AnalysisDefaults.FORMAT) -> Dict[str, Any]:
    """Render an analysis result for serialization.

    ``detailed`` keeps the whole tree; ``summary`` drops the children of a
    directory result. File results render the same in both formats.

    Args:
        result: File or directory result
        format: 'detailed' or 'summary'

    Returns:
        JSON-ready dictionary
    """
    if isinstance(result, DirectoryAnalysisResult):
        return result.to_dict(include_children=format == "detailed")
    return result.to_dict()


def analyze_complexity_tool(
    path: str,
    recursive: bool = AnalysisDefaults.RECURSIVE,
    format: str = AnalysisDefaults.FORMAT,
    include_halstead: bool = AnalysisDefaults.INCLUDE_HALSTEAD,
    include_maintainability: bool = AnalysisDefaults.INCLUDE_MAINTAINABILITY,
    thresholds: Optional[ComplexityThresholds] = None,
    options: Optional[AnalysisOptions] = None,
) -> Dict[str, Any]:
    """
    Analyze code complexity for a file or a directory.

    Metrics:
    - Cyclomatic Complexity: decision points + 1
    - Cognitive Complexity: control flow weighted by brace nesting
    - Maintainability Index: 0-100 from Halstead volume, cyclomatic and lines

    Directory results carry the file count, averages and the five worst
    files of the subtree, and a pass/warn/fail summary.

    Args:
        path: File (.ts, .js, .tsx, .jsx) or directory to analyze
        recursive: Whether to descend into subdirectories
        format: 'detailed' (full tree) or 'summary' (root node only)
        include_halstead: Compute Halstead metrics
        include_maintainability: Compute the maintainability index
        thresholds: Classification thresholds (defaults when omitted)
        options: Full options object; overrides the individual flags

    Returns:
        Rendered analysis result

    Raises:
        ValidationError: If arguments are invalid
        InvalidFileTypeError: If a file target has an unsupported extension
        FileSystemError: If the path does not exist or cannot be read
        AnalysisError: For any other failure

    Example usage:
        analyze_complexity_tool(path="/path/to/project/src")
        analyze_complexity_tool(path="/path/to/file.ts", format="summary")
    """
    if options is None:
        options = AnalysisOptions(
            include_halstead=include_halstead,
            include_maintainability=include_maintainability,
            recursive=recursive,
            format=format,  # type: ignore[arg-type]
        )

    logger = get_logger("tool.analyze_complexity")
    start_time = time.time()

    logger.info(
        "tool_invoked",
        tool="analyze_complexity",
        path=path,
        recursive=options.recursive,
        format=options.format,
        include_halstead=options.include_halstead,
        include_maintainability=options.include_maintainability,
    )

    try:
        _validate_inputs(path, options.format)

        aggregator = ComplexityAggregator(options, thresholds)
        result = aggregator.analyze_complexity(path, options)

        execution_time = time.time() - start_time
        logger.info(
            "tool_completed",
            tool="analyze_complexity",
            execution_time_seconds=round(execution_time, 3),
            result_type=result.type,
            status=result.summary.status,
        )

        return render_result(result, options.format)

    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            "tool_failed",
            tool="analyze_complexity",
            execution_time_seconds=round(execution_time, 3),
            error=str(e)[:200],
            status="failed"
        )
        sentry_sdk.capture_exception(e, extras={
            "tool": "analyze_complexity",
            "path": path,
            "execution_time_seconds": round(execution_time, 3)
        })
        raise

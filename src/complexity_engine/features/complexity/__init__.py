"""
Code complexity analysis feature.

This module provides complexity analysis of TypeScript/JavaScript sources:
- Cyclomatic complexity calculation
- Cognitive complexity calculation
- Halstead metrics
- Maintainability index
- Threshold classification of files and directories
- Recursive directory aggregation
"""

from .aggregator import (
    ComplexityAggregator,
    analyze_complexity,
    collect_file_results,
    is_supported_file,
)
from .analyzer import (
    ComplexityAnalyzer,
    analyze,
)
from .metrics import (
    calculate_cognitive_complexity,
    calculate_cyclomatic_complexity,
    calculate_halstead_metrics,
    calculate_maintainability_index,
)
from .scanner import (
    LexicalScanner,
    Scanner,
    get_default_scanner,
)
from .summary import (
    classify_directory,
    classify_file,
)
from .tools import analyze_complexity_tool, render_result

__all__ = [
    # Scanner
    "LexicalScanner",
    "Scanner",
    "get_default_scanner",
    # Metrics
    "calculate_cognitive_complexity",
    "calculate_cyclomatic_complexity",
    "calculate_halstead_metrics",
    "calculate_maintainability_index",
    # Analyzer
    "ComplexityAnalyzer",
    "analyze",
    # Summary
    "classify_directory",
    "classify_file",
    # Aggregator
    "ComplexityAggregator",
    "analyze_complexity",
    "collect_file_results",
    "is_supported_file",
    # Tools
    "analyze_complexity_tool",
    "render_result",
]

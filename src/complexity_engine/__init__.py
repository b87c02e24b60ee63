"""Lexical source-code complexity analysis engine."""

from complexity_engine.features.complexity import (
    analyze,
    analyze_complexity,
    analyze_complexity_tool,
)
from complexity_engine.models.complexity import (
    AnalysisOptions,
    ComplexityMetrics,
    ComplexityThresholds,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisOptions",
    "ComplexityMetrics",
    "ComplexityThresholds",
    "analyze",
    "analyze_complexity",
    "analyze_complexity_tool",
]

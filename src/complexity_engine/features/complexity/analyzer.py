"""
Code complexity analysis of a single source text.

``ComplexityAnalyzer.analyze`` combines the individual calculators and never
raises: failed sub-calculations are replaced by zeroed values and logged.
"""

from typing import Optional

from complexity_engine.constants import MaintainabilityDefaults
from complexity_engine.core.logging import get_logger
from complexity_engine.models.complexity import (
    AnalysisOptions,
    ComplexityMetrics,
    HalsteadMetrics,
)

from .metrics import (
    calculate_cognitive_complexity,
    calculate_cyclomatic_complexity,
    calculate_halstead_metrics,
    calculate_maintainability_index,
)
from .scanner import Scanner, get_default_scanner

__all__ = [
    "ComplexityAnalyzer",
    "analyze",
]


class ComplexityAnalyzer:
    """Computes complexity metrics for source text."""

    def __init__(self, options: Optional[AnalysisOptions] = None, scanner: Optional[Scanner] = None) -> None:
        """Initialize the analyzer.

        Args:
            options: Analysis options (defaults: maintainability on, Halstead off)
            scanner: Pattern scanner (lexical by default)
        """
        self.options = options or AnalysisOptions()
        self.scanner = scanner or get_default_scanner()
        self.logger = get_logger("complexity.analyzer")

    def analyze(self, code: str) -> ComplexityMetrics:
        """Analyze code complexity.

        Whitespace-only input reports zero complexity and a maintainability of
        100. A failure outside the Halstead and maintainability steps reports
        zero complexity and a maintainability of 0.

        Args:
            code: Source code to analyze

        Returns:
            ComplexityMetrics
        """
        try:
            if not code.strip():
                return self._fallback_metrics(MaintainabilityDefaults.EMPTY_SCORE)
            return self._analyze_source(code)
        except Exception as e:
            self.logger.error("analyze_failed", error=str(e))
            return self._fallback_metrics(MaintainabilityDefaults.FAILED_SCORE)

    def _analyze_source(self, code: str) -> ComplexityMetrics:
        cyclomatic = calculate_cyclomatic_complexity(code, self.scanner)
        cognitive = calculate_cognitive_complexity(code, self.scanner)

        # The maintainability index needs the Halstead volume even when
        # Halstead metrics are not reported.
        halstead: Optional[HalsteadMetrics] = None
        if self.options.include_halstead or self.options.include_maintainability:
            halstead = self._safe_halstead(code)

        maintainability: Optional[float] = None
        if self.options.include_maintainability:
            partial = ComplexityMetrics(cyclomatic=cyclomatic, cognitive=cognitive, halstead=halstead)
            maintainability = self._safe_maintainability(partial, len(code.split('\n')))

        return ComplexityMetrics(
            cyclomatic=cyclomatic,
            cognitive=cognitive,
            halstead=halstead if self.options.include_halstead else None,
            maintainability=maintainability,
        )

    def _safe_halstead(self, code: str) -> HalsteadMetrics:
        try:
            return calculate_halstead_metrics(code, self.scanner)
        except Exception as e:
            self.logger.warning("halstead_failed", error=str(e))
            return HalsteadMetrics.zero()

    def _safe_maintainability(self, metrics: ComplexityMetrics, lines_of_code: int) -> float:
        try:
            return calculate_maintainability_index(metrics, lines_of_code)
        except Exception as e:
            self.logger.warning("maintainability_failed", error=str(e), lines=lines_of_code)
            return MaintainabilityDefaults.FAILED_SCORE

    def _fallback_metrics(self, maintainability: float) -> ComplexityMetrics:
        return ComplexityMetrics(
            cyclomatic=0,
            cognitive=0,
            halstead=HalsteadMetrics.zero() if self.options.include_halstead else None,
            maintainability=maintainability if self.options.include_maintainability else None,
        )


def analyze(code: str, options: Optional[AnalysisOptions] = None) -> ComplexityMetrics:
    """Analyze source text with the given options.

    Args:
        code: Source code to analyze
        options: Analysis options

    Returns:
        ComplexityMetrics
    """
    return ComplexityAnalyzer(options).analyze(code)

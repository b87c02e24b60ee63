"""Threshold classification of file and directory metrics."""

from typing import Optional

from complexity_engine.models.complexity import (
    AnalysisSummary,
    AverageComplexity,
    ComplexityThresholds,
    FileComplexity,
    SummaryStatus,
    ThresholdLadder,
    worst_status,
)


def _check_upper(
    summary: AnalysisSummary,
    value: float,
    warn: float,
    fail: float,
    message: str,
) -> None:
    """Record an issue when value exceeds warn; fail when it exceeds fail."""
    if value > warn:
        summary.issues.append(message)
        status: SummaryStatus = "fail" if value > fail else "warn"
        summary.status = worst_status(summary.status, status)


def _check_lower(
    summary: AnalysisSummary,
    value: Optional[float],
    warn: float,
    fail: float,
    message: str,
) -> None:
    """Record an issue when value is below warn; fail when below fail."""
    if value is not None and value < warn:
        summary.issues.append(message)
        status: SummaryStatus = "fail" if value < fail else "warn"
        summary.status = worst_status(summary.status, status)


def classify_file(
    metrics: FileComplexity,
    thresholds: Optional[ComplexityThresholds] = None,
) -> AnalysisSummary:
    """Classify one file's metrics against the file ladder.

    Checks run in order cyclomatic, cognitive, maintainability; the status is
    the worst one triggered.

    Args:
        metrics: File complexity metrics
        thresholds: Thresholds (documented defaults when omitted)

    Returns:
        AnalysisSummary with status and issues
    """
    ladder: ThresholdLadder = (thresholds or ComplexityThresholds()).file
    summary = AnalysisSummary()

    _check_upper(
        summary, metrics.cyclomatic, ladder.cyclomatic_warn, ladder.cyclomatic_fail,
        f"High cyclomatic complexity ({metrics.cyclomatic})",
    )
    _check_upper(
        summary, metrics.cognitive, ladder.cognitive_warn, ladder.cognitive_fail,
        f"High cognitive complexity ({metrics.cognitive})",
    )
    if metrics.maintainability is not None:
        _check_lower(
            summary, metrics.maintainability, ladder.maintainability_warn, ladder.maintainability_fail,
            f"Low maintainability index ({metrics.maintainability:.2f})",
        )

    return summary


def classify_directory(
    averages: AverageComplexity,
    thresholds: Optional[ComplexityThresholds] = None,
) -> AnalysisSummary:
    """Classify directory averages against the (stricter) directory ladder.

    Args:
        averages: Average metrics over the directory subtree
        thresholds: Thresholds (documented defaults when omitted)

    Returns:
        AnalysisSummary with status and issues
    """
    ladder: ThresholdLadder = (thresholds or ComplexityThresholds()).directory
    summary = AnalysisSummary()

    _check_upper(
        summary, averages.cyclomatic, ladder.cyclomatic_warn, ladder.cyclomatic_fail,
        f"High average cyclomatic complexity ({averages.cyclomatic:.2f})",
    )
    _check_upper(
        summary, averages.cognitive, ladder.cognitive_warn, ladder.cognitive_fail,
        f"High average cognitive complexity ({averages.cognitive:.2f})",
    )
    if averages.maintainability is not None:
        _check_lower(
            summary, averages.maintainability, ladder.maintainability_warn, ladder.maintainability_fail,
            f"Low average maintainability index ({averages.maintainability:.2f})",
        )

    return summary

"""Data models for code complexity analysis.

Every model serializes to the wire format consumed by callers through
``to_dict`` (camelCase keys, optional fields omitted when absent) and can be
rebuilt from that format with ``from_dict``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

from complexity_engine.constants import (
    AnalysisDefaults,
    ComplexityDefaults,
    DirectoryDefaults,
)

SummaryStatus = Literal["pass", "warn", "fail"]
OutputFormat = Literal["detailed", "summary"]

_STATUS_RANK: Dict[str, int] = {"pass": 0, "warn": 1, "fail": 2}


def worst_status(current: SummaryStatus, candidate: SummaryStatus) -> SummaryStatus:
    """Return the more severe of two statuses (fail > warn > pass)."""
    return candidate if _STATUS_RANK[candidate] > _STATUS_RANK[current] else current


@dataclass(frozen=True)
class HalsteadMetrics:
    """Halstead size and effort metrics for one file."""

    operators: int
    operands: int
    unique_operators: int
    unique_operands: int
    program_length: int
    vocabulary: int
    volume: float
    difficulty: float
    effort: float

    @classmethod
    def zero(cls) -> "HalsteadMetrics":
        """All-zero metrics, used for empty input and failed calculations."""
        return cls(0, 0, 0, 0, 0, 0, 0.0, 0.0, 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operators": self.operators,
            "operands": self.operands,
            "uniqueOperators": self.unique_operators,
            "uniqueOperands": self.unique_operands,
            "programLength": self.program_length,
            "vocabulary": self.vocabulary,
            "volume": self.volume,
            "difficulty": self.difficulty,
            "effort": self.effort,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HalsteadMetrics":
        return cls(
            operators=data["operators"],
            operands=data["operands"],
            unique_operators=data["uniqueOperators"],
            unique_operands=data["uniqueOperands"],
            program_length=data["programLength"],
            vocabulary=data["vocabulary"],
            volume=data["volume"],
            difficulty=data["difficulty"],
            effort=data["effort"],
        )


@dataclass(frozen=True)
class ComplexityMetrics:
    """Metrics produced by one ``analyze`` call.

    ``halstead`` and ``maintainability`` are only present when the
    corresponding analysis option was enabled.
    """

    cyclomatic: int
    cognitive: int
    halstead: Optional[HalsteadMetrics] = None
    maintainability: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"cyclomatic": self.cyclomatic, "cognitive": self.cognitive}
        if self.halstead is not None:
            data["halstead"] = self.halstead.to_dict()
        if self.maintainability is not None:
            data["maintainability"] = self.maintainability
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplexityMetrics":
        halstead = data.get("halstead")
        return cls(
            cyclomatic=data["cyclomatic"],
            cognitive=data["cognitive"],
            halstead=HalsteadMetrics.from_dict(halstead) if halstead is not None else None,
            maintainability=data.get("maintainability"),
        )


@dataclass
class AnalysisOptions:
    """Options recognized by the analyzer and the directory aggregator.

    ``max_complexity`` and ``max_cognitive`` are advisory: they are reported
    back to callers but never change classification.
    """

    include_halstead: bool = AnalysisDefaults.INCLUDE_HALSTEAD
    include_maintainability: bool = AnalysisDefaults.INCLUDE_MAINTAINABILITY
    max_complexity: int = AnalysisDefaults.MAX_COMPLEXITY
    max_cognitive: int = AnalysisDefaults.MAX_COGNITIVE
    recursive: bool = AnalysisDefaults.RECURSIVE
    format: OutputFormat = AnalysisDefaults.FORMAT  # type: ignore[assignment]


@dataclass(frozen=True)
class ThresholdLadder:
    """Warn/fail boundaries for one granularity.

    Cyclomatic and cognitive trigger when the value is strictly greater than
    the boundary; maintainability triggers when strictly lower.
    """

    cyclomatic_warn: float
    cyclomatic_fail: float
    cognitive_warn: float
    cognitive_fail: float
    maintainability_warn: float
    maintainability_fail: float


def _default_file_ladder() -> ThresholdLadder:
    return ThresholdLadder(
        cyclomatic_warn=ComplexityDefaults.CYCLOMATIC_WARN,
        cyclomatic_fail=ComplexityDefaults.CYCLOMATIC_FAIL,
        cognitive_warn=ComplexityDefaults.COGNITIVE_WARN,
        cognitive_fail=ComplexityDefaults.COGNITIVE_FAIL,
        maintainability_warn=ComplexityDefaults.MAINTAINABILITY_WARN,
        maintainability_fail=ComplexityDefaults.MAINTAINABILITY_FAIL,
    )


def _default_directory_ladder() -> ThresholdLadder:
    return ThresholdLadder(
        cyclomatic_warn=DirectoryDefaults.CYCLOMATIC_WARN,
        cyclomatic_fail=DirectoryDefaults.CYCLOMATIC_FAIL,
        cognitive_warn=DirectoryDefaults.COGNITIVE_WARN,
        cognitive_fail=DirectoryDefaults.COGNITIVE_FAIL,
        maintainability_warn=DirectoryDefaults.MAINTAINABILITY_WARN,
        maintainability_fail=DirectoryDefaults.MAINTAINABILITY_FAIL,
    )


@dataclass(frozen=True)
class ComplexityThresholds:
    """Configurable thresholds with the documented defaults."""

    file: ThresholdLadder = field(default_factory=_default_file_ladder)
    directory: ThresholdLadder = field(default_factory=_default_directory_ladder)


@dataclass
class AnalysisSummary:
    """Status plus the human-readable issues that produced it."""

    status: SummaryStatus = "pass"
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "issues": list(self.issues)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisSummary":
        return cls(status=data["status"], issues=list(data["issues"]))


@dataclass(frozen=True)
class FileComplexity:
    """Per-file complexity block reported in results and worst-file lists."""

    cyclomatic: int
    cognitive: int
    maintainability: Optional[float] = None

    @property
    def combined_score(self) -> int:
        """Ranking key for worst files."""
        return self.cyclomatic + self.cognitive

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"cyclomatic": self.cyclomatic, "cognitive": self.cognitive}
        if self.maintainability is not None:
            data["maintainability"] = self.maintainability
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileComplexity":
        return cls(
            cyclomatic=data["cyclomatic"],
            cognitive=data["cognitive"],
            maintainability=data.get("maintainability"),
        )


@dataclass(frozen=True)
class AverageComplexity:
    """Arithmetic means over every file of a directory subtree."""

    cyclomatic: float = 0.0
    cognitive: float = 0.0
    maintainability: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"cyclomatic": self.cyclomatic, "cognitive": self.cognitive}
        if self.maintainability is not None:
            data["maintainability"] = self.maintainability
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AverageComplexity":
        return cls(
            cyclomatic=data["cyclomatic"],
            cognitive=data["cognitive"],
            maintainability=data.get("maintainability"),
        )


@dataclass(frozen=True)
class WorstFile:
    """Entry of a directory's worst-files list."""

    path: str
    metrics: FileComplexity

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "metrics": self.metrics.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorstFile":
        return cls(path=data["path"], metrics=FileComplexity.from_dict(data["metrics"]))


@dataclass
class FileAnalysisResult:
    """Analysis result for a single source file."""

    path: str
    complexity: FileComplexity
    summary: AnalysisSummary
    type: Literal["file"] = "file"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "path": self.path,
            "metrics": {
                "complexity": self.complexity.to_dict(),
                "summary": self.summary.to_dict(),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileAnalysisResult":
        metrics = data["metrics"]
        return cls(
            path=data["path"],
            complexity=FileComplexity.from_dict(metrics["complexity"]),
            summary=AnalysisSummary.from_dict(metrics["summary"]),
        )


@dataclass
class DirectoryAnalysisResult:
    """Aggregated analysis result for a directory subtree."""

    path: str
    total_files: int
    average_complexity: AverageComplexity
    worst_files: List[WorstFile]
    summary: AnalysisSummary
    children: List["AnalysisResult"] = field(default_factory=list)
    type: Literal["directory"] = "directory"

    def to_dict(self, include_children: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "path": self.path,
            "metrics": {
                "totalFiles": self.total_files,
                "averageComplexity": self.average_complexity.to_dict(),
                "worstFiles": [worst.to_dict() for worst in self.worst_files],
                "summary": self.summary.to_dict(),
            },
        }
        if include_children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectoryAnalysisResult":
        metrics = data["metrics"]
        return cls(
            path=data["path"],
            total_files=metrics["totalFiles"],
            average_complexity=AverageComplexity.from_dict(metrics["averageComplexity"]),
            worst_files=[WorstFile.from_dict(worst) for worst in metrics["worstFiles"]],
            summary=AnalysisSummary.from_dict(metrics["summary"]),
            children=[analysis_result_from_dict(child) for child in data.get("children", [])],
        )


AnalysisResult = Union[FileAnalysisResult, DirectoryAnalysisResult]


def analysis_result_from_dict(data: Dict[str, Any]) -> AnalysisResult:
    """Rebuild a file or directory result from its serialized form.

    Args:
        data: Dictionary produced by ``to_dict``

    Returns:
        FileAnalysisResult or DirectoryAnalysisResult depending on ``type``

    Raises:
        ValueError: If ``type`` is neither 'file' nor 'directory'
    """
    kind = data.get("type")
    if kind == "file":
        return FileAnalysisResult.from_dict(data)
    if kind == "directory":
        return DirectoryAnalysisResult.from_dict(data)
    raise ValueError(f"Unknown analysis result type: {kind!r}")

"""Data models for complexity-engine."""

from complexity_engine.models.complexity import (
    AnalysisOptions,
    AnalysisResult,
    AnalysisSummary,
    AverageComplexity,
    ComplexityMetrics,
    ComplexityThresholds,
    DirectoryAnalysisResult,
    FileAnalysisResult,
    FileComplexity,
    HalsteadMetrics,
    ThresholdLadder,
    WorstFile,
    analysis_result_from_dict,
)
from complexity_engine.models.config import (
    AnalysisConfig,
    EngineConfig,
    LadderConfig,
    ThresholdConfig,
)

__all__ = [
    # Complexity
    "AnalysisOptions",
    "AnalysisResult",
    "AnalysisSummary",
    "AverageComplexity",
    "ComplexityMetrics",
    "ComplexityThresholds",
    "DirectoryAnalysisResult",
    "FileAnalysisResult",
    "FileComplexity",
    "HalsteadMetrics",
    "ThresholdLadder",
    "WorstFile",
    "analysis_result_from_dict",
    # Config
    "AnalysisConfig",
    "EngineConfig",
    "LadderConfig",
    "ThresholdConfig",
]

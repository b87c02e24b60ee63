"""Configuration models loaded from YAML config files."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from complexity_engine.constants import (
    AnalysisDefaults,
    ComplexityDefaults,
    DirectoryDefaults,
)
from complexity_engine.models.complexity import (
    AnalysisOptions,
    ComplexityThresholds,
    ThresholdLadder,
)


class LadderConfig(BaseModel):
    """Warn/fail thresholds for one granularity (file or directory)."""

    model_config = ConfigDict(extra="forbid")

    cyclomatic_warn: float
    cyclomatic_fail: float
    cognitive_warn: float
    cognitive_fail: float
    maintainability_warn: float = Field(ge=0, le=100)
    maintainability_fail: float = Field(ge=0, le=100)

    @model_validator(mode="after")
    def _check_order(self) -> "LadderConfig":
        if self.cyclomatic_fail < self.cyclomatic_warn:
            raise ValueError("cyclomatic_fail must be >= cyclomatic_warn")
        if self.cognitive_fail < self.cognitive_warn:
            raise ValueError("cognitive_fail must be >= cognitive_warn")
        if self.maintainability_fail > self.maintainability_warn:
            raise ValueError("maintainability_fail must be <= maintainability_warn")
        return self

    def to_ladder(self) -> ThresholdLadder:
        return ThresholdLadder(**self.model_dump())


def _file_ladder_config() -> LadderConfig:
    return LadderConfig(
        cyclomatic_warn=ComplexityDefaults.CYCLOMATIC_WARN,
        cyclomatic_fail=ComplexityDefaults.CYCLOMATIC_FAIL,
        cognitive_warn=ComplexityDefaults.COGNITIVE_WARN,
        cognitive_fail=ComplexityDefaults.COGNITIVE_FAIL,
        maintainability_warn=ComplexityDefaults.MAINTAINABILITY_WARN,
        maintainability_fail=ComplexityDefaults.MAINTAINABILITY_FAIL,
    )


def _directory_ladder_config() -> LadderConfig:
    return LadderConfig(
        cyclomatic_warn=DirectoryDefaults.CYCLOMATIC_WARN,
        cyclomatic_fail=DirectoryDefaults.CYCLOMATIC_FAIL,
        cognitive_warn=DirectoryDefaults.COGNITIVE_WARN,
        cognitive_fail=DirectoryDefaults.COGNITIVE_FAIL,
        maintainability_warn=DirectoryDefaults.MAINTAINABILITY_WARN,
        maintainability_fail=DirectoryDefaults.MAINTAINABILITY_FAIL,
    )


class ThresholdConfig(BaseModel):
    """The ``thresholds`` section of a config file."""

    model_config = ConfigDict(extra="forbid")

    file: LadderConfig = Field(default_factory=_file_ladder_config)
    directory: LadderConfig = Field(default_factory=_directory_ladder_config)


class AnalysisConfig(BaseModel):
    """The ``analysis`` section of a config file."""

    model_config = ConfigDict(extra="forbid")

    include_halstead: bool = AnalysisDefaults.INCLUDE_HALSTEAD
    include_maintainability: bool = AnalysisDefaults.INCLUDE_MAINTAINABILITY
    max_complexity: int = Field(default=AnalysisDefaults.MAX_COMPLEXITY, ge=1)
    max_cognitive: int = Field(default=AnalysisDefaults.MAX_COGNITIVE, ge=0)
    recursive: bool = AnalysisDefaults.RECURSIVE
    format: Literal["detailed", "summary"] = "detailed"


class EngineConfig(BaseModel):
    """Top-level config file model.

    Example::

        thresholds:
          file:
            cyclomatic_warn: 12
            ...
        analysis:
          include_halstead: true
    """

    model_config = ConfigDict(extra="forbid")

    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    def to_thresholds(self) -> ComplexityThresholds:
        return ComplexityThresholds(
            file=self.thresholds.file.to_ladder(),
            directory=self.thresholds.directory.to_ladder(),
        )

    def to_options(self) -> AnalysisOptions:
        return AnalysisOptions(**self.analysis.model_dump())

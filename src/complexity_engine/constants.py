"""Shared constants across the complexity-engine codebase.

This module centralizes threshold values and configuration defaults
so the classifier, analyzer and CLI agree on them.
"""


class ComplexityDefaults:
    """Default file-level thresholds for the summary classifier."""

    CYCLOMATIC_WARN = 10
    CYCLOMATIC_FAIL = 15
    COGNITIVE_WARN = 15
    COGNITIVE_FAIL = 20
    MAINTAINABILITY_WARN = 65.0
    MAINTAINABILITY_FAIL = 50.0


class DirectoryDefaults:
    """Default directory-level thresholds (stricter than the file ladder)."""

    CYCLOMATIC_WARN = 8
    CYCLOMATIC_FAIL = 12
    COGNITIVE_WARN = 12
    COGNITIVE_FAIL = 18
    MAINTAINABILITY_WARN = 70.0
    MAINTAINABILITY_FAIL = 55.0


class AnalysisDefaults:
    """Default analysis options."""

    INCLUDE_HALSTEAD = False
    INCLUDE_MAINTAINABILITY = True
    MAX_COMPLEXITY = 10  # advisory
    MAX_COGNITIVE = 15  # advisory
    RECURSIVE = True
    FORMAT = "detailed"
    FORMATS = ("detailed", "summary")
    WORST_FILES_LIMIT = 5


class MaintainabilityDefaults:
    """Coefficients of the maintainability index formula."""

    BASE = 171.0
    VOLUME_WEIGHT = 5.2
    CYCLOMATIC_WEIGHT = 0.23
    LOC_WEIGHT = 16.2
    MAX_SCORE = 100.0
    EMPTY_SCORE = 100.0  # nothing to maintain
    FAILED_SCORE = 0.0
    NOT_COMPUTED = -1.0


class FilePatterns:
    """File patterns for analysis."""

    SUPPORTED_EXTENSIONS = (".ts", ".js", ".tsx", ".jsx")


class LoggingDefaults:
    """Logging configuration defaults."""

    DEFAULT_LEVEL = "INFO"
    LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class EnvVars:
    """Environment variables read by the CLI."""

    CONFIG = "COMPLEXITY_ENGINE_CONFIG"
    LOG_LEVEL = "LOG_LEVEL"
    LOG_FILE = "LOG_FILE"
    SENTRY_DSN = "SENTRY_DSN"
    SENTRY_ENVIRONMENT = "SENTRY_ENVIRONMENT"

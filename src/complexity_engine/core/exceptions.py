"""Custom exceptions for complexity-engine."""

from typing import Any, Dict, Optional


class ComplexityEngineError(Exception):
    """Base class for errors surfaced to callers of the engine.

    Attributes:
        message: Human-readable error message
        code: Stable machine-readable error code
        details: Optional extra context (original error name, stack, ...)
    """

    default_code = "ENGINE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        """Convert to an error response dict for serialization.

        Returns:
            Dictionary with code, message and details keys
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class AnalysisError(ComplexityEngineError):
    """Raised when analyzing a path fails for a non file-system reason."""

    default_code = "ANALYSIS_ERROR"


class InvalidFileTypeError(AnalysisError):
    """Raised when a file target has an unsupported extension."""

    default_code = "INVALID_FILE_TYPE"

    def __init__(self, file_path: str) -> None:
        super().__init__(f"Unsupported file type: {file_path}")
        self.file_path = file_path


class FileSystemError(ComplexityEngineError):
    """Raised when a path does not exist or cannot be read."""

    default_code = "FILE_SYSTEM_ERROR"


class ValidationError(ComplexityEngineError):
    """Raised when tool arguments are invalid."""

    default_code = "VALIDATION_ERROR"


class ConfigurationError(Exception):
    """Raised when a configuration file is invalid."""

    def __init__(self, config_path: str, reason: str) -> None:
        super().__init__(f"Invalid configuration at {config_path}: {reason}")
        self.config_path = config_path
        self.reason = reason


class CalculationError(Exception):
    """Raised by a metric calculator whose result is undefined.

    Always recovered inside ``ComplexityAnalyzer.analyze``.
    """
    pass

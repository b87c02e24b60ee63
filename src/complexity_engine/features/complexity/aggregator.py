"""Directory aggregation for complexity analysis.

This module walks a file tree, analyzes every supported source file and
rolls file results up into directory summaries: file counts, averages and
the worst files of each subtree.
"""

import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from complexity_engine.constants import AnalysisDefaults, FilePatterns
from complexity_engine.core.exceptions import (
    AnalysisError,
    ComplexityEngineError,
    FileSystemError,
    InvalidFileTypeError,
)
from complexity_engine.core.logging import get_logger
from complexity_engine.models.complexity import (
    AnalysisOptions,
    AnalysisResult,
    AnalysisSummary,
    AverageComplexity,
    ComplexityThresholds,
    DirectoryAnalysisResult,
    FileAnalysisResult,
    FileComplexity,
    WorstFile,
)

from .analyzer import ComplexityAnalyzer
from .summary import classify_directory, classify_file


def is_supported_file(path: str) -> bool:
    """Check whether a path has a supported source extension."""
    return path.endswith(FilePatterns.SUPPORTED_EXTENSIONS)


def collect_file_results(children: List[AnalysisResult]) -> List[FileAnalysisResult]:
    """Flatten a result tree into its file leaves, in traversal order.

    Args:
        children: Child results of a directory

    Returns:
        File results of the whole subtree, depth-first pre-order
    """
    files: List[FileAnalysisResult] = []
    pending: List[AnalysisResult] = list(reversed(children))
    while pending:
        node = pending.pop()
        if isinstance(node, FileAnalysisResult):
            files.append(node)
        else:
            pending.extend(reversed(node.children))
    return files


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


@dataclass
class _DirectoryFrame:
    """A directory whose entries are still being visited."""

    path: Path
    entries: Iterator[Path]
    children: List[AnalysisResult] = field(default_factory=list)


class ComplexityAggregator:
    """Analyzes files and directories and aggregates their metrics."""

    def __init__(
        self,
        options: Optional[AnalysisOptions] = None,
        thresholds: Optional[ComplexityThresholds] = None,
        analyzer: Optional[ComplexityAnalyzer] = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            options: Default options used when a call does not pass its own
            thresholds: Classification thresholds
            analyzer: Analyzer for file contents (built from options by default)
        """
        self.options = options or AnalysisOptions()
        self.thresholds = thresholds or ComplexityThresholds()
        self.analyzer = analyzer
        self.logger = get_logger("complexity.aggregator")

    def analyze_complexity(self, path: str, options: Optional[AnalysisOptions] = None) -> AnalysisResult:
        """Analyze a file or a directory tree.

        Args:
            path: File or directory to analyze
            options: Analysis options for this call

        Returns:
            FileAnalysisResult or DirectoryAnalysisResult

        Raises:
            InvalidFileTypeError: If a file target has an unsupported extension
            FileSystemError: If the path does not exist or cannot be read
            AnalysisError: For any other failure
        """
        options = options or self.options
        analyzer = self.analyzer or ComplexityAnalyzer(options)

        try:
            target = Path(path)
            if target.is_dir():
                return self._analyze_tree(target, options, analyzer)
            if not target.exists():
                raise FileNotFoundError(f"No such file or directory: '{path}'")
            return self.analyze_file(str(target), analyzer)
        except ComplexityEngineError:
            raise
        except OSError as e:
            raise FileSystemError(
                f"File not found: {e}" if isinstance(e, FileNotFoundError) else f"Cannot read path: {e}",
                details={"name": type(e).__name__, "path": path},
            ) from e
        except Exception as e:
            raise AnalysisError(
                str(e),
                details={"name": type(e).__name__, "stack": _format_stack(e)},
            ) from e

    def analyze_file(self, file_path: str, analyzer: Optional[ComplexityAnalyzer] = None) -> FileAnalysisResult:
        """Analyze a single source file.

        Args:
            file_path: Path to a .ts/.js/.tsx/.jsx file
            analyzer: Analyzer to use (built from default options otherwise)

        Returns:
            FileAnalysisResult

        Raises:
            InvalidFileTypeError: If the extension is not supported
        """
        if not is_supported_file(file_path):
            raise InvalidFileTypeError(file_path)

        analyzer = analyzer or self.analyzer or ComplexityAnalyzer(self.options)
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            code = f.read()

        metrics = analyzer.analyze(code)
        complexity = FileComplexity(
            cyclomatic=metrics.cyclomatic,
            cognitive=metrics.cognitive,
            maintainability=metrics.maintainability,
        )
        summary = classify_file(complexity, self.thresholds)

        self.logger.debug(
            "file_analyzed",
            file=file_path,
            cyclomatic=complexity.cyclomatic,
            cognitive=complexity.cognitive,
            status=summary.status,
        )

        return FileAnalysisResult(path=file_path, complexity=complexity, summary=summary)

    def _list_entries(self, directory: Path) -> Iterator[Path]:
        return iter(sorted(directory.iterdir(), key=lambda entry: entry.name))

    def _analyze_tree(
        self,
        root: Path,
        options: AnalysisOptions,
        analyzer: ComplexityAnalyzer,
    ) -> DirectoryAnalysisResult:
        """Walk a directory tree depth-first with an explicit stack.

        Each frame collects its children in listing order; a directory result
        is built once all of its entries have been visited and is appended to
        the parent frame.
        """
        self.logger.info("analyze_directory_start", path=str(root), recursive=options.recursive)

        stack: List[_DirectoryFrame] = [_DirectoryFrame(root, self._list_entries(root))]

        while True:
            frame = stack[-1]
            entry = next(frame.entries, None)

            if entry is None:
                stack.pop()
                result = self.summarize_directory(str(frame.path), frame.children)
                if not stack:
                    break
                stack[-1].children.append(result)
                continue

            if entry.is_dir():
                # Subdirectories are skipped silently when not recursive;
                # symlinked directories are never followed.
                if options.recursive and not entry.is_symlink():
                    stack.append(_DirectoryFrame(entry, self._list_entries(entry)))
            elif entry.is_file() and is_supported_file(entry.name):
                frame.children.append(self.analyze_file(str(entry), analyzer))

        self.logger.info(
            "analyze_directory_complete",
            path=str(root),
            total_files=result.total_files,
            status=result.summary.status,
        )
        return result

    def summarize_directory(self, path: str, children: List[AnalysisResult]) -> DirectoryAnalysisResult:
        """Build a directory result from already analyzed children.

        Args:
            path: Directory path
            children: File and directory results directly inside it

        Returns:
            DirectoryAnalysisResult with totals, averages, worst files and summary
        """
        file_results = collect_file_results(children)
        total_files = len(file_results)

        if total_files == 0:
            return DirectoryAnalysisResult(
                path=path,
                total_files=0,
                average_complexity=AverageComplexity(0.0, 0.0, 0.0),
                worst_files=[],
                summary=AnalysisSummary(),
                children=children,
            )

        average_complexity = self._average(file_results)
        worst_files = self._worst_files(file_results)

        return DirectoryAnalysisResult(
            path=path,
            total_files=total_files,
            average_complexity=average_complexity,
            worst_files=worst_files,
            summary=classify_directory(average_complexity, self.thresholds),
            children=children,
        )

    def _average(self, file_results: List[FileAnalysisResult]) -> AverageComplexity:
        """Average metrics over file results.

        Files without a maintainability value count as 0; when no file has
        one the average maintainability is omitted.
        """
        maintainability: Optional[float] = None
        if any(r.complexity.maintainability is not None for r in file_results):
            maintainability = _mean([r.complexity.maintainability or 0.0 for r in file_results])

        return AverageComplexity(
            cyclomatic=_mean([r.complexity.cyclomatic for r in file_results]),
            cognitive=_mean([r.complexity.cognitive for r in file_results]),
            maintainability=maintainability,
        )

    def _worst_files(self, file_results: List[FileAnalysisResult]) -> List[WorstFile]:
        """Rank files by cyclomatic + cognitive, highest first.

        ``sorted`` is stable, so ties keep traversal order.
        """
        ranked = sorted(file_results, key=lambda r: r.complexity.combined_score, reverse=True)
        return [
            WorstFile(path=r.path, metrics=r.complexity)
            for r in ranked[:AnalysisDefaults.WORST_FILES_LIMIT]
        ]


def _format_stack(error: BaseException) -> str:
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def analyze_complexity(
    path: str,
    options: Optional[AnalysisOptions] = None,
    thresholds: Optional[ComplexityThresholds] = None,
) -> AnalysisResult:
    """Analyze a file or directory with the given options.

    Args:
        path: File or directory to analyze
        options: Analysis options
        thresholds: Classification thresholds

    Returns:
        FileAnalysisResult or DirectoryAnalysisResult
    """
    return ComplexityAggregator(options, thresholds).analyze_complexity(path, options)

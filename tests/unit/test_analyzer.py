"""Unit tests for the top-level analyze entry point."""

import math
from unittest.mock import patch

import pytest

from complexity_engine.features.complexity.analyzer import ComplexityAnalyzer, analyze
from complexity_engine.models.complexity import AnalysisOptions, HalsteadMetrics


def _expected_mi(volume: float, cyclomatic: int, lines: int) -> float:
    mi = 171 - 5.2 * math.log(volume) - 0.23 * cyclomatic - 16.2 * math.log(lines)
    return max(0.0, min(100.0, mi * 100 / 171))


class TestEmptyInput:
    """Whitespace-only input short-circuits."""

    @pytest.mark.parametrize("code", ["", "   ", "\n\t\n"])
    def test_empty_reports_zero_complexity_and_full_maintainability(self, code):
        metrics = analyze(code)
        assert metrics.cyclomatic == 0
        assert metrics.cognitive == 0
        assert metrics.maintainability == 100
        assert metrics.halstead is None

    def test_empty_with_halstead_reports_zeroed_struct(self):
        metrics = analyze("  ", AnalysisOptions(include_halstead=True))
        assert metrics.halstead == HalsteadMetrics.zero()

    def test_empty_without_maintainability(self):
        metrics = analyze("", AnalysisOptions(include_maintainability=False))
        assert metrics.maintainability is None


class TestAnalyze:
    """Test metric composition."""

    def test_defaults(self):
        """Maintainability on, Halstead computed for it but not reported."""
        metrics = analyze("x = x + x;")
        assert metrics.cyclomatic == 1
        assert metrics.cognitive == 0
        assert metrics.halstead is None
        assert metrics.maintainability == pytest.approx(_expected_mi(12.0, 1, 1))

    def test_include_halstead(self):
        metrics = analyze("x = x + x;", AnalysisOptions(include_halstead=True))
        assert metrics.halstead is not None
        assert metrics.halstead.volume == pytest.approx(12.0)
        assert metrics.maintainability == pytest.approx(_expected_mi(12.0, 1, 1))

    def test_only_cyclomatic_and_cognitive(self):
        options = AnalysisOptions(include_halstead=False, include_maintainability=False)
        metrics = analyze("if (a) {\n  b();\n}\n", options)
        assert metrics.cyclomatic == 2
        assert metrics.cognitive == 2
        assert metrics.halstead is None
        assert metrics.maintainability is None

    def test_line_count_includes_trailing_newline(self):
        """Lines are counted by splitting on newlines, like the scan itself."""
        metrics = analyze("x = x + x;\n")
        assert metrics.maintainability == pytest.approx(_expected_mi(12.0, 1, 2))

    def test_non_empty_without_keywords_has_base_cyclomatic(self):
        assert analyze("hello world").cyclomatic == 1

    def test_to_dict_omits_disabled_metrics(self):
        options = AnalysisOptions(include_maintainability=False)
        assert analyze("if (a) b();", options).to_dict() == {"cyclomatic": 2, "cognitive": 1}

    def test_to_dict_includes_halstead_keys(self):
        data = analyze("a = b + 1;", AnalysisOptions(include_halstead=True)).to_dict()
        assert set(data["halstead"]) == {
            "operators", "operands", "uniqueOperators", "uniqueOperands",
            "programLength", "vocabulary", "volume", "difficulty", "effort",
        }


class TestFailSoft:
    """analyze never raises."""

    def test_halstead_failure_yields_zeroed_struct(self):
        """Operators only: difficulty undefined -> zeroed Halstead, MI 0."""
        metrics = analyze("{}();", AnalysisOptions(include_halstead=True))
        assert metrics.halstead == HalsteadMetrics.zero()
        assert metrics.maintainability == 0

    def test_maintainability_failure_yields_zero(self):
        """A single distinct token has volume 0, so ln(volume) is undefined."""
        metrics = analyze("x")
        assert metrics.cyclomatic == 1
        assert metrics.maintainability == 0

    def test_unexpected_halstead_exception(self):
        with patch(
            "complexity_engine.features.complexity.analyzer.calculate_halstead_metrics",
            side_effect=RuntimeError("boom"),
        ):
            metrics = analyze("if (a) b();", AnalysisOptions(include_halstead=True))
        assert metrics.cyclomatic == 2
        assert metrics.halstead == HalsteadMetrics.zero()
        assert metrics.maintainability == 0

    def test_total_failure_distinguishable_from_empty(self):
        """A failure reports maintainability 0 where empty input reports 100."""
        with patch(
            "complexity_engine.features.complexity.analyzer.calculate_cyclomatic_complexity",
            side_effect=RuntimeError("boom"),
        ):
            metrics = ComplexityAnalyzer(AnalysisOptions(include_halstead=True)).analyze("if (a) b();")
        assert metrics.cyclomatic == 0
        assert metrics.cognitive == 0
        assert metrics.halstead == HalsteadMetrics.zero()
        assert metrics.maintainability == 0
        assert analyze("").maintainability == 100

"""Unit tests for threshold classification."""

import pytest

from complexity_engine.features.complexity.summary import classify_directory, classify_file
from complexity_engine.models.complexity import (
    AverageComplexity,
    ComplexityThresholds,
    FileComplexity,
    ThresholdLadder,
    worst_status,
)


class TestClassifyFile:
    """Test file-level classification with default thresholds."""

    @pytest.mark.parametrize("cyclomatic,status", [
        (10, "pass"),
        (11, "warn"),
        (15, "warn"),
        (16, "fail"),
    ])
    def test_cyclomatic_boundaries(self, cyclomatic, status):
        """Boundaries are exclusive: exactly the warn value passes."""
        summary = classify_file(FileComplexity(cyclomatic=cyclomatic, cognitive=0))
        assert summary.status == status

    @pytest.mark.parametrize("cognitive,status", [
        (15, "pass"),
        (16, "warn"),
        (20, "warn"),
        (21, "fail"),
    ])
    def test_cognitive_boundaries(self, cognitive, status):
        summary = classify_file(FileComplexity(cyclomatic=1, cognitive=cognitive))
        assert summary.status == status

    @pytest.mark.parametrize("maintainability,status", [
        (65.0, "pass"),
        (64.9, "warn"),
        (50.0, "warn"),
        (49.9, "fail"),
    ])
    def test_maintainability_boundaries(self, maintainability, status):
        summary = classify_file(FileComplexity(cyclomatic=1, cognitive=0, maintainability=maintainability))
        assert summary.status == status

    def test_issue_messages(self):
        summary = classify_file(FileComplexity(cyclomatic=11, cognitive=16, maintainability=64.9))
        assert summary.issues == [
            "High cyclomatic complexity (11)",
            "High cognitive complexity (16)",
            "Low maintainability index (64.90)",
        ]

    def test_clean_file_has_no_issues(self):
        summary = classify_file(FileComplexity(cyclomatic=3, cognitive=2, maintainability=90.0))
        assert summary.status == "pass"
        assert summary.issues == []

    def test_missing_maintainability_is_skipped(self):
        summary = classify_file(FileComplexity(cyclomatic=1, cognitive=0, maintainability=None))
        assert summary.status == "pass"
        assert summary.issues == []

    def test_status_is_worst_of_all_checks(self):
        """A later warn never downgrades an earlier fail."""
        summary = classify_file(FileComplexity(cyclomatic=16, cognitive=16))
        assert summary.status == "fail"
        assert len(summary.issues) == 2

    def test_later_fail_upgrades_earlier_warn(self):
        summary = classify_file(FileComplexity(cyclomatic=11, cognitive=0, maintainability=10.0))
        assert summary.status == "fail"

    def test_custom_thresholds(self):
        ladder = ThresholdLadder(
            cyclomatic_warn=2, cyclomatic_fail=4,
            cognitive_warn=2, cognitive_fail=4,
            maintainability_warn=90, maintainability_fail=80,
        )
        thresholds = ComplexityThresholds(file=ladder)
        summary = classify_file(FileComplexity(cyclomatic=3, cognitive=0, maintainability=95.0), thresholds)
        assert summary.status == "warn"
        assert summary.issues == ["High cyclomatic complexity (3)"]


class TestClassifyDirectory:
    """Test directory-level classification with default thresholds."""

    def test_average_cyclomatic_warn(self):
        summary = classify_directory(AverageComplexity(cyclomatic=10.0, cognitive=0.0))
        assert summary.status == "warn"
        assert summary.issues == ["High average cyclomatic complexity (10.00)"]

    @pytest.mark.parametrize("cyclomatic,status", [
        (8.0, "pass"),
        (8.01, "warn"),
        (12.0, "warn"),
        (12.5, "fail"),
    ])
    def test_average_cyclomatic_boundaries(self, cyclomatic, status):
        assert classify_directory(AverageComplexity(cyclomatic=cyclomatic)).status == status

    @pytest.mark.parametrize("cognitive,status", [
        (12.0, "pass"),
        (12.5, "warn"),
        (18.0, "warn"),
        (18.5, "fail"),
    ])
    def test_average_cognitive_boundaries(self, cognitive, status):
        assert classify_directory(AverageComplexity(cognitive=cognitive)).status == status

    @pytest.mark.parametrize("maintainability,status", [
        (70.0, "pass"),
        (69.5, "warn"),
        (55.0, "warn"),
        (54.5, "fail"),
    ])
    def test_average_maintainability_boundaries(self, maintainability, status):
        averages = AverageComplexity(maintainability=maintainability)
        assert classify_directory(averages).status == status

    def test_directory_ladder_is_stricter_than_file_ladder(self):
        """An average of 9 passes for a file but warns for a directory."""
        assert classify_file(FileComplexity(cyclomatic=9, cognitive=0)).status == "pass"
        assert classify_directory(AverageComplexity(cyclomatic=9.0)).status == "warn"

    def test_issue_messages(self):
        summary = classify_directory(AverageComplexity(cyclomatic=9.5, cognitive=13.25, maintainability=60.0))
        assert summary.issues == [
            "High average cyclomatic complexity (9.50)",
            "High average cognitive complexity (13.25)",
            "Low average maintainability index (60.00)",
        ]

    def test_missing_maintainability_is_skipped(self):
        summary = classify_directory(AverageComplexity(cyclomatic=1.0, cognitive=1.0))
        assert summary.status == "pass"
        assert summary.issues == []

    def test_custom_directory_thresholds(self):
        ladder = ThresholdLadder(
            cyclomatic_warn=1, cyclomatic_fail=2,
            cognitive_warn=100, cognitive_fail=200,
            maintainability_warn=0, maintainability_fail=0,
        )
        summary = classify_directory(AverageComplexity(cyclomatic=3.0), ComplexityThresholds(directory=ladder))
        assert summary.status == "fail"


class TestWorstStatus:
    """Test status ordering."""

    @pytest.mark.parametrize("current,candidate,expected", [
        ("pass", "warn", "warn"),
        ("warn", "pass", "warn"),
        ("warn", "fail", "fail"),
        ("fail", "warn", "fail"),
        ("pass", "pass", "pass"),
    ])
    def test_ordering(self, current, candidate, expected):
        assert worst_status(current, candidate) == expected

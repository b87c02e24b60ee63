"""Unit tests for result models and their wire format."""

import json

import pytest

from complexity_engine.features.complexity.aggregator import analyze_complexity
from complexity_engine.models.complexity import (
    AnalysisOptions,
    AverageComplexity,
    FileComplexity,
    analysis_result_from_dict,
)


class TestWireFormat:
    """Test camelCase serialization of results."""

    def test_file_result_shape(self, make_tree, branches):
        root = make_tree({"a.ts": branches(1)})
        data = analyze_complexity(str(root / "a.ts"), AnalysisOptions(include_maintainability=False)).to_dict()
        assert data == {
            "type": "file",
            "path": str(root / "a.ts"),
            "metrics": {
                "complexity": {"cyclomatic": 2, "cognitive": 1},
                "summary": {"status": "pass", "issues": []},
            },
        }

    def test_directory_result_shape(self, sample_project):
        data = analyze_complexity(str(sample_project)).to_dict()
        assert data["type"] == "directory"
        assert set(data["metrics"]) == {"totalFiles", "averageComplexity", "worstFiles", "summary"}
        assert data["metrics"]["totalFiles"] == 3
        assert set(data["metrics"]["worstFiles"][0]) == {"path", "metrics"}
        assert "maintainability" in data["metrics"]["averageComplexity"]
        assert data["children"][0]["type"] == "directory"

    def test_directory_without_children(self, sample_project):
        data = analyze_complexity(str(sample_project)).to_dict(include_children=False)
        assert "children" not in data

    def test_json_round_trip(self, sample_project):
        """A serialized tree rebuilds to an equal result."""
        result = analyze_complexity(str(sample_project))
        rebuilt = analysis_result_from_dict(json.loads(json.dumps(result.to_dict())))
        assert rebuilt == result

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown analysis result type"):
            analysis_result_from_dict({"type": "symlink"})


class TestFileComplexity:
    """Test the per-file complexity block."""

    def test_combined_score(self):
        assert FileComplexity(cyclomatic=4, cognitive=3).combined_score == 7

    def test_optional_maintainability_omitted(self):
        assert FileComplexity(cyclomatic=1, cognitive=0).to_dict() == {"cyclomatic": 1, "cognitive": 0}

    def test_average_defaults(self):
        assert AverageComplexity().to_dict() == {"cyclomatic": 0.0, "cognitive": 0.0}

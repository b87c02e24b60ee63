"""Shared pytest fixtures for complexity-engine test suite.

This module provides common fixtures used across unit and integration tests:
temporary directories, source snippets and a helper for building project
trees on disk.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest
import structlog

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Logging Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults after each test.

    CLI tests configure structlog against a captured stream that pytest
    closes when the test ends.
    """
    yield
    structlog.reset_defaults()


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation.

    Yields:
        str: Path to temporary directory
    """
    tmp = tempfile.mkdtemp()
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def make_tree(temp_dir) -> Callable[[Dict[str, str]], Path]:
    """Factory writing a {relative_path: content} mapping under temp_dir.

    A key ending in '/' creates an empty directory.

    Returns:
        Callable returning the root Path of the created tree
    """
    def _make(files: Dict[str, str]) -> Path:
        root = Path(temp_dir) / "project"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = root / relative
            if relative.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def branches() -> Callable[[int], str]:
    """Factory for source with ``count`` single-line ifs.

    Each line adds 1 to cyclomatic and 1 to cognitive complexity, so the
    result scores cyclomatic = count + 1 and cognitive = count.
    """
    def _branches(count: int) -> str:
        if count == 0:
            return "const value = 1;\n"
        return "".join("if (a) run();\n" for _ in range(count))

    return _branches


# ============================================================================
# Sample Code Fixtures
# ============================================================================

INDEX_TS = """import { add } from './math';

export function main(values: number[]): number {
  let total = 0;
  for (const v of values) {
    if (v > 0 && v < 100) {
      total = add(total, v);
    }
  }
  return total;
}
"""

MATH_JS = """function add(a, b) {
  return a + b;
}

module.exports = { add };
"""

SWITCHER_JSX = """export function label(kind) {
  switch (kind) {
    case 'a':
      return 'A';
    case 'b':
      return 'B';
    default:
      return kind ? kind : 'none';
  }
}
"""


@pytest.fixture
def sample_project(make_tree) -> Path:
    """A small TypeScript/JavaScript project with one ignored file.

    Expected metrics:
        src/index.ts              cyclomatic 3, cognitive 7
        src/legacy/switcher.jsx   cyclomatic 4, cognitive 0
        src/math.js               cyclomatic 1, cognitive 0
    """
    return make_tree({
        "README.md": "# sample\n",
        "src/index.ts": INDEX_TS,
        "src/math.js": MATH_JS,
        "src/legacy/switcher.jsx": SWITCHER_JSX,
    })


@pytest.fixture
def sample_nested_code() -> str:
    """Nested control flow for cognitive complexity testing."""
    return """function check(a, b) {
  if (a) {
    while (b) {
      b--;
    }
  }
}
"""

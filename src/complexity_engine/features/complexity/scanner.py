"""
Lexical scanning for complexity analysis.

The calculators never look at source text directly for anything beyond
splitting it into lines; every pattern question goes through a ``Scanner``.
``LexicalScanner`` answers them with regular expressions and has no notion
of scope, strings or comments. A grammar-aware scanner can replace it by
implementing the same interface.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Pattern

# =============================================================================
# PATTERNS
# =============================================================================

DECISION_PATTERNS: Dict[str, Pattern[str]] = {
    "if": re.compile(r"\bif\b"),
    "else": re.compile(r"\belse\b"),
    "while": re.compile(r"\bwhile\b"),
    "for": re.compile(r"\bfor\b"),
    "case": re.compile(r"\bcase\b"),
    "catch": re.compile(r"\bcatch\b"),
    "boolean": re.compile(r"\b(?:&&|\|\|)\b"),
    "ternary": re.compile(r"\?"),
}

CONTROL_FLOW_PATTERN = re.compile(r"\b(?:if|while|for|foreach|catch)\b")
BOOLEAN_OPERATOR_PATTERN = DECISION_PATTERNS["boolean"]
BLOCK_OPEN_PATTERN = re.compile(r"\{")
BLOCK_CLOSE_PATTERN = re.compile(r"\}")

OPERATOR_CHARS = r"+\-*/%=<>!&|^~(){}\[\];,."
TOKEN_PATTERN = re.compile(rf"\b\w+\b|[{OPERATOR_CHARS}]|\b\d+(?:\.\d+)?\b", re.ASCII)
OPERATOR_PATTERN = re.compile(rf"^[{OPERATOR_CHARS}]$")


class Scanner(ABC):
    """Pattern questions the complexity calculators ask about source text."""

    @abstractmethod
    def count_decision_points(self, code: str) -> Dict[str, int]:
        """Count decision points in code, keyed by kind."""

    @abstractmethod
    def opens_block(self, line: str) -> bool:
        """True if the line opens at least one block."""

    @abstractmethod
    def closes_block(self, line: str) -> bool:
        """True if the line closes at least one block."""

    @abstractmethod
    def has_control_flow(self, line: str) -> bool:
        """True if the line contains a nesting control-flow keyword."""

    @abstractmethod
    def count_boolean_operators(self, line: str) -> int:
        """Number of boolean operators in the line."""

    @abstractmethod
    def tokenize(self, code: str) -> List[str]:
        """Split code into a coarse operator/operand token stream."""

    @abstractmethod
    def is_operator(self, token: str) -> bool:
        """True if the token is an operator rather than an operand."""


class LexicalScanner(Scanner):
    """Regex-based scanner; counts every match regardless of context."""

    def count_decision_points(self, code: str) -> Dict[str, int]:
        """Count every match of each decision pattern.

        Args:
            code: Source code text

        Returns:
            Mapping of pattern kind to match count (zero counts included)
        """
        return {kind: len(pattern.findall(code)) for kind, pattern in DECISION_PATTERNS.items()}

    def opens_block(self, line: str) -> bool:
        return BLOCK_OPEN_PATTERN.search(line) is not None

    def closes_block(self, line: str) -> bool:
        return BLOCK_CLOSE_PATTERN.search(line) is not None

    def has_control_flow(self, line: str) -> bool:
        return CONTROL_FLOW_PATTERN.search(line) is not None

    def count_boolean_operators(self, line: str) -> int:
        return len(BOOLEAN_OPERATOR_PATTERN.findall(line))

    def tokenize(self, code: str) -> List[str]:
        """Tokenize into word tokens, single operator characters and numbers.

        Args:
            code: Source code text

        Returns:
            Tokens in source order
        """
        return [match.group(0) for match in TOKEN_PATTERN.finditer(code)]

    def is_operator(self, token: str) -> bool:
        return OPERATOR_PATTERN.match(token) is not None


_default_scanner: Scanner = LexicalScanner()


def get_default_scanner() -> Scanner:
    """Get the shared scanner used when none is supplied."""
    return _default_scanner

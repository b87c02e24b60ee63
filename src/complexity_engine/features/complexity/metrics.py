"""
Code complexity metrics calculation.

This module provides functions for calculating code complexity metrics:
- Cyclomatic complexity (decision points + 1)
- Cognitive complexity (line-based, nesting weighted)
- Halstead metrics (operator/operand counts, volume, difficulty, effort)
- Maintainability index (normalized to 0-100)

All metrics are calculated with text-based pattern analysis supplied by a
``Scanner``; nothing here parses the language.
"""

import math
from typing import Optional

from complexity_engine.constants import MaintainabilityDefaults
from complexity_engine.core.exceptions import CalculationError
from complexity_engine.models.complexity import ComplexityMetrics, HalsteadMetrics

from .scanner import Scanner, get_default_scanner


def calculate_cyclomatic_complexity(code: str, scanner: Optional[Scanner] = None) -> int:
    """Calculate cyclomatic complexity.

    Simplified: 1 + number of decision points, where every match of if, else,
    while, for, case, catch, boolean operators and ``?`` counts once.

    Args:
        code: Source code
        scanner: Pattern scanner (lexical by default)

    Returns:
        Cyclomatic complexity score (minimum 1)
    """
    scanner = scanner or get_default_scanner()
    return 1 + sum(scanner.count_decision_points(code).values())


def calculate_cognitive_complexity(code: str, scanner: Optional[Scanner] = None) -> int:
    """Calculate cognitive complexity with nesting penalties.

    Per line, in order:
    - a line containing ``{`` increments nesting once
    - a line containing ``}`` decrements nesting once (never below 0)
    - a control-flow keyword adds 1 + the nesting reached after the above
    - each boolean operator adds 1

    Braces inside strings or comments and multi-statement lines are not
    special-cased.

    Args:
        code: Source code
        scanner: Pattern scanner (lexical by default)

    Returns:
        Cognitive complexity score
    """
    scanner = scanner or get_default_scanner()
    complexity = 0
    nesting = 0

    for line in code.split('\n'):
        if scanner.opens_block(line):
            nesting += 1
        if scanner.closes_block(line):
            nesting = max(0, nesting - 1)
        if scanner.has_control_flow(line):
            complexity += 1 + nesting
        complexity += scanner.count_boolean_operators(line)

    return complexity


def _require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise CalculationError(f"{name} is not finite ({value})")
    return value


def calculate_halstead_metrics(code: str, scanner: Optional[Scanner] = None) -> HalsteadMetrics:
    """Calculate Halstead metrics from the token stream.

    n1/n2 are unique operators/operands, N1/N2 their total occurrences:
    - program length N = N1 + N2
    - vocabulary n = n1 + n2
    - volume = N * log2(n)
    - difficulty = (n1 / 2) * (N2 / n2)
    - effort = difficulty * volume

    Args:
        code: Source code
        scanner: Pattern scanner (lexical by default)

    Returns:
        HalsteadMetrics

    Raises:
        CalculationError: If the code has no tokens or no operands, where
            volume or difficulty are undefined
    """
    scanner = scanner or get_default_scanner()
    operators = set()
    operands = set()
    total_operators = 0
    total_operands = 0

    for token in scanner.tokenize(code):
        if scanner.is_operator(token):
            operators.add(token)
            total_operators += 1
        else:
            operands.add(token)
            total_operands += 1

    n1 = len(operators)
    n2 = len(operands)
    program_length = total_operators + total_operands
    vocabulary = n1 + n2

    if vocabulary == 0:
        raise CalculationError("Halstead volume is undefined for an empty vocabulary")
    if n2 == 0:
        raise CalculationError("Halstead difficulty is undefined without operands")

    volume = _require_finite("volume", program_length * math.log2(vocabulary))
    difficulty = _require_finite("difficulty", (n1 / 2) * (total_operands / n2))
    effort = _require_finite("effort", difficulty * volume)

    return HalsteadMetrics(
        operators=total_operators,
        operands=total_operands,
        unique_operators=n1,
        unique_operands=n2,
        program_length=program_length,
        vocabulary=vocabulary,
        volume=volume,
        difficulty=difficulty,
        effort=effort,
    )


def calculate_maintainability_index(metrics: ComplexityMetrics, lines_of_code: int) -> float:
    """Calculate the maintainability index.

    MI = 171 - 5.2 * ln(HV) - 0.23 * CC - 16.2 * ln(LOC), normalized to
    clamp(MI * 100 / 171, 0, 100).

    Args:
        metrics: Metrics carrying cyclomatic complexity and Halstead volume
        lines_of_code: Number of lines in the file

    Returns:
        Score in [0, 100], or -1 when the metrics carry no Halstead data

    Raises:
        CalculationError: If volume or line count is not positive
    """
    if metrics.halstead is None:
        return MaintainabilityDefaults.NOT_COMPUTED

    volume = metrics.halstead.volume
    if volume <= 0:
        raise CalculationError(f"ln(volume) is undefined for volume={volume}")
    if lines_of_code <= 0:
        raise CalculationError(f"ln(LOC) is undefined for LOC={lines_of_code}")

    mi = (
        MaintainabilityDefaults.BASE
        - MaintainabilityDefaults.VOLUME_WEIGHT * math.log(volume)
        - MaintainabilityDefaults.CYCLOMATIC_WEIGHT * metrics.cyclomatic
        - MaintainabilityDefaults.LOC_WEIGHT * math.log(lines_of_code)
    )
    normalized = _require_finite("maintainability", mi * 100 / MaintainabilityDefaults.BASE)
    return max(0.0, min(MaintainabilityDefaults.MAX_SCORE, normalized))

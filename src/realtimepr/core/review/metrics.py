"""Complexity metrics and code smell detection.

All metrics are token counts over raw text, not measurements of a parsed
program:

- **Cyclomatic complexity**: 1 plus the number of branching tokens (``if (``,
  ``for (``, ``case``, ``&&``, ``?``, ``:`` ...). Type annotations and object
  literals inflate it.
- **Cognitive complexity**: each branching line costs 1 plus the current
  nesting depth; a closing brace line reduces the depth.
- **Maintainability index**: the classic
  ``171 - 5.2 ln(V) - 0.23 CC - 16.2 ln(LOC)`` scaled to 0..100, with the
  volume ``V`` approximated as ``LOC * log2(CC)``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

from realtimepr.core.review.config import MetricThresholds
from realtimepr.core.lines import split_lines
from realtimepr.core.review.models import Feedback
from realtimepr.core.rules.models import Severity, Suggestion

_CATEGORY = "Analysis"

_CYCLOMATIC_TOKENS: tuple[re.Pattern[str], ...] = (
    re.compile(r"if\s*\("),
    re.compile(r"else\s*\{"),
    re.compile(r"for\s*\("),
    re.compile(r"while\s*\("),
    re.compile(r"do\s*\{"),
    re.compile(r"switch\s*\("),
    re.compile(r"case\s+"),
    re.compile(r"catch\s*\("),
    re.compile(r"&&"),
    re.compile(r"\|\|"),
    re.compile(r"\?"),
    re.compile(r":"),
)

_NESTING_OPENER = re.compile(r"if\s*\(|for\s*\(|while\s*\(|switch\s*\(")
_FLAT_BRANCH = re.compile(r"else\s*\{|catch\s*\(")

_FUNCTION_START = re.compile(
    r"function\s+\w+\s*\(|const\s+\w+\s*=\s*\(|let\s+\w+\s*=\s*\("
)
_MAGIC_NUMBER = re.compile(r"[^a-zA-Z](\d{2,})[^a-zA-Z]")
_COMMENTED_CODE = re.compile(r"^\s*//\s*[a-zA-Z]")


@dataclass(frozen=True)
class ComplexityMetrics:
    cyclomatic_complexity: int
    cognitive_complexity: int
    maintainability_index: float


def cyclomatic_complexity(code: str) -> int:
    return 1 + sum(len(p.findall(code)) for p in _CYCLOMATIC_TOKENS)


def cognitive_complexity(lines: Sequence[str]) -> int:
    complexity = 0
    nesting = 0
    for line in lines:
        if _NESTING_OPENER.search(line):
            complexity += 1 + nesting
            nesting += 1
        elif _FLAT_BRANCH.search(line):
            complexity += 1 + nesting
        elif "}" in line:
            nesting = max(0, nesting - 1)
    return complexity


def maintainability_index(complexity: int, loc: int) -> float:
    """Scaled maintainability index, clamped at 0.

    A volume of zero (complexity 1) contributes nothing instead of the
    undefined ``ln(0)``.
    """
    loc = max(loc, 1)
    volume = loc * math.log2(complexity or 1)
    volume_term = 5.2 * math.log(volume) if volume > 0 else 0.0
    raw = 171 - volume_term - 0.23 * complexity - 16.2 * math.log(loc)
    return max(0.0, raw * 100 / 171)


def compute_metrics(code: str) -> ComplexityMetrics:
    lines = split_lines(code)
    cyclomatic = cyclomatic_complexity(code)
    return ComplexityMetrics(
        cyclomatic_complexity=cyclomatic,
        cognitive_complexity=cognitive_complexity(lines),
        maintainability_index=maintainability_index(cyclomatic, len(lines)),
    )


def detect_code_smells(
    lines: Sequence[str], max_function_lines: int = 20
) -> list[Suggestion]:
    """Find long functions, magic numbers and commented-out code.

    Function bodies are measured from a declaration line to the next line
    containing ``}``, so nested blocks end the measurement early.
    """
    smells: list[Suggestion] = []

    in_function = False
    start = 0
    body_lines = 0
    for index, line in enumerate(lines, start=1):
        if _FUNCTION_START.search(line):
            in_function = True
            start = index
            body_lines = 0
        elif in_function and "}" in line:
            in_function = False
            if body_lines > max_function_lines:
                smells.append(Suggestion(
                    line=start,
                    message=(
                        f"Function is too long ({body_lines} lines). "
                        "Consider breaking it into smaller functions."
                    ),
                    severity=Severity.WARNING,
                    category=_CATEGORY,
                    rule_id="long-function",
                ))
        elif in_function:
            body_lines += 1

    for index, line in enumerate(lines, start=1):
        if _MAGIC_NUMBER.search(line):
            smells.append(Suggestion(
                line=index,
                message="Magic number detected. Consider using named constants.",
                severity=Severity.INFO,
                category=_CATEGORY,
                rule_id="magic-number",
            ))

    for index, line in enumerate(lines, start=1):
        if _COMMENTED_CODE.search(line):
            smells.append(Suggestion(
                line=index,
                message=(
                    "Commented out code detected. Consider removing if no "
                    "longer needed."
                ),
                severity=Severity.INFO,
                category=_CATEGORY,
                rule_id="commented-code",
            ))

    return smells


def analyze_code_metrics(
    code: str, thresholds: MetricThresholds | None = None
) -> Feedback:
    """Compute metrics, flag those past the thresholds, and list code smells."""
    limits = thresholds or MetricThresholds()
    metrics = compute_metrics(code)
    suggestions: list[Suggestion] = []

    if metrics.cyclomatic_complexity > limits.max_cyclomatic:
        suggestions.append(Suggestion(
            line=1,
            message=(
                f"High cyclomatic complexity ({metrics.cyclomatic_complexity}). "
                "Consider breaking down the code into smaller functions."
            ),
            severity=Severity.WARNING,
            category=_CATEGORY,
            rule_id="cyclomatic-complexity",
        ))
    if metrics.cognitive_complexity > limits.max_cognitive:
        suggestions.append(Suggestion(
            line=1,
            message=(
                f"High cognitive complexity ({metrics.cognitive_complexity}). "
                "The code might be hard to understand and maintain."
            ),
            severity=Severity.WARNING,
            category=_CATEGORY,
            rule_id="cognitive-complexity",
        ))
    if metrics.maintainability_index < limits.min_maintainability:
        suggestions.append(Suggestion(
            line=1,
            message=(
                "Low maintainability index "
                f"({metrics.maintainability_index:.2f}). Consider refactoring "
                "to improve code maintainability."
            ),
            severity=Severity.WARNING,
            category=_CATEGORY,
            rule_id="maintainability-index",
        ))

    smells = detect_code_smells(split_lines(code), limits.max_function_lines)
    suggestions.extend(smells)

    summary = (
        "Code Analysis Results:\n"
        f"- Cyclomatic Complexity: {metrics.cyclomatic_complexity}\n"
        f"- Cognitive Complexity: {metrics.cognitive_complexity}\n"
        f"- Maintainability Index: {metrics.maintainability_index:.2f}\n"
        f"- Code Smells Detected: {len(smells)}"
    )
    return Feedback(summary=summary, suggestions=suggestions)

"""Data models for declarative review rules: Severity, Rule, RuleSet, Suggestion.

A rule is data, not code: a compiled pattern, a message, a severity and a
category. One generic engine evaluates every rule the same way, so adding a
check never means adding a branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import re


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


class Severity(IntEnum):
    """Three-level severity scale. INFO < WARNING < ERROR."""

    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def parse(cls, value: str) -> Severity:
        """Look up a severity by case-insensitive name.

        Raises:
            KeyError: If ``value`` names no severity.
        """
        return cls[value.strip().upper()]


# ---------------------------------------------------------------------------
# Rule / RuleSet
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """A single line-oriented pattern rule.

    Attributes:
        rule_id: Stable identifier (e.g. "no-eval").
        pattern: Compiled regex searched in each line.
        message: Text reported when the pattern matches.
        severity: How serious a match is.
        category: Grouping used in reports (e.g. "Security").
        description: Longer explanation, shown by ``realtimepr rules``.
        fix: Optional replacement template for ``pattern.sub`` (``\\g<0>``
            refers to the whole match).
    """

    rule_id: str
    pattern: re.Pattern[str]
    message: str
    severity: Severity = Severity.WARNING
    category: str = "General"
    description: str = ""
    fix: str | None = None

    def matches(self, line: str) -> bool:
        """True if the rule's pattern occurs in ``line``."""
        return self.pattern.search(line) is not None

    def apply_fix(self, line: str) -> str | None:
        """Return ``line`` with the first match rewritten, or None if unfixable."""
        if self.fix is None or not self.matches(line):
            return None
        return self.pattern.sub(self.fix, line, count=1)


@dataclass(frozen=True)
class RuleSet:
    """A named, immutable group of rules."""

    name: str
    rules: tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)


# ---------------------------------------------------------------------------
# Suggestion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Suggestion:
    """A line-anchored review comment.

    Attributes:
        line: 1-based line number.
        message: Human-readable text.
        severity: How serious the issue is.
        category: Which analyzer or rule set produced it.
        rule_id: Identifier of the producing rule, if any.
    """

    line: int
    message: str
    severity: Severity = Severity.INFO
    category: str = "General"
    rule_id: str | None = None

"""Generic line-oriented rule engine.

``RuleEngine`` evaluates a fixed tuple of rule sets against every line of a
file. Rule sets are passed in explicitly, so two engines with different rule
sets can run side by side without sharing state.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from realtimepr.core.rules.models import Rule, RuleSet, Severity, Suggestion
from realtimepr.exceptions import RuleError


def create_rule(
    rule_id: str,
    pattern: str | re.Pattern[str],
    message: str,
    severity: Severity | str = Severity.WARNING,
    category: str = "General",
    description: str = "",
    fix: str | None = None,
) -> Rule:
    """Build a validated ``Rule``, compiling string patterns.

    Raises:
        RuleError: If the pattern does not compile, the severity is unknown,
            or the rule fails ``validate_rule``.
    """
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error as exc:
            raise RuleError(f"Rule {rule_id!r}: invalid pattern: {exc}") from exc
    if isinstance(severity, str):
        try:
            severity = Severity.parse(severity)
        except KeyError:
            raise RuleError(f"Rule {rule_id!r}: unknown severity {severity!r}") from None

    rule = Rule(
        rule_id=rule_id,
        pattern=pattern,
        message=message,
        severity=severity,
        category=category,
        description=description,
        fix=fix,
    )
    if not validate_rule(rule):
        raise RuleError(f"Rule {rule_id!r} is malformed")
    return rule


def create_rule_set(name: str, rules: Iterable[Rule]) -> RuleSet:
    """Group rules under a name."""
    return RuleSet(name=name, rules=tuple(rules))


def rule_set_from_table(
    name: str,
    category: str,
    table: Iterable[tuple[str, str, Severity, str]],
) -> RuleSet:
    """Build a rule set from ``(rule_id, pattern, severity, message)`` rows."""
    return RuleSet(
        name=name,
        rules=tuple(
            create_rule(rule_id, pattern, message, severity, category=category)
            for rule_id, pattern, severity, message in table
        ),
    )


def validate_rule(rule: Rule) -> bool:
    """Check that a rule is well formed."""
    return (
        isinstance(rule.rule_id, str) and bool(rule.rule_id)
        and isinstance(rule.pattern, re.Pattern)
        and isinstance(rule.message, str) and bool(rule.message)
        and isinstance(rule.severity, Severity)
        and isinstance(rule.description, str)
        and (rule.fix is None or isinstance(rule.fix, str))
    )


class RuleEngine:
    """Apply rule sets to source lines.

    Usage::

        engine = RuleEngine(SECURITY_RULE_SETS)
        for s in engine.apply(split_lines(text)):
            print(f"Line {s.line}: {s.message}")
    """

    def __init__(self, rule_sets: Sequence[RuleSet]) -> None:
        self._rule_sets: tuple[RuleSet, ...] = tuple(rule_sets)

    @property
    def rule_sets(self) -> tuple[RuleSet, ...]:
        return self._rule_sets

    @property
    def rule_count(self) -> int:
        return sum(len(rs) for rs in self._rule_sets)

    def apply(self, lines: Sequence[str]) -> list[Suggestion]:
        """Evaluate every rule against every line.

        Returns:
            Suggestions ordered by line, then by rule set and rule order.
        """
        suggestions: list[Suggestion] = []
        for index, line in enumerate(lines, start=1):
            for rule_set in self._rule_sets:
                for rule in rule_set.rules:
                    if rule.matches(line):
                        suggestions.append(Suggestion(
                            line=index,
                            message=rule.message,
                            severity=rule.severity,
                            category=rule.category,
                            rule_id=rule.rule_id,
                        ))
        return suggestions

    def fix_line(self, line: str) -> str:
        """Apply every fixable rule matching ``line``, in rule order."""
        for rule_set in self._rule_sets:
            for rule in rule_set.rules:
                fixed = rule.apply_fix(line)
                if fixed is not None:
                    line = fixed
        return line

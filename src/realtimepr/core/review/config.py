"""Review configuration.

``ReviewConfig`` is an immutable bundle of everything a review run may vary:
the rule sets for each category, extra user rule sets, metric thresholds and
the dependency manifest. It is passed to ``review_source`` explicitly, so
tests and callers never mutate process-wide rule tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from realtimepr.core.rules import (
    DEFAULT_RULE_SETS,
    PERFORMANCE_RULE_SETS,
    SECURITY_RULE_SETS,
    STYLE_RULE_SETS,
    RuleSet,
)


@dataclass(frozen=True)
class MetricThresholds:
    """Limits above (or below) which metrics produce suggestions."""

    max_cyclomatic: int = 10
    max_cognitive: int = 15
    min_maintainability: float = 65.0
    max_function_lines: int = 20
    max_line_length: int = 100


@dataclass(frozen=True)
class ReviewConfig:
    """Immutable configuration for one review run.

    Attributes:
        style_rules: Rule sets for ``--type style``.
        security_rules: Rule sets for ``--type security``.
        performance_rules: Rule sets for ``--type performance``.
        default_rules: Rule sets for ``--type rules``.
        extra_rules: User rule sets, applied together with ``default_rules``.
        thresholds: Metric limits.
        manifest: Declared dependencies for ``--type dependencies``, or None
            when no manifest is available.
        skip_local_and_builtin: Never report local paths or Node.js built-ins
            as missing dependencies, and match subpaths by package name.
    """

    style_rules: tuple[RuleSet, ...] = STYLE_RULE_SETS
    security_rules: tuple[RuleSet, ...] = SECURITY_RULE_SETS
    performance_rules: tuple[RuleSet, ...] = PERFORMANCE_RULE_SETS
    default_rules: tuple[RuleSet, ...] = DEFAULT_RULE_SETS
    extra_rules: tuple[RuleSet, ...] = ()
    thresholds: MetricThresholds = field(default_factory=MetricThresholds)
    manifest: Mapping[str, str] | None = None
    skip_local_and_builtin: bool = False

    def with_extra_rules(self, rule_sets: Iterable[RuleSet]) -> ReviewConfig:
        """Return a copy with additional user rule sets appended."""
        return replace(self, extra_rules=self.extra_rules + tuple(rule_sets))

    def with_manifest(self, manifest: Mapping[str, str] | None) -> ReviewConfig:
        """Return a copy using ``manifest`` for dependency checks."""
        return replace(self, manifest=manifest)

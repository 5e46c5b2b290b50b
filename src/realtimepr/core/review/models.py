"""Review output types: ReviewType and Feedback."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from realtimepr.core.dependency.models import DependencyReport, FindingKind
from realtimepr.core.rules.models import Severity, Suggestion


class ReviewType(Enum):
    """Kinds of review ``realtimepr review --type`` can run."""

    SUGGESTIONS = "suggestions"
    BEST_PRACTICES = "best-practices"
    ANALYSIS = "analysis"
    SECURITY = "security"
    PERFORMANCE = "performance"
    STYLE = "style"
    DEPENDENCIES = "dependencies"
    RULES = "rules"
    ALL = "all"

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass
class Feedback:
    """Summary text plus line-anchored suggestions for one file.

    Attributes:
        summary: Human-readable overview of what was checked and found.
        suggestions: Individual comments, in detection order.
    """

    summary: str
    suggestions: list[Suggestion] = field(default_factory=list)

    @property
    def max_severity(self) -> Severity | None:
        """Return the highest severity among all suggestions, or None."""
        if not self.suggestions:
            return None
        return max(s.severity for s in self.suggestions)

    def count_by_severity(self) -> dict[str, int]:
        """Suggestion counts keyed by lower-case severity name."""
        counts = Counter(s.severity.name.lower() for s in self.suggestions)
        return dict(counts)


# Severity assigned to each dependency finding when shown as a suggestion.
_FINDING_SEVERITY: dict[FindingKind, Severity] = {
    FindingKind.UNUSED_MODULE: Severity.WARNING,
    FindingKind.UNUSED_SYMBOL: Severity.WARNING,
    FindingKind.POTENTIAL_MISSING_DEPENDENCY: Severity.ERROR,
    FindingKind.CIRCULAR_DEPENDENCY: Severity.WARNING,
    FindingKind.DEPRECATED_DEPENDENCY: Severity.WARNING,
    FindingKind.DUPLICATE_IMPORT: Severity.WARNING,
    FindingKind.MIXED_IMPORT_STYLE: Severity.INFO,
    FindingKind.RELATIVE_IMPORT: Severity.INFO,
}


def feedback_from_dependency_report(report: DependencyReport) -> Feedback:
    """Present a dependency report as generic feedback, keeping finding order."""
    return Feedback(
        summary=report.summary,
        suggestions=[
            Suggestion(
                line=finding.line,
                message=finding.message,
                severity=_FINDING_SEVERITY[finding.kind],
                category="Dependencies",
                rule_id=finding.kind.value,
            )
            for finding in report.findings
        ],
    )

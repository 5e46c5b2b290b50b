"""Review dispatcher.

``ReviewEngine.review()`` runs one ``ReviewType`` over a file's text with an
explicit ``ReviewConfig`` and returns ``Feedback``. ``ReviewType.ALL`` runs
every other type in declaration order and concatenates the results.
"""

from __future__ import annotations

import logging
from typing import Sequence

from realtimepr.core.dependency import DependencyAnalyzer
from realtimepr.core.lines import split_lines
from realtimepr.core.review.config import ReviewConfig
from realtimepr.core.review.metrics import analyze_code_metrics
from realtimepr.core.review.models import (
    Feedback,
    ReviewType,
    feedback_from_dependency_report,
)
from realtimepr.core.review.practices import analyze_best_practices, suggest_improvements
from realtimepr.core.rules import RuleEngine, RuleSet
from realtimepr.exceptions import AnalysisError, InvalidInputError

logger = logging.getLogger(__name__)

# Headline used in the summary of each rule-driven review type.
_RULE_REVIEW_TITLES: dict[ReviewType, tuple[str, str]] = {
    ReviewType.STYLE: ("Code Style Analysis Results", "Style Issues Detected"),
    ReviewType.SECURITY: ("Security Analysis Results", "Security Issues Detected"),
    ReviewType.PERFORMANCE: (
        "Performance Analysis Results", "Performance Issues Detected",
    ),
    ReviewType.RULES: ("Rule Check Results", "Rule Violations Detected"),
}


def _rule_summary(title: str, label: str, count: int, rule_sets: Sequence[RuleSet]) -> str:
    lines = [f"{title}:", f"- {label}: {count}", "- Areas Checked:"]
    lines.extend(f"  * {rule_set.name}" for rule_set in rule_sets)
    return "\n".join(lines)


class ReviewEngine:
    """Run review passes over source text.

    The engine holds only its configuration; every ``review()`` call is
    independent.

    Usage::

        engine = ReviewEngine(ReviewConfig())
        feedback = engine.review(text, "app.ts", ReviewType.SECURITY)
    """

    def __init__(self, config: ReviewConfig | None = None) -> None:
        self._config = config or ReviewConfig()

    @property
    def config(self) -> ReviewConfig:
        return self._config

    def rule_sets_for(self, review_type: ReviewType) -> tuple[RuleSet, ...]:
        """Rule sets applied by a rule-driven review type (empty otherwise)."""
        cfg = self._config
        if review_type is ReviewType.STYLE:
            return cfg.style_rules
        if review_type is ReviewType.SECURITY:
            return cfg.security_rules
        if review_type is ReviewType.PERFORMANCE:
            return cfg.performance_rules
        if review_type is ReviewType.RULES:
            return cfg.default_rules + cfg.extra_rules
        return ()

    def review(
        self,
        source_text: str,
        file_path: str = "",
        review_type: ReviewType | str = ReviewType.DEPENDENCIES,
    ) -> Feedback:
        """Run one review type.

        Args:
            source_text: Full file content.
            file_path: Path of the file, used for extension-specific checks.
            review_type: A ``ReviewType`` or its string value.

        Raises:
            InvalidInputError: If ``source_text`` is not a string.
            AnalysisError: If ``review_type`` is unknown.
        """
        if not isinstance(source_text, str):
            raise InvalidInputError(
                f"source_text must be str, got {type(source_text).__name__}"
            )
        if not isinstance(review_type, ReviewType):
            try:
                review_type = ReviewType(review_type)
            except ValueError:
                raise AnalysisError(f"Unknown feedback type: {review_type}") from None

        if review_type is ReviewType.ALL:
            return self._review_all(source_text, file_path)

        logger.debug("Running %s review on %s", review_type.value, file_path or "<text>")
        cfg = self._config

        if review_type is ReviewType.DEPENDENCIES:
            analyzer = DependencyAnalyzer(
                skip_local_and_builtin=cfg.skip_local_and_builtin,
            )
            report = analyzer.analyze(source_text, cfg.manifest)
            return feedback_from_dependency_report(report)
        if review_type is ReviewType.ANALYSIS:
            return analyze_code_metrics(source_text, cfg.thresholds)
        if review_type is ReviewType.BEST_PRACTICES:
            return analyze_best_practices(source_text, file_path)
        if review_type is ReviewType.SUGGESTIONS:
            return suggest_improvements(source_text, cfg.thresholds.max_line_length)

        rule_sets = self.rule_sets_for(review_type)
        suggestions = RuleEngine(rule_sets).apply(split_lines(source_text))
        title, label = _RULE_REVIEW_TITLES[review_type]
        return Feedback(
            summary=_rule_summary(title, label, len(suggestions), rule_sets),
            suggestions=suggestions,
        )

    def _review_all(self, source_text: str, file_path: str) -> Feedback:
        summaries: list[str] = []
        combined = Feedback(summary="")
        for review_type in ReviewType:
            if review_type is ReviewType.ALL:
                continue
            feedback = self.review(source_text, file_path, review_type)
            summaries.append(feedback.summary)
            combined.suggestions.extend(feedback.suggestions)
        combined.summary = "\n\n".join(summaries)
        return combined


def review_source(
    source_text: str,
    file_path: str = "",
    review_type: ReviewType | str = ReviewType.DEPENDENCIES,
    config: ReviewConfig | None = None,
) -> Feedback:
    """Run one review type with the given configuration."""
    return ReviewEngine(config).review(source_text, file_path, review_type)

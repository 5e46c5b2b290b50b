"""File review: dispatch a review type over source text and collect feedback.

Submodules
----------
- ``models``: ReviewType and Feedback.
- ``config``: ReviewConfig and MetricThresholds.
- ``metrics``: Complexity metrics and code smells.
- ``practices``: Best-practice checks and general suggestions.
- ``languages``: Extension-based language detection.
- ``engine``: ReviewEngine and ``review_source``.
"""

from realtimepr.core.review.config import MetricThresholds, ReviewConfig
from realtimepr.core.review.engine import ReviewEngine, review_source
from realtimepr.core.review.languages import SUPPORTED_LANGUAGES, detect_language
from realtimepr.core.review.metrics import analyze_code_metrics, compute_metrics
from realtimepr.core.review.models import (
    Feedback,
    ReviewType,
    feedback_from_dependency_report,
)
from realtimepr.core.review.practices import analyze_best_practices, suggest_improvements

__all__ = [
    "Feedback",
    "MetricThresholds",
    "ReviewConfig",
    "ReviewEngine",
    "ReviewType",
    "SUPPORTED_LANGUAGES",
    "analyze_best_practices",
    "analyze_code_metrics",
    "compute_metrics",
    "detect_language",
    "feedback_from_dependency_report",
    "review_source",
    "suggest_improvements",
]

"""Default rule sets, several with automatic fixes.

These are the rules applied by ``realtimepr review --type rules`` and the
baseline that custom YAML rule files extend.
"""

from __future__ import annotations

from realtimepr.core.rules.engine import create_rule, create_rule_set
from realtimepr.core.rules.models import RuleSet, Severity

DEFAULT_RULE_SETS: tuple[RuleSet, ...] = (
    create_rule_set("Code Style", [
        create_rule(
            "no-console",
            r"console\.(?:log|error|warn|info|debug)",
            "Avoid using console statements in production code",
            Severity.WARNING,
            category="Code Style",
            description="Disallow console statements",
            fix=r"// \g<0>",
        ),
        create_rule(
            "no-debugger",
            r"\bdebugger\b",
            "Remove debugger statements",
            Severity.ERROR,
            category="Code Style",
            description="Disallow debugger statements",
            fix="// debugger",
        ),
    ]),
    create_rule_set("Security", [
        create_rule(
            "no-eval",
            r"\beval\s*\(",
            "Avoid using eval() as it can lead to security vulnerabilities",
            Severity.ERROR,
            category="Security",
            description="Disallow eval()",
        ),
        create_rule(
            "no-inner-html",
            r"\.innerHTML\s*=",
            "Avoid using innerHTML as it can lead to XSS attacks",
            Severity.ERROR,
            category="Security",
            description="Disallow innerHTML",
            fix=".textContent =",
        ),
    ]),
    create_rule_set("Performance", [
        create_rule(
            "no-for-in",
            r"for\s*\(\s*[^)]+\s+in\s+",
            "Consider using for...of instead of for...in for better performance",
            Severity.WARNING,
            category="Performance",
            description="Prefer for...of over for...in",
        ),
        create_rule(
            "no-nested-loops",
            r"for\s*\([^)]+\)\s*\{[^}]*for\s*\([^)]+\)",
            "Deeply nested loops can impact performance",
            Severity.WARNING,
            category="Performance",
            description="Avoid deeply nested loops",
        ),
    ]),
)

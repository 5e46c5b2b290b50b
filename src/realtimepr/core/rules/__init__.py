"""Declarative line-oriented review rules.

Every category analyzer (style, security, performance, the default rules)
is a table of ``Rule`` descriptors evaluated by one ``RuleEngine``.

Submodules
----------
- ``models``: Data types (Severity, Rule, RuleSet, Suggestion).
- ``engine``: RuleEngine plus rule construction and validation helpers.
- ``style_patterns``, ``security_patterns``, ``performance_patterns``:
  Built-in catalogs.
- ``defaults``: Default rule sets, some with automatic fixes.
- ``loader``: YAML custom rule files.
"""

from realtimepr.core.rules.defaults import DEFAULT_RULE_SETS
from realtimepr.core.rules.engine import (
    RuleEngine,
    create_rule,
    create_rule_set,
    rule_set_from_table,
    validate_rule,
)
from realtimepr.core.rules.loader import load_rule_file, parse_rule_document
from realtimepr.core.rules.models import Rule, RuleSet, Severity, Suggestion
from realtimepr.core.rules.performance_patterns import PERFORMANCE_RULE_SETS
from realtimepr.core.rules.security_patterns import SECURITY_RULE_SETS
from realtimepr.core.rules.style_patterns import STYLE_RULE_SETS

__all__ = [
    "DEFAULT_RULE_SETS",
    "PERFORMANCE_RULE_SETS",
    "SECURITY_RULE_SETS",
    "STYLE_RULE_SETS",
    "Rule",
    "RuleEngine",
    "RuleSet",
    "Severity",
    "Suggestion",
    "create_rule",
    "create_rule_set",
    "load_rule_file",
    "parse_rule_document",
    "rule_set_from_table",
    "validate_rule",
]

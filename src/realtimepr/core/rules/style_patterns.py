"""Style rule catalog: naming, formatting, organization, modern JS, TypeScript, docs.

Patterns target JavaScript and TypeScript source and are matched one line
at a time. Each row: (rule_id, regex, severity, message).
"""

from __future__ import annotations

from realtimepr.core.rules.engine import rule_set_from_table
from realtimepr.core.rules.models import RuleSet, Severity

_CATEGORY = "Style"

_NAMING = (
    ("naming-constant", r"const\s+[a-z]+\s*=", Severity.INFO,
     "Consider using UPPER_CASE for constant values."),
    ("naming-variable", r"let\s+[A-Z][a-z]+\s*=", Severity.INFO,
     "Consider using camelCase for variable names."),
    ("naming-function", r"function\s+[a-z]+\s*\(", Severity.INFO,
     "Consider using camelCase for function names."),
    ("naming-class", r"class\s+[a-z]+\s*\{", Severity.WARNING,
     "Consider using PascalCase for class names."),
    ("naming-interface", r"interface\s+[a-z]+\s*\{", Severity.WARNING,
     "Consider using PascalCase for interface names."),
    ("naming-type", r"type\s+[a-z]+\s*=", Severity.WARNING,
     "Consider using PascalCase for type names."),
    ("naming-enum", r"enum\s+[a-z]+\s*\{", Severity.WARNING,
     "Consider using PascalCase for enum names."),
)

_FORMATTING = (
    ("trailing-whitespace", r"\S[ \t]+$", Severity.INFO,
     "Consider removing trailing whitespace."),
    ("multiple-spaces", r"\S {2,}\S", Severity.INFO,
     "Multiple spaces detected. Consider using a single space."),
    ("comment-spacing", r"\S//[^\s/]", Severity.INFO,
     "Consider adding a space after // for comments."),
    ("semicolon-spacing", r"\S;[^\s;]", Severity.INFO,
     "Consider adding a space after semicolons."),
    ("comma-spacing", r",[^\s]", Severity.INFO,
     "Consider adding a space after commas."),
    ("brace-spacing-open", r"\S\{[^\s}]", Severity.INFO,
     "Consider adding a space after opening brace."),
    ("brace-spacing-close", r"[^\s{]\}", Severity.INFO,
     "Consider adding a space before closing brace."),
)

_ORGANIZATION = (
    ("one-import-per-line", r"import.*from.*import", Severity.WARNING,
     "Multiple imports on one line. Consider separating them."),
    ("one-export-per-line", r"export.*export", Severity.WARNING,
     "Multiple exports on one line. Consider separating them."),
    ("else-placement", r"^\s*\}\s*else\s*\{", Severity.INFO,
     "Consider putting else on the same line as the closing brace."),
    ("catch-placement", r"^\s*\}\s*catch\s*\(", Severity.INFO,
     "Consider putting catch on the same line as the closing brace."),
    ("finally-placement", r"^\s*\}\s*finally\s*\{", Severity.INFO,
     "Consider putting finally on the same line as the closing brace."),
)

_MODERN_JS = (
    ("no-var", r"var\s+\w+\s*=", Severity.WARNING,
     "Consider using const or let instead of var."),
    ("prefer-arrow", r"function\s+\w+\s*\([^)]*\)\s*\{", Severity.INFO,
     "Consider using arrow functions for better readability."),
    ("prefer-async-await", r"\.then\s*\(\s*function\s*\(", Severity.INFO,
     "Consider using async/await instead of .then()."),
    ("prefer-for-of",
     r"for\s*\(\s*let\s+\w+\s*=\s*0\s*;\s*\w+\s*<\s*\w+\.length\s*;\s*\w+\+\+\)",
     Severity.INFO, "Consider using for...of loop or array methods."),
    ("prefer-object-entries", r"Object\.keys\s*\(\s*\w+\s*\)\.forEach", Severity.INFO,
     "Consider using Object.entries() for better readability."),
    ("prefer-spread-concat", r"\.concat\s*\(", Severity.INFO,
     "Consider using spread operator (...) for better readability."),
    ("prefer-spread-apply", r"\.apply\s*\(", Severity.INFO,
     "Consider using spread operator (...) instead of apply()."),
)

_TYPESCRIPT = (
    ("no-explicit-any", r":\s*any\b", Severity.WARNING,
     "Avoid using any type. Consider using a more specific type."),
    ("no-object-type", r":\s*Object\b", Severity.WARNING,
     "Avoid using Object type. Consider using a more specific type."),
    ("no-function-type", r":\s*Function\b", Severity.WARNING,
     "Avoid using Function type. Consider using a more specific function type."),
    ("no-any-assertion", r"\bas\s+any\b", Severity.WARNING,
     "Avoid using type assertion to any. Consider using a more specific type."),
)

_DOCUMENTATION = (
    ("jsdoc-exported-type", r"export\s+(?:class|interface|type|enum)\s+\w+",
     Severity.INFO, "Consider adding JSDoc comments for exported types."),
    ("jsdoc-exported-value", r"export\s+(?:function|const|let)\s+\w+",
     Severity.INFO,
     "Consider adding JSDoc comments for exported functions and variables."),
)

STYLE_RULE_SETS: tuple[RuleSet, ...] = (
    rule_set_from_table("Naming conventions", _CATEGORY, _NAMING),
    rule_set_from_table("Code formatting", _CATEGORY, _FORMATTING),
    rule_set_from_table("Code organization", _CATEGORY, _ORGANIZATION),
    rule_set_from_table("Modern JavaScript features", _CATEGORY, _MODERN_JS),
    rule_set_from_table("TypeScript best practices", _CATEGORY, _TYPESCRIPT),
    rule_set_from_table("Documentation", _CATEGORY, _DOCUMENTATION),
)

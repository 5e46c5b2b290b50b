"""Performance rule catalog.

Each row: (rule_id, regex, severity, message).
"""

from __future__ import annotations

from realtimepr.core.rules.engine import rule_set_from_table
from realtimepr.core.rules.models import RuleSet, Severity

_CATEGORY = "Performance"

_MEMORY_LEAKS = (
    ("listener-cleanup",
     r"""addEventListener\s*\(\s*['"][^'"]+['"]\s*,\s*[^,)]+(?!.*once:\s*true)""",
     Severity.WARNING,
     "Event listener without cleanup. Consider using removeEventListener or "
     "{ once: true } option."),
    ("interval-cleanup", r"setInterval\s*\(", Severity.WARNING,
     "setInterval without clearInterval. Consider using setTimeout or "
     "ensuring cleanup."),
    ("worker-termination", r"new\s+Worker\s*\([^)]+\)(?!.*\.terminate)", Severity.WARNING,
     "Web Worker created without termination. Consider calling terminate() "
     "when done."),
)

_LOOPS = (
    ("indexed-array-loop",
     r"for\s*\(\s*let\s+\w+\s*=\s*0\s*;\s*\w+\s*<\s*\w+\.length\s*;\s*\w+\+\+\)",
     Severity.INFO,
     "Inefficient array iteration. Consider using for...of or array methods."),
    ("foreach-function", r"\.forEach\s*\(\s*function\s*\(", Severity.INFO,
     "Consider using arrow functions for better performance in forEach."),
    ("for-in-loop", r"for\s*\(\s*const\s+\w+\s+in\s+\w+\)", Severity.INFO,
     "for...in loop detected. Consider using for...of or Object.keys() for "
     "better performance."),
)

_DOM = (
    ("inner-html-assignment", r"\.innerHTML\s*=\s*[^;]+\$", Severity.WARNING,
     "innerHTML assignment can be slow. Consider using textContent or DOM "
     "methods."),
    ("inline-style", r"\.style\.[a-zA-Z]+\s*=\s*[^;]+", Severity.INFO,
     "Direct style manipulation can cause reflows. Consider using CSS classes."),
    ("uncached-dom-query", r"\.getElementById\s*\([^)]+\)(?!.*\.style)", Severity.INFO,
     "Consider caching DOM queries to avoid repeated lookups."),
)

_ASYNC = (
    ("promise-all", r"await\s+Promise\.all\s*\([^)]+\)", Severity.INFO,
     "Consider using Promise.allSettled() for better error handling in "
     "parallel operations."),
    ("then-function", r"\.then\s*\(\s*function\s*\(", Severity.INFO,
     "Consider using async/await for better readability and error handling."),
    ("promise-constructor", r"new\s+Promise\s*\(\s*function\s*\(", Severity.INFO,
     "Consider using async/await instead of raw Promise constructor."),
)

_DATABASE = (
    ("mongoose-lean", r"\.findOne\s*\(\s*\{[^}]+\}\s*\)(?!.*\.lean)", Severity.INFO,
     "Consider using .lean() for read-only operations to improve performance."),
    ("unbounded-find", r"\.find\s*\(\s*\{[^}]+\}\s*\)(?!.*\.limit)", Severity.WARNING,
     "Consider adding .limit() to prevent large result sets."),
    ("aggregate-disk-use",
     r"\.aggregate\s*\(\s*\[[^\]]+\]\s*\)(?!.*\.allowDiskUse)", Severity.INFO,
     "Consider using .allowDiskUse() for large aggregations."),
)

_CACHING = (
    ("fetch-cache", r"\bfetch\s*\((?!.*cache)", Severity.INFO,
     "Consider adding cache options to fetch requests."),
    ("axios-cache-headers", r"axios\.get\s*\((?!.*headers)", Severity.INFO,
     "Consider adding cache headers to axios requests."),
)

_RESOURCE_LOADING = (
    ("script-async", r"<script\s+src=(?![^>]*\b(?:async|defer)\b)", Severity.INFO,
     "Consider adding async or defer to script tags."),
    ("image-lazy", r"<img\s+src=(?![^>]*\bloading=)", Severity.INFO,
     'Consider adding loading="lazy" to images below the fold.'),
)

_ALGORITHMS = (
    ("filter-map", r"\.filter\s*\([^)]+\)\.map\s*\(", Severity.INFO,
     "Consider combining filter and map operations for better performance."),
    ("nested-foreach", r"\.forEach\s*\([^)]+\)\.forEach\s*\(", Severity.WARNING,
     "Nested forEach loops detected. Consider using a more efficient algorithm."),
    ("index-of-check", r"\.indexOf\s*\([^)]+\)\s*!==\s*-1", Severity.INFO,
     "Consider using .includes() for better readability and performance."),
)

_MEMORY_USAGE = (
    ("array-constructor", r"new\s+Array\s*\(\s*\d+\s*\)", Severity.INFO,
     "Consider using Array.from() or Array(n).fill() for better memory usage."),
    ("array-push", r"\.push\s*\(\s*[^)]+\s*\)(?!.*\.length)", Severity.INFO,
     "Consider pre-allocating array size for better performance."),
)

_NETWORK = (
    ("fetch-compression", r"\bfetch\s*\((?!.*compress)", Severity.INFO,
     "Consider enabling compression for network requests."),
    ("axios-gzip", r"axios\.get\s*\((?!.*gzip)", Severity.INFO,
     "Consider enabling gzip compression for axios requests."),
)

PERFORMANCE_RULE_SETS: tuple[RuleSet, ...] = (
    rule_set_from_table("Memory Leaks", _CATEGORY, _MEMORY_LEAKS),
    rule_set_from_table("Loop Efficiency", _CATEGORY, _LOOPS),
    rule_set_from_table("DOM Performance", _CATEGORY, _DOM),
    rule_set_from_table("Async Operations", _CATEGORY, _ASYNC),
    rule_set_from_table("Database Operations", _CATEGORY, _DATABASE),
    rule_set_from_table("Caching", _CATEGORY, _CACHING),
    rule_set_from_table("Resource Loading", _CATEGORY, _RESOURCE_LOADING),
    rule_set_from_table("Algorithm Complexity", _CATEGORY, _ALGORITHMS),
    rule_set_from_table("Memory Usage", _CATEGORY, _MEMORY_USAGE),
    rule_set_from_table("Network Optimization", _CATEGORY, _NETWORK),
)

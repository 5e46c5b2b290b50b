"""Security rule catalog.

Line-level heuristics for common web application weaknesses. A trailing
``\\$`` in a pattern looks for template interpolation (``${...}``) in the
assigned or passed value, i.e. data that is probably not a constant.

Each row: (rule_id, regex, severity, message).
"""

from __future__ import annotations

from realtimepr.core.rules.engine import rule_set_from_table
from realtimepr.core.rules.models import RuleSet, Severity

_CATEGORY = "Security"

_SQL_MESSAGE = (
    "Potential SQL injection vulnerability. Use parameterized queries "
    "instead of string interpolation."
)

_SQL_INJECTION = tuple(
    (f"sql-injection-{verb.lower()}",
     rf"""\.query\s*\(\s*['"`]\s*{verb}.*\$\{{""",
     Severity.ERROR, _SQL_MESSAGE)
    for verb in ("SELECT", "INSERT", "UPDATE", "DELETE")
)

_XSS = (
    ("xss-inner-html", r"\.innerHTML\s*=\s*[^;]+\$", Severity.ERROR,
     "Potential XSS vulnerability. Avoid using innerHTML with user input."),
    ("xss-outer-html", r"\.outerHTML\s*=\s*[^;]+\$", Severity.ERROR,
     "Potential XSS vulnerability. Avoid using outerHTML with user input."),
    ("xss-document-write", r"document\.write\s*\(\s*[^;]+\$", Severity.ERROR,
     "Potential XSS vulnerability. Avoid using document.write with user input."),
    ("xss-eval", r"\beval\s*\(\s*[^;]+\$", Severity.ERROR,
     "Potential XSS vulnerability. Avoid using eval with user input."),
)

_COMMAND_INJECTION = (
    ("command-injection-exec", r"child_process\.exec\s*\(\s*[^;]+\$", Severity.ERROR,
     "Potential command injection vulnerability. Use child_process.execFile "
     "with proper argument arrays."),
    ("command-injection-spawn", r"child_process\.spawn\s*\(\s*[^;]+\$", Severity.ERROR,
     "Potential command injection vulnerability. Use proper argument arrays "
     "with spawn."),
)

_PATH_TRAVERSAL = (
    ("path-traversal-read", r"fs\.readFile\s*\(\s*[^;]+\$", Severity.WARNING,
     "Potential path traversal vulnerability. Validate and sanitize file paths."),
    ("path-traversal-write", r"fs\.writeFile\s*\(\s*[^;]+\$", Severity.WARNING,
     "Potential path traversal vulnerability. Validate and sanitize file paths."),
)

_CRYPTO = (
    ("weak-hash-md5", r"""crypto\.createHash\s*\(\s*['"]md5['"]""", Severity.ERROR,
     "MD5 is cryptographically broken. Use SHA-256 or better."),
    ("weak-hash-sha1", r"""crypto\.createHash\s*\(\s*['"]sha1['"]""", Severity.WARNING,
     "SHA-1 is cryptographically weak. Use SHA-256 or better."),
    ("weak-signature-sha1", r"""\.sign\s*\(\s*[^,]+,\s*['"]sha1['"]""", Severity.WARNING,
     "SHA-1 is cryptographically weak. Use SHA-256 or better."),
)

_SECRETS = (
    ("hardcoded-secret",
     r"""(?:password|secret|key|token)\s*=\s*['"][^'"]{8,}['"]""",
     Severity.ERROR,
     "Potential hardcoded secret detected. Use environment variables or "
     "secure secret management."),
    ("hardcoded-api-key",
     r"""(?:api[_-]?key|access[_-]?token)\s*=\s*['"][^'"]{8,}['"]""",
     Severity.ERROR,
     "Potential hardcoded API key or token detected. Use environment "
     "variables or secure secret management."),
)

_TRANSPORT = (
    ("insecure-http", r"http://", Severity.WARNING,
     "Insecure HTTP protocol detected. Use HTTPS instead."),
    ("insecure-websocket", r"""new\s+WebSocket\s*\(\s*['"]ws://""", Severity.WARNING,
     "Insecure WebSocket protocol detected. Use WSS instead."),
)

_COOKIES = (
    ("cookie-secure", r"\.cookie\s*=(?!.*;\s*secure)", Severity.WARNING,
     "Cookie set without secure flag. Add secure flag for HTTPS-only cookies."),
    ("cookie-http-only", r"\.cookie\s*=(?!.*;\s*httpOnly)", Severity.WARNING,
     "Cookie set without httpOnly flag. Add httpOnly flag to prevent XSS access."),
)

_CORS = (
    ("cors-wildcard-origin", r"Access-Control-Allow-Origin:\s*\*", Severity.WARNING,
     "Overly permissive CORS policy. Specify exact origins instead of wildcard."),
    ("cors-wildcard-methods", r"Access-Control-Allow-Methods:\s*\*", Severity.WARNING,
     "Overly permissive CORS methods. Specify exact methods needed."),
)

_RATE_LIMITING = (
    ("missing-rate-limit", r"express\.Router\s*\(\s*\)(?!.*rateLimit)", Severity.INFO,
     "No rate limiting detected. Consider adding rate limiting middleware."),
)

_INPUT_VALIDATION = (
    ("unvalidated-body", r"req\.body(?!.*validate)", Severity.INFO,
     "No input validation detected. Consider adding validation middleware."),
    ("unvalidated-query", r"req\.query(?!.*validate)", Severity.INFO,
     "No query parameter validation detected. Consider adding validation "
     "middleware."),
)

_ERROR_HANDLING = (
    ("empty-catch", r"catch\s*\(\s*\)\s*\{", Severity.WARNING,
     "Empty catch block detected. Add proper error handling."),
    ("catch-console-log", r"catch\s*\(\s*error\s*\)\s*\{\s*console\.log", Severity.INFO,
     "Error logged to console. Consider proper error handling and logging."),
)

SECURITY_RULE_SETS: tuple[RuleSet, ...] = (
    rule_set_from_table("SQL Injection", _CATEGORY, _SQL_INJECTION),
    rule_set_from_table("Cross-Site Scripting (XSS)", _CATEGORY, _XSS),
    rule_set_from_table("Command Injection", _CATEGORY, _COMMAND_INJECTION),
    rule_set_from_table("Path Traversal", _CATEGORY, _PATH_TRAVERSAL),
    rule_set_from_table("Cryptographic Practices", _CATEGORY, _CRYPTO),
    rule_set_from_table("Secret Management", _CATEGORY, _SECRETS),
    rule_set_from_table("HTTP Security", _CATEGORY, _TRANSPORT),
    rule_set_from_table("Cookie Security", _CATEGORY, _COOKIES),
    rule_set_from_table("CORS Configuration", _CATEGORY, _CORS),
    rule_set_from_table("Rate Limiting", _CATEGORY, _RATE_LIMITING),
    rule_set_from_table("Input Validation", _CATEGORY, _INPUT_VALIDATION),
    rule_set_from_table("Error Handling", _CATEGORY, _ERROR_HANDLING),
)

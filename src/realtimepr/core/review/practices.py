"""Best-practice checks and general improvement suggestions.

These checks need a little context beyond a single line (the file
extension, the following line, or the file as a whole), so they are plain
functions rather than rule table entries.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from realtimepr.core.lines import split_lines
from realtimepr.core.review.models import Feedback
from realtimepr.core.rules.models import Severity, Suggestion

_MAGIC_NUMBER = re.compile(r"[^a-zA-Z](\d{2,})[^a-zA-Z]")
_TRY_OPEN = re.compile(r"try ?\{")
_CATCH_OPEN = re.compile(r"catch ?\(")
_HAS_COMMENT = re.compile(r"//|#")
_DECLARATION = re.compile(r"\b(?:var|let|const) ")
_GENERIC_NAME = re.compile(r"\b(?:foo|bar|baz)\b")

_SEMICOLON_EXTENSIONS: frozenset[str] = frozenset({".js", ".ts"})
_NO_SEMICOLON_ENDINGS: tuple[str, ...] = (";", "{", "}", ",")
_NO_SEMICOLON_STARTS: tuple[str, ...] = ("//", "*", "import", "export")


def _needs_semicolon(stripped: str) -> bool:
    return (
        bool(stripped)
        and not stripped.endswith(_NO_SEMICOLON_ENDINGS)
        and not stripped.startswith(_NO_SEMICOLON_STARTS)
    )


def analyze_best_practices(code: str, file_path: str = "") -> Feedback:
    """Flag magic numbers, missing semicolons and ``try`` without ``catch``.

    The semicolon check only runs for ``.js`` and ``.ts`` files. A ``try``
    block counts as handled when the next line opens a ``catch``.
    """
    lines = split_lines(code)
    check_semicolons = PurePath(file_path).suffix.lower() in _SEMICOLON_EXTENSIONS
    suggestions: list[Suggestion] = []

    for index, line in enumerate(lines, start=1):
        if _MAGIC_NUMBER.search(line):
            suggestions.append(Suggestion(
                line=index,
                message="Possible magic number detected. Consider using named constants.",
                severity=Severity.INFO,
                category="Best Practices",
                rule_id="magic-number",
            ))
        if check_semicolons and _needs_semicolon(line.strip()):
            suggestions.append(Suggestion(
                line=index,
                message="Possible missing semicolon.",
                severity=Severity.INFO,
                category="Best Practices",
                rule_id="missing-semicolon",
            ))
        if _TRY_OPEN.search(line):
            following = lines[index] if index < len(lines) else ""
            if not _CATCH_OPEN.search(following):
                suggestions.append(Suggestion(
                    line=index,
                    message="try block without catch detected.",
                    severity=Severity.WARNING,
                    category="Best Practices",
                    rule_id="try-without-catch",
                ))

    if suggestions:
        summary = f"{len(suggestions)} best practice issue(s) found."
    else:
        summary = "No best practice issues found."
    return Feedback(summary=summary, suggestions=suggestions)


def suggest_improvements(code: str, max_line_length: int = 100) -> Feedback:
    """General readability suggestions: comments, long lines, generic names."""
    suggestions: list[Suggestion] = []

    if not _HAS_COMMENT.search(code):
        suggestions.append(Suggestion(
            line=1,
            message="Consider adding comments to improve code readability.",
            category="Suggestions",
            rule_id="add-comments",
        ))

    for index, line in enumerate(split_lines(code), start=1):
        if len(line) > max_line_length:
            suggestions.append(Suggestion(
                line=index,
                message=(
                    f"Line exceeds {max_line_length} characters. "
                    "Consider breaking it up."
                ),
                category="Suggestions",
                rule_id="line-length",
            ))

    if _DECLARATION.search(code) and _GENERIC_NAME.search(code):
        suggestions.append(Suggestion(
            line=1,
            message="Avoid generic variable names like foo, bar, baz.",
            category="Suggestions",
            rule_id="generic-names",
        ))

    if suggestions:
        summary = f"{len(suggestions)} suggestion(s) for improvement."
    else:
        summary = "No suggestions found."
    return Feedback(summary=summary, suggestions=suggestions)

"""Tests for best-practice checks and general suggestions."""

from __future__ import annotations

from realtimepr.core.review import analyze_best_practices, suggest_improvements


class TestBestPractices:
    """Magic numbers, semicolons and try/catch pairing."""

    def test_missing_semicolon_only_for_js_and_ts(self) -> None:
        code = "const a = b\n"
        js = analyze_best_practices(code, "app.js")
        py = analyze_best_practices(code, "app.py")
        assert [s.rule_id for s in js.suggestions] == ["missing-semicolon"]
        assert py.suggestions == []

    def test_terminated_lines_are_fine(self) -> None:
        code = "import x from 'x';\nfunction f() {\n  return 1;\n}\n"
        feedback = analyze_best_practices(code, "app.ts")
        assert feedback.suggestions == []
        assert feedback.summary == "No best practice issues found."

    def test_try_without_catch(self) -> None:
        code = "try {\n  run();\n} finally {\n  done();\n}"
        feedback = analyze_best_practices(code, "app.py")
        assert [(s.line, s.rule_id) for s in feedback.suggestions] == [
            (1, "try-without-catch")
        ]

    def test_try_followed_by_catch(self) -> None:
        code = "try { run(); }\ncatch (e) { handle(e); }"
        feedback = analyze_best_practices(code, "app.py")
        assert feedback.suggestions == []

    def test_magic_number(self) -> None:
        feedback = analyze_best_practices("retry(run, 300);", "app.ts")
        assert [s.rule_id for s in feedback.suggestions] == ["magic-number"]
        assert feedback.summary == "1 best practice issue(s) found."


class TestSuggestImprovements:
    """Comments, long lines, generic names."""

    def test_no_comments(self) -> None:
        feedback = suggest_improvements("const total = 1;")
        assert [s.rule_id for s in feedback.suggestions] == ["add-comments"]

    def test_long_line(self) -> None:
        code = "// doc\n" + "x" * 101
        feedback = suggest_improvements(code)
        assert [(s.line, s.rule_id) for s in feedback.suggestions] == [
            (2, "line-length")
        ]

    def test_line_length_is_configurable(self) -> None:
        feedback = suggest_improvements("// short line", max_line_length=5)
        assert [s.rule_id for s in feedback.suggestions] == ["line-length"]

    def test_generic_names(self) -> None:
        feedback = suggest_improvements("// demo\nlet foo = 1;")
        assert [s.rule_id for s in feedback.suggestions] == ["generic-names"]

    def test_clean_code(self) -> None:
        feedback = suggest_improvements("// adds numbers\nconst sum = a + b;")
        assert feedback.suggestions == []
        assert feedback.summary == "No suggestions found."

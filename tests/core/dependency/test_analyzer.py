"""Tests for the DependencyAnalyzer entry point.

Covers the report shape, the fixed order of finding passes, manifest
handling, and the behaviour of the analyzer on concrete sample files.
"""

from __future__ import annotations

import pytest

from realtimepr.core.dependency import (
    DependencyAnalyzer,
    DependencyReport,
    FindingKind,
    analyze_dependencies,
)
from realtimepr.exceptions import InvalidInputError


def _kinds(report: DependencyReport) -> list[FindingKind]:
    return [f.kind for f in report.findings]


class TestSampleFiles:
    """Behaviour on small, fully specified inputs."""

    def test_self_cycle_single_finding(self) -> None:
        report = analyze_dependencies("import { a } from './a'")
        cycles = report.of_kind(FindingKind.CIRCULAR_DEPENDENCY)
        assert len(cycles) == 1
        assert cycles[0].module == "./a"

    def test_unused_detection(self) -> None:
        report = analyze_dependencies(
            "import { unusedThing } from 'mod';\nconsole.log('hello');"
        )
        unused_module = report.of_kind(FindingKind.UNUSED_MODULE)
        unused_symbol = report.of_kind(FindingKind.UNUSED_SYMBOL)
        assert [(f.module, f.line) for f in unused_module] == [("mod", 1)]
        assert [(f.symbol, f.line) for f in unused_symbol] == [("unusedThing", 1)]

    def test_used_suppression(self) -> None:
        report = analyze_dependencies(
            "import { used } from 'mod';\nconsole.log(used);"
        )
        assert report.of_kind(FindingKind.UNUSED_MODULE) == []
        assert report.of_kind(FindingKind.UNUSED_SYMBOL) == []

    def test_duplicate_detection(self) -> None:
        report = analyze_dependencies(
            "import { a } from 'mod';\nimport { b } from 'mod';"
        )
        duplicates = report.of_kind(FindingKind.DUPLICATE_IMPORT)
        assert [(f.module, f.line) for f in duplicates] == [("mod", 2)]

    def test_relative_flag(self) -> None:
        relative = analyze_dependencies("import x from './local'\nx();")
        absolute = analyze_dependencies("import x from 'pkg'\nx();")
        assert [f.module for f in relative.of_kind(FindingKind.RELATIVE_IMPORT)] == [
            "./local"
        ]
        assert absolute.of_kind(FindingKind.RELATIVE_IMPORT) == []

    def test_manifest_absent_skips_manifest_checks(self) -> None:
        text = "import old from 'old';\nconst a = require('axios');\nold();"
        report = analyze_dependencies(text, manifest=None)
        assert report.summary.startswith("Dependency Analysis Results:")
        assert report.of_kind(FindingKind.CIRCULAR_DEPENDENCY)
        assert report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY) == []
        assert report.of_kind(FindingKind.DEPRECATED_DEPENDENCY) == []

    def test_manifest_present_enables_manifest_checks(self) -> None:
        text = "import old from 'old';\nconst a = require('axios');\nold();"
        report = analyze_dependencies(text, manifest={"old": "^0.3.0"})
        missing = report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY)
        deprecated = report.of_kind(FindingKind.DEPRECATED_DEPENDENCY)
        assert [(f.module, f.line) for f in missing] == [("axios", 2)]
        assert [(f.module, f.detail) for f in deprecated] == [("old", "^0.3.0")]


class TestReportShape:
    """Summary text, counts and finding order."""

    def test_empty_input_gives_empty_report(self) -> None:
        report = analyze_dependencies("")
        assert report.findings == ()
        assert report.imports == ()
        assert "- Total Imports: 0" in report.summary

    def test_findings_follow_pass_order(self) -> None:
        text = (
            "import a from './a';\n"
            "import { b } from './a';\n"
            "const c = require('c');\n"
        )
        report = analyze_dependencies(text, manifest={})
        kinds = _kinds(report)
        order = [
            FindingKind.UNUSED_SYMBOL,
            FindingKind.CIRCULAR_DEPENDENCY,
            FindingKind.DUPLICATE_IMPORT,
            FindingKind.MIXED_IMPORT_STYLE,
            FindingKind.RELATIVE_IMPORT,
            FindingKind.POTENTIAL_MISSING_DEPENDENCY,
        ]
        positions = [kinds.index(kind) for kind in order]
        assert positions == sorted(positions)

    def test_summary_counts_match_findings(self) -> None:
        text = (
            "import a from 'mod';\n"
            "import { b, c } from 'mod';\n"
            "import * as d from './d';\n"
        )
        report = analyze_dependencies(text)
        counts = report.counts
        assert counts.total_imports == 3
        assert counts.unused_symbols == len(report.of_kind(FindingKind.UNUSED_SYMBOL))
        assert counts.duplicate_imports == 1
        assert counts.mixed_import_styles == 1
        assert counts.relative_imports == 1
        assert f"- Unused Imported Symbols: {counts.unused_symbols}" in report.summary
        assert report.summary == counts.render()

    def test_missing_count_is_distinct_modules(self) -> None:
        text = "const a = require('x');\nconst b = require('x');"
        report = analyze_dependencies(text, manifest={})
        assert len(report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY)) == 2
        assert report.counts.missing_dependencies == 1

    def test_every_finding_names_an_imported_module(self) -> None:
        text = (
            "import a from './a';\n"
            "import { b } from 'lib';\n"
            "import * as c from 'lib';\n"
            "const d = require('extra');\n"
        )
        report = analyze_dependencies(text, manifest={"lib": "~0.1.0"})
        imported = {r.module_path for r in report.imports}
        for finding in report.findings:
            if finding.kind is FindingKind.POTENTIAL_MISSING_DEPENDENCY:
                continue
            assert finding.module in imported


class TestInputHandling:
    """Invalid inputs and manifest immutability."""

    @pytest.mark.parametrize("bad", [None, b"import a from 'a'", 42])
    def test_non_string_source_raises(self, bad: object) -> None:
        with pytest.raises(InvalidInputError):
            DependencyAnalyzer().analyze(bad)  # type: ignore[arg-type]

    def test_non_mapping_manifest_is_ignored(self) -> None:
        report = analyze_dependencies(
            "const a = require('axios');", manifest=["axios"]  # type: ignore[arg-type]
        )
        assert report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY) == []

    def test_manifest_is_not_mutated(self) -> None:
        manifest = {"old": "^0.1.0"}
        analyze_dependencies("import old from 'old';\nold();", manifest)
        assert manifest == {"old": "^0.1.0"}

    def test_crlf_line_endings(self) -> None:
        report = analyze_dependencies("import a from 'a';\r\na();\r\n")
        assert report.of_kind(FindingKind.UNUSED_MODULE) == []
        assert report.imports[0].source_line == 1

    def test_form_feed_does_not_start_a_line(self) -> None:
        report = analyze_dependencies("// section\x0c\nimport x from './local';\nx();")
        assert report.imports[0].source_line == 2
        relative = report.of_kind(FindingKind.RELATIVE_IMPORT)
        assert [f.line for f in relative] == [2]

    @pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x0b", "\x85", "\x1c"])
    def test_unicode_separators_keep_line_numbers(self, separator: str) -> None:
        text = f"const s = 'a{separator}b';\nimport y from 'y';\ny();"
        report = analyze_dependencies(text)
        assert [r.source_line for r in report.imports] == [2]
        assert {f.line for f in report.findings} == {2}

    def test_non_string_manifest_values_are_coerced(self) -> None:
        report = analyze_dependencies(
            "import x from 'x';\nx();",
            manifest={"x": 1},  # type: ignore[dict-item]
        )
        assert report.of_kind(FindingKind.DEPRECATED_DEPENDENCY) == []

    def test_non_string_manifest_keys_are_coerced(self) -> None:
        report = analyze_dependencies(
            "const a = require('1');",
            manifest={1: "^1.0.0"},  # type: ignore[dict-item]
        )
        assert report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY) == []


class TestMissingDependencyOptions:
    """Missing-dependency reporting with and without the skip option."""

    _TEXT = (
        "const fs = require('fs');\n"
        "const local = require('./local');\n"
        "const fp = require('lodash/fp');\n"
    )

    def test_default_reports_every_undeclared_target(self) -> None:
        report = analyze_dependencies(self._TEXT, {"lodash": "^4.0.0"})
        missing = report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY)
        assert [(f.module, f.line) for f in missing] == [
            ("fs", 1), ("./local", 2), ("lodash/fp", 3),
        ]

    def test_skip_option_reports_nothing_here(self) -> None:
        report = analyze_dependencies(
            self._TEXT, {"lodash": "^4.0.0"}, skip_local_and_builtin=True
        )
        assert report.of_kind(FindingKind.POTENTIAL_MISSING_DEPENDENCY) == []
        assert report.counts.missing_dependencies == 0

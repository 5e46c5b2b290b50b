"""Tests for line-oriented import and ``require`` extraction.

Verifies:
    - Each of the three import forms produces the right kind and symbols.
    - Named lists are trimmed, blank slots dropped, aliases bind the alias.
    - Malformed and multi-line imports are silently skipped.
    - ``require`` calls are found with their line numbers.
"""

from __future__ import annotations

from realtimepr.core.dependency import (
    ImportKind,
    extract_dynamic_loads,
    extract_imports,
)
from realtimepr.core.dependency.extractor import parse_import_line


class TestImportForms:
    """One record per recognised import line."""

    def test_default_import(self) -> None:
        record = parse_import_line("import React from 'react';", 3)
        assert record is not None
        assert record.source_line == 3
        assert record.module_path == "react"
        assert record.import_kind is ImportKind.DEFAULT
        assert record.imported_symbols == ("React",)

    def test_namespace_import(self) -> None:
        record = parse_import_line('import * as path from "path";', 1)
        assert record is not None
        assert record.import_kind is ImportKind.NAMESPACE
        assert record.imported_symbols == ("path",)

    def test_named_import(self) -> None:
        record = parse_import_line("import { useState, useEffect } from 'react';", 1)
        assert record is not None
        assert record.import_kind is ImportKind.NAMED
        assert record.imported_symbols == ("useState", "useEffect")

    def test_relative_module_path(self) -> None:
        record = parse_import_line("import util from './util';", 1)
        assert record is not None
        assert record.module_path == "./util"
        assert record.is_relative is True

    def test_absolute_module_path_is_not_relative(self) -> None:
        record = parse_import_line("import lodash from 'lodash';", 1)
        assert record is not None
        assert record.is_relative is False


class TestNamedSymbols:
    """Splitting of ``{ ... }`` lists."""

    def test_whitespace_is_trimmed(self) -> None:
        record = parse_import_line("import {  a ,b  } from 'm';", 1)
        assert record is not None
        assert record.imported_symbols == ("a", "b")

    def test_trailing_comma_slot_is_dropped(self) -> None:
        record = parse_import_line("import { a, b, } from 'm';", 1)
        assert record is not None
        assert record.imported_symbols == ("a", "b")

    def test_alias_binds_local_name(self) -> None:
        record = parse_import_line("import { readFile as read } from 'fs';", 1)
        assert record is not None
        assert record.imported_symbols == ("read",)

    def test_all_blank_list_yields_no_record(self) -> None:
        assert parse_import_line("import { , } from 'm';", 1) is None


class TestMalformedLines:
    """Lines that do not match any form are ignored."""

    def test_plain_code_is_ignored(self) -> None:
        assert parse_import_line("const x = 1;", 1) is None

    def test_side_effect_import_is_ignored(self) -> None:
        assert parse_import_line("import './styles.css';", 1) is None

    def test_multi_line_import_is_ignored(self) -> None:
        lines = ["import {", "  a,", "  b,", "} from 'm';"]
        assert extract_imports(lines) == []

    def test_missing_quotes_is_ignored(self) -> None:
        assert parse_import_line("import x from react;", 1) is None


class TestExtractImports:
    """Whole-file extraction."""

    def test_records_are_in_line_order(self) -> None:
        lines = [
            "import a from 'a';",
            "",
            "import * as b from 'b';",
            "import { c } from 'c';",
        ]
        records = extract_imports(lines)
        assert [r.module_path for r in records] == ["a", "b", "c"]
        assert [r.source_line for r in records] == [1, 3, 4]

    def test_empty_input(self) -> None:
        assert extract_imports([]) == []


class TestDynamicLoads:
    """``require`` call extraction."""

    def test_require_calls_are_found(self) -> None:
        lines = [
            "const fs = require('fs');",
            "const x = 1;",
            'const axios = require("axios");',
        ]
        loads = extract_dynamic_loads(lines)
        assert [(d.line, d.target) for d in loads] == [(1, "fs"), (3, "axios")]

    def test_only_first_require_per_line(self) -> None:
        loads = extract_dynamic_loads(["const a = require('a'), b = require('b');"])
        assert [d.target for d in loads] == ["a"]

"""Tests for package.json reading and the manifest cross-reference checks.

Verifies:
    - dependencies and devDependencies are merged.
    - Unreadable or malformed manifests raise ManifestUnavailableError.
    - Manifest discovery walks up from the reviewed file.
    - Missing and deprecated dependency detection.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from realtimepr.core.dependency import (
    DynamicLoad,
    FindingKind,
    ImportKind,
    ImportRecord,
    UsageIndex,
    find_manifest,
    load_manifest,
)
from realtimepr.core.dependency.manifest import (
    find_deprecated_dependencies,
    find_missing_dependencies,
    package_name,
    parse_manifest,
)
from realtimepr.exceptions import ManifestUnavailableError


class TestParseManifest:
    """Decoded JSON to a name/version mapping."""

    def test_sections_are_merged(self) -> None:
        manifest = parse_manifest({
            "dependencies": {"react": "^18.0.0"},
            "devDependencies": {"jest": "^29.0.0"},
        })
        assert manifest == {"react": "^18.0.0", "jest": "^29.0.0"}

    def test_missing_sections_give_empty_manifest(self) -> None:
        assert parse_manifest({"name": "x"}) == {}

    def test_non_object_root_raises(self) -> None:
        with pytest.raises(ManifestUnavailableError):
            parse_manifest(["react"])

    def test_non_object_section_raises(self) -> None:
        with pytest.raises(ManifestUnavailableError):
            parse_manifest({"dependencies": ["react"]})


class TestLoadManifest:
    """Reading package.json from disk."""

    def test_loads_declared_dependencies(self, package_json: Path) -> None:
        manifest = load_manifest(package_json)
        assert manifest["react"] == "^18.2.0"
        assert manifest["jest"] == "^29.0.0"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestUnavailableError, match="Cannot read"):
            load_manifest(tmp_path / "package.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{not json")
        with pytest.raises(ManifestUnavailableError, match="Invalid JSON"):
            load_manifest(path)


class TestFindManifest:
    """Walking up from the reviewed file."""

    def test_finds_manifest_in_parent(
        self, project_dir: Path, package_json: Path
    ) -> None:
        source = project_dir / "src" / "app.js"
        source.write_text("")
        assert find_manifest(source) == package_json.resolve()

    def test_returns_none_when_absent(self, tmp_path: Path) -> None:
        source = tmp_path / "app.js"
        source.write_text("")
        assert find_manifest(source, max_depth=1) is None


class TestPackageName:
    """Reduction of module specifiers to package names."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("lodash", "lodash"),
            ("lodash/fp", "lodash"),
            ("@babel/core", "@babel/core"),
            ("@babel/core/lib/x", "@babel/core"),
        ],
    )
    def test_package_name(self, target: str, expected: str) -> None:
        assert package_name(target) == expected


class TestMissingDependencies:
    """``require`` targets absent from the manifest."""

    def test_undeclared_package_is_reported(self) -> None:
        loads = [DynamicLoad(line=4, target="axios")]
        findings = find_missing_dependencies(loads, UsageIndex(), {"react": "^18"})
        assert len(findings) == 1
        assert findings[0].kind is FindingKind.POTENTIAL_MISSING_DEPENDENCY
        assert findings[0].line == 4
        assert findings[0].message == "Potential missing dependency: axios"

    def test_declared_package_is_not_reported(self) -> None:
        loads = [DynamicLoad(1, "lodash")]
        assert find_missing_dependencies(loads, UsageIndex(), {"lodash": "^4"}) == []

    def test_every_target_outside_manifest_is_reported(self) -> None:
        loads = [
            DynamicLoad(1, "fs"),
            DynamicLoad(2, "./local"),
            DynamicLoad(3, "lodash/fp"),
        ]
        findings = find_missing_dependencies(
            loads, UsageIndex(), {"lodash": "^4.0.0"}
        )
        assert [f.module for f in findings] == ["fs", "./local", "lodash/fp"]

    def test_skip_option_drops_local_builtin_and_subpath_targets(self) -> None:
        loads = [
            DynamicLoad(1, "./local"),
            DynamicLoad(2, "/abs/path"),
            DynamicLoad(3, "fs"),
            DynamicLoad(4, "node:path"),
            DynamicLoad(5, "fs/promises"),
            DynamicLoad(6, "lodash/fp"),
            DynamicLoad(7, "axios"),
        ]
        findings = find_missing_dependencies(
            loads, UsageIndex(), {"lodash": "^4"}, skip_local_and_builtin=True
        )
        assert [f.module for f in findings] == ["axios"]

    def test_statically_referenced_module_is_skipped(self) -> None:
        usage = UsageIndex(referenced_modules=frozenset({"axios"}))
        loads = [DynamicLoad(1, "axios")]
        assert find_missing_dependencies(loads, usage, {}) == []


class TestDeprecatedDependencies:
    """Pre-1.0 caret/tilde ranges."""

    def _record(self, line: int, module: str) -> ImportRecord:
        return ImportRecord(line, module, ImportKind.DEFAULT, ("x",))

    @pytest.mark.parametrize("version", ["^0.4.2", "~0.1.0"])
    def test_pre_release_range_is_reported(self, version: str) -> None:
        findings = find_deprecated_dependencies(
            [self._record(2, "left-pad")], {"left-pad": version}
        )
        assert len(findings) == 1
        assert findings[0].detail == version
        assert findings[0].module == "left-pad"

    @pytest.mark.parametrize("version", ["^1.0.0", "0.4.2", ">=0.1.0"])
    def test_other_ranges_are_not_reported(self, version: str) -> None:
        findings = find_deprecated_dependencies(
            [self._record(1, "pkg")], {"pkg": version}
        )
        assert findings == []

    def test_subpath_import_uses_first_segment(self) -> None:
        findings = find_deprecated_dependencies(
            [self._record(1, "old/sub")], {"old": "^0.2.0"}
        )
        assert [f.module for f in findings] == ["old/sub"]

    def test_scoped_import_is_not_matched(self) -> None:
        findings = find_deprecated_dependencies(
            [self._record(1, "@scope/pkg")], {"@scope/pkg": "^0.1.0"}
        )
        assert findings == []

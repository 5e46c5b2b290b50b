"""Dependency analysis entry point.

``DependencyAnalyzer.analyze()`` runs every pass over one file and assembles
the report. Passes and their order in the report:

1. Unused modules and symbols (usage index).
2. Circular references (module graph DFS).
3. Duplicate imports, mixed import styles, relative imports.
4. Missing and deprecated dependencies (manifest cross-reference; skipped
   when no manifest is available).

Findings are neither deduplicated nor re-sorted by line.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from realtimepr.core.dependency.checks import (
    find_duplicate_imports,
    find_mixed_import_styles,
    find_relative_imports,
    find_unused_imports,
)
from realtimepr.core.dependency.extractor import extract_dynamic_loads, extract_imports
from realtimepr.core.dependency.graph import ModuleGraph
from realtimepr.core.dependency.manifest import (
    find_deprecated_dependencies,
    find_missing_dependencies,
)
from realtimepr.core.dependency.models import (
    DependencyFinding,
    DependencyReport,
    DependencySummary,
    freeze_manifest,
)
from realtimepr.core.dependency.usage import build_usage_index
from realtimepr.core.lines import split_lines
from realtimepr.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class DependencyAnalyzer:
    """Import dependency analyzer for a single source file.

    The analyzer holds only its options. Each ``analyze()`` call allocates its
    own records, usage index and traversal state, so one instance may serve
    concurrent runs. The manifest is copied into a read-only mapping per run.

    With ``skip_local_and_builtin`` set, ``require`` targets that are local
    paths or Node.js built-ins are never reported missing, and subpaths are
    matched by package name.

    Usage::

        report = DependencyAnalyzer().analyze(text, manifest={"lodash": "^4.0.0"})
        for finding in report.findings:
            print(f"Line {finding.line}: {finding.message}")
    """

    def __init__(self, skip_local_and_builtin: bool = False) -> None:
        self._skip_local_and_builtin = skip_local_and_builtin

    def analyze(
        self,
        source_text: str,
        manifest: Mapping[str, str] | None = None,
    ) -> DependencyReport:
        """Analyze one file's imports.

        Args:
            source_text: Full file content.
            manifest: Declared package name to version range, or None when
                no manifest could be obtained.

        Returns:
            A ``DependencyReport``. Always returned, even when empty.

        Raises:
            InvalidInputError: If ``source_text`` is not a string.
        """
        if not isinstance(source_text, str):
            raise InvalidInputError(
                f"source_text must be str, got {type(source_text).__name__}"
            )

        lines = split_lines(source_text)
        records = extract_imports(lines)
        usage = build_usage_index(records, lines)

        unused = find_unused_imports(records, usage)
        circular = ModuleGraph(records).detect_cycles()
        duplicates = find_duplicate_imports(records)
        mixed = find_mixed_import_styles(records)
        relative = find_relative_imports(records)

        missing: list[DependencyFinding] = []
        deprecated: list[DependencyFinding] = []
        declared = self._usable_manifest(manifest)
        if declared is not None:
            loads = extract_dynamic_loads(lines)
            missing = find_missing_dependencies(
                loads, usage, declared,
                skip_local_and_builtin=self._skip_local_and_builtin,
            )
            deprecated = find_deprecated_dependencies(records, declared)
        else:
            logger.debug("No manifest available; skipping manifest checks")

        findings = (
            *unused, *circular, *duplicates, *mixed, *relative,
            *missing, *deprecated,
        )
        counts = DependencySummary(
            total_imports=len(records),
            unused_modules=sum(1 for f in unused if f.symbol is None),
            unused_symbols=sum(1 for f in unused if f.symbol is not None),
            missing_dependencies=len({f.module for f in missing}),
            circular_dependencies=len(circular),
            deprecated_dependencies=len(deprecated),
            duplicate_imports=len(duplicates),
            mixed_import_styles=len(mixed),
            relative_imports=len(relative),
        )
        logger.debug(
            "Dependency analysis: %d imports, %d findings",
            len(records), len(findings),
        )
        return DependencyReport(
            summary=counts.render(),
            findings=findings,
            counts=counts,
            imports=tuple(records),
        )

    @staticmethod
    def _usable_manifest(
        manifest: Mapping[str, str] | None,
    ) -> Mapping[str, str] | None:
        if manifest is None:
            return None
        if not isinstance(manifest, Mapping):
            logger.warning(
                "Ignoring manifest of type %s; expected a mapping",
                type(manifest).__name__,
            )
            return None
        return freeze_manifest(manifest)


def analyze_dependencies(
    source_text: str,
    manifest: Mapping[str, str] | None = None,
    *,
    skip_local_and_builtin: bool = False,
) -> DependencyReport:
    """Analyze one file's imports. See ``DependencyAnalyzer.analyze``."""
    analyzer = DependencyAnalyzer(skip_local_and_builtin=skip_local_and_builtin)
    return analyzer.analyze(source_text, manifest)

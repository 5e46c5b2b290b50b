"""Data models for the import dependency analyzer.

These types are produced by the extraction and detection passes and consumed
by the report assembler and the CLI formatters. They are kept apart from the
passes themselves so that output code can import them without pulling in
the regex catalogs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# ImportKind / ImportRecord
# ---------------------------------------------------------------------------


class ImportKind(Enum):
    """Syntactic form of an ES module import. Exactly one applies per record."""

    DEFAULT = "default"
    NAMESPACE = "namespace"
    NAMED = "named"


@dataclass(frozen=True)
class ImportRecord:
    """A single import statement extracted from one source line.

    Attributes:
        source_line: 1-based line number of the import.
        module_path: The imported module specifier (``./x`` or ``pkg``).
        import_kind: Which import form matched.
        imported_symbols: Names bound by the import, in source order.
            Never empty.
    """

    source_line: int
    module_path: str
    import_kind: ImportKind
    imported_symbols: tuple[str, ...]

    @property
    def is_relative(self) -> bool:
        """True when the module path starts with ``.``."""
        return self.module_path.startswith(".")


@dataclass(frozen=True)
class DynamicLoad:
    """A ``require('x')`` call site found in the source text."""

    line: int
    target: str


# ---------------------------------------------------------------------------
# UsageIndex
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UsageIndex:
    """Textual references to imported modules and symbols.

    Attributes:
        referenced_modules: Module paths that occur in the text outside the
            import line that declared them.
        referenced_symbols: Symbol names that occur in the text outside the
            import line that bound them.
    """

    referenced_modules: frozenset[str] = frozenset()
    referenced_symbols: frozenset[str] = frozenset()


# ---------------------------------------------------------------------------
# DependencyFinding
# ---------------------------------------------------------------------------


class FindingKind(Enum):
    """Classification of a dependency finding."""

    UNUSED_MODULE = "unused_module"
    UNUSED_SYMBOL = "unused_symbol"
    POTENTIAL_MISSING_DEPENDENCY = "potential_missing_dependency"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    DEPRECATED_DEPENDENCY = "deprecated_dependency"
    DUPLICATE_IMPORT = "duplicate_import"
    MIXED_IMPORT_STYLE = "mixed_import_style"
    RELATIVE_IMPORT = "relative_import"


@dataclass(frozen=True)
class DependencyFinding:
    """A single line-anchored observation about the file's imports.

    Attributes:
        line: Line of the originating import, or of the ``require`` call for
            missing-dependency findings.
        kind: What was detected.
        module: The implicated module path.
        detail: Extra context. For deprecated dependencies this is the
            declared version range.
        symbol: The unused symbol, for ``UNUSED_SYMBOL`` findings only.
    """

    line: int
    kind: FindingKind
    module: str
    detail: str | None = None
    symbol: str | None = None

    @property
    def message(self) -> str:
        """Human-readable description, worded as in the console report."""
        kind = self.kind
        if kind is FindingKind.UNUSED_MODULE:
            return f"Unused import: {self.module}"
        if kind is FindingKind.UNUSED_SYMBOL:
            return f"Unused import: {self.symbol} from {self.module}"
        if kind is FindingKind.POTENTIAL_MISSING_DEPENDENCY:
            return f"Potential missing dependency: {self.module}"
        if kind is FindingKind.CIRCULAR_DEPENDENCY:
            return (
                "Potential circular dependency detected with module: "
                f"{self.module}"
            )
        if kind is FindingKind.DEPRECATED_DEPENDENCY:
            return (
                f"Module {self.module} ({self.detail}) might be deprecated. "
                "Consider updating or replacing it."
            )
        if kind is FindingKind.DUPLICATE_IMPORT:
            return f"Duplicate import of module: {self.module}"
        if kind is FindingKind.MIXED_IMPORT_STYLE:
            return (
                f"Mixed import styles detected for module: {self.module}. "
                "Consider using consistent import style."
            )
        return (
            "Consider using absolute imports instead of relative imports "
            f"for: {self.module}"
        )


# ---------------------------------------------------------------------------
# DependencySummary / DependencyReport
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DependencySummary:
    """Integer counts behind the report's summary text."""

    total_imports: int = 0
    unused_modules: int = 0
    unused_symbols: int = 0
    missing_dependencies: int = 0
    circular_dependencies: int = 0
    deprecated_dependencies: int = 0
    duplicate_imports: int = 0
    mixed_import_styles: int = 0
    relative_imports: int = 0

    def render(self) -> str:
        """Render the fixed-shape summary block."""
        return (
            "Dependency Analysis Results:\n"
            f"- Total Imports: {self.total_imports}\n"
            f"- Unused Imports: {self.unused_modules}\n"
            f"- Unused Imported Symbols: {self.unused_symbols}\n"
            f"- Potential Missing Dependencies: {self.missing_dependencies}\n"
            f"- Circular Dependencies: {self.circular_dependencies}\n"
            f"- Deprecated Dependencies: {self.deprecated_dependencies}\n"
            f"- Duplicate Imports: {self.duplicate_imports}\n"
            f"- Mixed Import Styles: {self.mixed_import_styles}\n"
            f"- Relative Imports: {self.relative_imports}"
        )


@dataclass(frozen=True)
class DependencyReport:
    """The complete result of one dependency analysis run.

    Attributes:
        summary: Fixed-shape text block with counts per finding kind.
        findings: All findings in pass order. Not sorted by line.
        counts: The counts rendered into ``summary``.
        imports: The import records the findings were derived from.
    """

    summary: str
    findings: tuple[DependencyFinding, ...] = ()
    counts: DependencySummary = field(default_factory=DependencySummary)
    imports: tuple[ImportRecord, ...] = ()

    def of_kind(self, kind: FindingKind) -> list[DependencyFinding]:
        """Return the findings of one kind, preserving report order."""
        return [f for f in self.findings if f.kind is kind]


def freeze_manifest(manifest: Mapping[str, str] | None) -> Mapping[str, str] | None:
    """Copy a manifest into a read-only mapping for the duration of a run.

    Names and version ranges are coerced to ``str``.
    """
    if manifest is None:
        return None
    return MappingProxyType(
        {str(name): str(version) for name, version in manifest.items()}
    )

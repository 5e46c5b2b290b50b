"""Single-pass checks over the import record list.

Each check is independent and order-stable: findings come out in the order
of the records that triggered them.
"""

from __future__ import annotations

from typing import Sequence

from realtimepr.core.dependency.models import (
    DependencyFinding,
    FindingKind,
    ImportKind,
    ImportRecord,
    UsageIndex,
)


def find_unused_imports(
    records: Sequence[ImportRecord], usage: UsageIndex
) -> list[DependencyFinding]:
    """Flag modules and bound symbols that are never referenced.

    For each record, an ``UNUSED_MODULE`` finding (if any) precedes that
    record's ``UNUSED_SYMBOL`` findings.
    """
    findings: list[DependencyFinding] = []
    for record in records:
        if record.module_path not in usage.referenced_modules:
            findings.append(DependencyFinding(
                line=record.source_line,
                kind=FindingKind.UNUSED_MODULE,
                module=record.module_path,
            ))
        for symbol in record.imported_symbols:
            if symbol not in usage.referenced_symbols:
                findings.append(DependencyFinding(
                    line=record.source_line,
                    kind=FindingKind.UNUSED_SYMBOL,
                    module=record.module_path,
                    symbol=symbol,
                ))
    return findings


def find_duplicate_imports(
    records: Sequence[ImportRecord],
) -> list[DependencyFinding]:
    """Flag the second and later imports of the same module path."""
    seen: set[str] = set()
    findings: list[DependencyFinding] = []
    for record in records:
        if record.module_path in seen:
            findings.append(DependencyFinding(
                line=record.source_line,
                kind=FindingKind.DUPLICATE_IMPORT,
                module=record.module_path,
            ))
        seen.add(record.module_path)
    return findings


def find_mixed_import_styles(
    records: Sequence[ImportRecord],
) -> list[DependencyFinding]:
    """Flag a module the first time it is imported with a second style.

    Emitted once per module, at the record whose kind first grows the set of
    observed kinds past one. A third style for the same module does not
    re-emit.
    """
    styles: dict[str, set[ImportKind]] = {}
    findings: list[DependencyFinding] = []
    for record in records:
        kinds = styles.setdefault(record.module_path, set())
        before = len(kinds)
        kinds.add(record.import_kind)
        if before == 1 and len(kinds) == 2:
            findings.append(DependencyFinding(
                line=record.source_line,
                kind=FindingKind.MIXED_IMPORT_STYLE,
                module=record.module_path,
            ))
    return findings


def find_relative_imports(
    records: Sequence[ImportRecord],
) -> list[DependencyFinding]:
    """Flag every relative import. Advisory only."""
    return [
        DependencyFinding(
            line=record.source_line,
            kind=FindingKind.RELATIVE_IMPORT,
            module=record.module_path,
        )
        for record in records
        if record.is_relative
    ]

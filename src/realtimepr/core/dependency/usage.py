"""Textual usage tracking for imported modules and symbols.

Usage is decided by substring containment, not by resolving references.
A symbol such as ``map`` is therefore "used" by any line containing
``mapping``. This favours fewer false "unused import" warnings at the cost
of missing some genuinely unused imports.

A record's own import line never counts as a use of that record's module or
symbols; any other line does, including another import of the same module.
A module counts as referenced when its path occurs elsewhere in the text or
when any symbol one of its records binds is referenced.
"""

from __future__ import annotations

from typing import Sequence

from realtimepr.core.dependency.models import ImportRecord, UsageIndex


def _occurs_elsewhere(needle: str, lines: Sequence[str], own_line: int) -> bool:
    """True if ``needle`` is a substring of any line other than ``own_line``."""
    return any(
        needle in line
        for index, line in enumerate(lines, start=1)
        if index != own_line
    )


def build_usage_index(
    records: Sequence[ImportRecord], lines: Sequence[str]
) -> UsageIndex:
    """Build the usage index for one analysis run.

    Args:
        records: Import records extracted from ``lines``.
        lines: The full file, one entry per line.

    Returns:
        A ``UsageIndex`` with the referenced module paths and symbols.
    """
    modules: set[str] = set()
    symbols: set[str] = set()

    for record in records:
        bound_used = False
        for symbol in record.imported_symbols:
            if symbol in symbols or _occurs_elsewhere(
                symbol, lines, record.source_line
            ):
                symbols.add(symbol)
                bound_used = True
        if record.module_path in modules:
            continue
        if bound_used or _occurs_elsewhere(
            record.module_path, lines, record.source_line
        ):
            modules.add(record.module_path)

    return UsageIndex(
        referenced_modules=frozenset(modules),
        referenced_symbols=frozenset(symbols),
    )

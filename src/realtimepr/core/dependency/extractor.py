"""Line-oriented extraction of import statements and ``require`` calls.

Each line yields at most one ``ImportRecord``. Three ES module forms are
recognised, tried in priority order:

1. Default:   ``import x from 'mod'``
2. Namespace: ``import * as x from 'mod'``
3. Named:     ``import { a, b as c } from 'mod'``

Anything else, including imports that span several lines and mixed forms
such as ``import x, { y } from 'mod'``, is left unmatched. This is a known
limitation of matching raw text line by line and is not reported as an
error.
"""

from __future__ import annotations

import re
from typing import Sequence

from realtimepr.core.dependency.models import DynamicLoad, ImportKind, ImportRecord

# ---------------------------------------------------------------------------
# Import form patterns
# ---------------------------------------------------------------------------

_MODULE = r"""['"]([^'"]+)['"]"""

# Each entry: (kind, compiled regex). Group 1 is the binding text, group 2 the
# module specifier. Order is the match priority.
_IMPORT_FORMS: tuple[tuple[ImportKind, re.Pattern[str]], ...] = (
    (ImportKind.DEFAULT, re.compile(rf"import\s+([\w$]+)\s+from\s+{_MODULE}")),
    (
        ImportKind.NAMESPACE,
        re.compile(rf"import\s+\*\s+as\s+([\w$]+)\s+from\s+{_MODULE}"),
    ),
    (ImportKind.NAMED, re.compile(rf"import\s+{{([^}}]+)}}\s+from\s+{_MODULE}")),
)

_REQUIRE_PATTERN = re.compile(r"""require\s*\(\s*['"]([^'"]+)['"]\s*\)""")

# ``original as alias`` inside a named import list binds ``alias``.
_ALIAS_PATTERN = re.compile(r"^[\w$]+\s+as\s+([\w$]+)$")


def _split_named_symbols(raw: str) -> tuple[str, ...]:
    """Split a named-import list into bound symbol names.

    Entries are trimmed; blank entries (e.g. from a trailing comma) are
    dropped. ``a as b`` binds ``b``.
    """
    symbols: list[str] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        alias = _ALIAS_PATTERN.match(item)
        symbols.append(alias.group(1) if alias else item)
    return tuple(symbols)


def parse_import_line(line: str, line_number: int) -> ImportRecord | None:
    """Parse a single line into an ``ImportRecord``.

    Args:
        line: Raw source line.
        line_number: 1-based position of the line in the file.

    Returns:
        The record for the first matching import form, or None.
    """
    for kind, pattern in _IMPORT_FORMS:
        match = pattern.search(line)
        if not match:
            continue
        if kind is ImportKind.NAMED:
            symbols = _split_named_symbols(match.group(1))
            if not symbols:
                return None
        else:
            symbols = (match.group(1),)
        return ImportRecord(
            source_line=line_number,
            module_path=match.group(2),
            import_kind=kind,
            imported_symbols=symbols,
        )
    return None


def extract_imports(lines: Sequence[str]) -> list[ImportRecord]:
    """Extract all import records from a file, in line order."""
    records: list[ImportRecord] = []
    for index, line in enumerate(lines, start=1):
        record = parse_import_line(line, index)
        if record is not None:
            records.append(record)
    return records


def extract_dynamic_loads(lines: Sequence[str]) -> list[DynamicLoad]:
    """Find the first ``require('x')`` call on each line."""
    loads: list[DynamicLoad] = []
    for index, line in enumerate(lines, start=1):
        match = _REQUIRE_PATTERN.search(line)
        if match:
            loads.append(DynamicLoad(line=index, target=match.group(1)))
    return loads

"""Module reference graph and circular dependency detection.

In a single-file analysis every import's importer is the file itself, so the
reference relation is derived from the flat import list: the direct
references of a module ``M`` are the module paths of every record *for*
``M``. Traversal therefore re-enters ``M`` from its own records, and each
such re-entry while ``M`` is on the active path is reported as a cycle.

Cycle detection is a depth-first traversal with two sets:

- ``visited``  -- modules whose traversal has started (grows monotonically).
- ``on_stack`` -- modules on the active recursion path.

Termination follows from ``visited``: recursion only proceeds into modules
not yet visited.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from realtimepr.core.dependency.models import (
    DependencyFinding,
    FindingKind,
    ImportRecord,
)


class ModuleGraph:
    """Reference relation over the module paths of one file's imports.

    Thread safety: instances are built per analysis run and never shared.
    """

    def __init__(self, records: Sequence[ImportRecord]) -> None:
        self._records = list(records)
        self._by_module: dict[str, list[ImportRecord]] = defaultdict(list)
        for record in self._records:
            self._by_module[record.module_path].append(record)

    def references(self, module: str) -> list[ImportRecord]:
        """Return the records whose module path equals ``module``."""
        return list(self._by_module.get(module, ()))

    def detect_cycles(self) -> list[DependencyFinding]:
        """Report every re-entry into a module already on the active path.

        Returns:
            ``CIRCULAR_DEPENDENCY`` findings in traversal order, each at the
            line of the import through which the module was re-entered.
        """
        visited: set[str] = set()
        on_stack: set[str] = set()
        findings: list[DependencyFinding] = []

        def _visit(module: str, line: int) -> None:
            if module in on_stack:
                findings.append(DependencyFinding(
                    line=line,
                    kind=FindingKind.CIRCULAR_DEPENDENCY,
                    module=module,
                ))
                return
            if module in visited:
                return

            visited.add(module)
            on_stack.add(module)
            for record in self.references(module):
                _visit(record.module_path, record.source_line)
            on_stack.discard(module)

        for record in self._records:
            _visit(record.module_path, record.source_line)

        return findings


def detect_cycles(records: Sequence[ImportRecord]) -> list[DependencyFinding]:
    """Convenience wrapper: build a ``ModuleGraph`` and detect its cycles."""
    return ModuleGraph(records).detect_cycles()

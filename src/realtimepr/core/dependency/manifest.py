"""Dependency manifest reading and cross-referencing.

The manifest is a mapping of declared package name to version range, read
from a ``package.json`` (``dependencies`` merged with ``devDependencies``,
the latter winning on name clashes). Reading is kept separate from the
cross-reference checks: the checks take an in-memory mapping and never
touch the filesystem.

Deprecation detection is a heuristic. A declared range starting with ``^0.``
or ``~0.`` marks a pre-1.0 package whose API may still change; no registry
is consulted and truly deprecated packages with stable version numbers are
not reported.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from realtimepr.core.dependency.models import (
    DependencyFinding,
    DynamicLoad,
    FindingKind,
    ImportRecord,
    UsageIndex,
)
from realtimepr.exceptions import ManifestUnavailableError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

# Sections merged into the manifest, in precedence order (later wins).
_DEPENDENCY_SECTIONS: tuple[str, ...] = ("dependencies", "devDependencies")

_UNSTABLE_PREFIXES: tuple[str, ...] = ("^0.", "~0.")

# Node.js core modules never need a manifest entry.
_NODE_BUILTINS: frozenset[str] = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "dns", "domain", "events", "fs", "http",
    "http2", "https", "inspector", "module", "net", "os", "path",
    "perf_hooks", "process", "punycode", "querystring", "readline", "repl",
    "stream", "string_decoder", "timers", "tls", "trace_events", "tty",
    "url", "util", "v8", "vm", "wasi", "worker_threads", "zlib",
})


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def parse_manifest(data: Any) -> dict[str, str]:
    """Extract the declared dependencies from decoded ``package.json`` data.

    Args:
        data: The decoded JSON document.

    Returns:
        Package name to version range.

    Raises:
        ManifestUnavailableError: If the document is not a JSON object or a
            dependency section is not an object.
    """
    if not isinstance(data, dict):
        raise ManifestUnavailableError("Manifest root must be a JSON object")

    declared: dict[str, str] = {}
    for section in _DEPENDENCY_SECTIONS:
        entries = data.get(section) or {}
        if not isinstance(entries, dict):
            raise ManifestUnavailableError(
                f"Manifest section {section!r} must be an object"
            )
        for name, version in entries.items():
            declared[str(name)] = str(version)
    return declared


def load_manifest(path: Path) -> dict[str, str]:
    """Read and parse a ``package.json`` file.

    Raises:
        ManifestUnavailableError: If the file is missing, unreadable, or not
            valid JSON.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestUnavailableError(f"Cannot read manifest {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestUnavailableError(f"Invalid JSON in manifest {path}: {exc}") from exc

    manifest = parse_manifest(data)
    logger.debug("Loaded %d declared dependencies from %s", len(manifest), path)
    return manifest


def find_manifest(source_path: Path, max_depth: int = 5) -> Path | None:
    """Walk up from a source file to the nearest ``package.json``.

    Args:
        source_path: The file under review.
        max_depth: How many directory levels to inspect.

    Returns:
        Path to the manifest, or None if none was found.
    """
    current = source_path.resolve().parent
    for _ in range(max_depth):
        candidate = current / MANIFEST_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


# ---------------------------------------------------------------------------
# Cross-referencing
# ---------------------------------------------------------------------------


def package_name(target: str) -> str:
    """Reduce a module specifier to its package name.

    ``lodash/fp`` -> ``lodash``; ``@scope/pkg/sub`` -> ``@scope/pkg``.
    """
    parts = target.split("/")
    if target.startswith("@") and len(parts) > 1:
        return "/".join(parts[:2])
    return parts[0]


def _is_local_or_builtin(target: str) -> bool:
    if target.startswith((".", "/")):
        return True
    if target.startswith("node:"):
        return True
    return package_name(target) in _NODE_BUILTINS


def find_missing_dependencies(
    loads: Sequence[DynamicLoad],
    usage: UsageIndex,
    manifest: Mapping[str, str],
    *,
    skip_local_and_builtin: bool = False,
) -> list[DependencyFinding]:
    """Flag ``require`` targets that are not manifest keys.

    A target is compared verbatim: ``lodash/fp`` is reported even when
    ``lodash`` is declared. Targets already resolved as statically imported
    modules are skipped.

    Args:
        loads: ``require`` call sites.
        usage: Usage index of the same file.
        manifest: Declared package name to version range.
        skip_local_and_builtin: Also skip relative/absolute paths, Node.js
            built-ins and ``node:`` specifiers, and compare the rest by
            package name (``lodash/fp`` is then covered by ``lodash``).
    """
    findings: list[DependencyFinding] = []
    for load in loads:
        if load.target in usage.referenced_modules:
            continue
        if load.target in manifest:
            continue
        if skip_local_and_builtin and (
            _is_local_or_builtin(load.target)
            or package_name(load.target) in manifest
        ):
            continue
        findings.append(DependencyFinding(
            line=load.line,
            kind=FindingKind.POTENTIAL_MISSING_DEPENDENCY,
            module=load.target,
        ))
    return findings


def find_deprecated_dependencies(
    records: Sequence[ImportRecord],
    manifest: Mapping[str, str],
) -> list[DependencyFinding]:
    """Flag imports of packages declared with a pre-1.0 caret/tilde range.

    The manifest key looked up is the import path up to its first ``/``.
    A scoped import such as ``@scope/pkg`` therefore reduces to ``@scope``,
    which is not a package name, so scoped packages are not flagged.
    """
    findings: list[DependencyFinding] = []
    for record in records:
        declared = manifest.get(record.module_path.split("/")[0])
        if declared and declared.startswith(_UNSTABLE_PREFIXES):
            findings.append(DependencyFinding(
                line=record.source_line,
                kind=FindingKind.DEPRECATED_DEPENDENCY,
                module=record.module_path,
                detail=declared,
            ))
    return findings

"""Import dependency analysis for a single source file.

Given a file's text (and optionally its package manifest), the analyzer
extracts ES module imports, tracks textual usage, walks the module reference
graph for cycles, checks for duplicate, mixed-style and relative imports,
and cross-references ``require`` targets against the manifest.

Submodules
----------
- ``models``: Data types (ImportRecord, DependencyFinding, DependencyReport).
- ``extractor``: Line-oriented import and ``require`` extraction.
- ``usage``: Textual usage index.
- ``graph``: Module reference graph and cycle detection.
- ``checks``: Unused, duplicate, mixed-style and relative import checks.
- ``manifest``: ``package.json`` reading and cross-reference checks.
- ``analyzer``: The DependencyAnalyzer entry point.

All public names are re-exported here::

    from realtimepr.core.dependency import analyze_dependencies, FindingKind
"""

from realtimepr.core.dependency.analyzer import DependencyAnalyzer, analyze_dependencies
from realtimepr.core.dependency.extractor import extract_dynamic_loads, extract_imports
from realtimepr.core.dependency.graph import ModuleGraph, detect_cycles
from realtimepr.core.dependency.manifest import find_manifest, load_manifest
from realtimepr.core.dependency.models import (
    DependencyFinding,
    DependencyReport,
    DependencySummary,
    DynamicLoad,
    FindingKind,
    ImportKind,
    ImportRecord,
    UsageIndex,
)
from realtimepr.core.dependency.usage import build_usage_index

__all__ = [
    "DependencyAnalyzer",
    "DependencyFinding",
    "DependencyReport",
    "DependencySummary",
    "DynamicLoad",
    "FindingKind",
    "ImportKind",
    "ImportRecord",
    "ModuleGraph",
    "UsageIndex",
    "analyze_dependencies",
    "build_usage_index",
    "detect_cycles",
    "extract_dynamic_loads",
    "extract_imports",
    "find_manifest",
    "load_manifest",
]

"""Custom rule files.

A rule file is YAML::

    rule_sets:
      - name: Team conventions
        rules:
          - id: no-todo
            pattern: "TODO"
            message: Resolve TODO comments before merging
            severity: info          # info | warning | error (default warning)
            description: Flag TODO markers
            fix: "NOTE"             # optional re.sub replacement

The file is parsed with ``yaml.safe_load``. Any structural problem raises
``RuleError`` naming the file and the offending entry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from realtimepr.core.rules.engine import create_rule, create_rule_set
from realtimepr.core.rules.models import Rule, RuleSet
from realtimepr.exceptions import RuleError

logger = logging.getLogger(__name__)


def _parse_rule(entry: Any, set_name: str, source: str) -> Rule:
    if not isinstance(entry, dict):
        raise RuleError(f"{source}: rule in {set_name!r} must be a mapping")
    missing = [key for key in ("id", "pattern", "message") if not entry.get(key)]
    if missing:
        raise RuleError(
            f"{source}: rule in {set_name!r} is missing {', '.join(missing)}"
        )
    return create_rule(
        str(entry["id"]),
        str(entry["pattern"]),
        str(entry["message"]),
        str(entry.get("severity", "warning")),
        category=str(entry.get("category", set_name)),
        description=str(entry.get("description", "")),
        fix=None if entry.get("fix") is None else str(entry["fix"]),
    )


def parse_rule_document(data: Any, source: str = "<rules>") -> tuple[RuleSet, ...]:
    """Convert a decoded rule document into rule sets.

    Args:
        data: Output of ``yaml.safe_load``.
        source: Label used in error messages.

    Raises:
        RuleError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict) or not isinstance(data.get("rule_sets"), list):
        raise RuleError(f"{source}: expected a top-level 'rule_sets' list")

    rule_sets: list[RuleSet] = []
    for raw_set in data["rule_sets"]:
        if not isinstance(raw_set, dict) or not raw_set.get("name"):
            raise RuleError(f"{source}: every rule set needs a 'name'")
        name = str(raw_set["name"])
        rules = raw_set.get("rules") or []
        if not isinstance(rules, list):
            raise RuleError(f"{source}: 'rules' of {name!r} must be a list")
        rule_sets.append(
            create_rule_set(name, [_parse_rule(r, name, source) for r in rules])
        )
    return tuple(rule_sets)


def load_rule_file(path: Path) -> tuple[RuleSet, ...]:
    """Read a YAML rule file.

    Raises:
        RuleError: If the file cannot be read, is not valid YAML, or
            defines malformed rules.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleError(f"Cannot read rule file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuleError(f"Invalid YAML in rule file {path}: {exc}") from exc

    rule_sets = parse_rule_document(data, source=str(path))
    logger.debug(
        "Loaded %d rule sets (%d rules) from %s",
        len(rule_sets), sum(len(rs) for rs in rule_sets), path,
    )
    return rule_sets

"""``realtimepr review <file>``: Run a review over a single source file.

Reads the file, runs the selected review type (dependency analysis by
default) and prints the summary plus line-anchored suggestions.

For ``dependencies`` and ``all`` reviews the declared dependencies come from
``--manifest``, or else from the nearest ``package.json`` above the file (or
in the working directory). A manifest that cannot be read is reported as a
warning and the manifest-dependent checks are skipped.

``--rules`` files are added to ``rules`` and ``all`` reviews; with any other
type they are ignored with a warning.

Exit Codes:
    0: No suggestions.
    1: One or more suggestions.
    2: The file could not be read, or a rule file is invalid.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Mapping, NoReturn

import click

from realtimepr.core.dependency import find_manifest, load_manifest
from realtimepr.core.dependency.manifest import MANIFEST_FILENAME
from realtimepr.core.review import (
    Feedback,
    ReviewConfig,
    ReviewType,
    detect_language,
    review_source,
)
from realtimepr.core.rules import RuleSet, load_rule_file
from realtimepr.exceptions import ManifestUnavailableError, RealtimePRError, RuleError

logger = logging.getLogger(__name__)

_MANIFEST_TYPES = frozenset({ReviewType.DEPENDENCIES, ReviewType.ALL})
_RULE_FILE_TYPES = frozenset({ReviewType.RULES, ReviewType.ALL})


def _resolve_manifest(
    source: Path, manifest_path: str | None
) -> Mapping[str, str] | None:
    """Locate and load the manifest, or return None if there is none usable."""
    if manifest_path is not None:
        candidate: Path | None = Path(manifest_path)
    else:
        candidate = find_manifest(source)
        if candidate is None:
            fallback = Path.cwd() / MANIFEST_FILENAME
            candidate = fallback if fallback.is_file() else None

    if candidate is None:
        logger.debug("No %s found for %s", MANIFEST_FILENAME, source)
        return None
    try:
        return load_manifest(candidate)
    except ManifestUnavailableError as exc:
        logger.warning("Skipping manifest checks: %s", exc)
        return None


def _load_rule_files(rule_files: tuple[str, ...]) -> list[RuleSet]:
    rule_sets: list[RuleSet] = []
    for rule_file in rule_files:
        rule_sets.extend(load_rule_file(Path(rule_file)))
    return rule_sets


def _feedback_to_json(
    feedback: Feedback, file_path: str, language: str, review_type: str
) -> dict:
    """Convert feedback to a JSON-serializable dict."""
    return {
        "file": file_path,
        "language": language,
        "type": review_type,
        "summary": feedback.summary,
        "suggestions": [
            {
                "line": s.line,
                "message": s.message,
                "severity": s.severity.name,
                "category": s.category,
                "rule_id": s.rule_id,
            }
            for s in feedback.suggestions
        ],
    }


def _fail(message: str, output_format: str) -> NoReturn:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)


@click.command("review")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--type", "review_type",
    type=click.Choice(ReviewType.choices()),
    default=ReviewType.DEPENDENCIES.value,
    show_default=True,
    help="Kind of review to run.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--manifest", "manifest_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="package.json to check declared dependencies against.",
)
@click.option(
    "--rules", "rule_files",
    type=click.Path(dir_okay=False),
    multiple=True,
    help="YAML rule file applied with the default rules (repeatable).",
)
@click.option(
    "--skip-local-and-builtin", is_flag=True, default=False,
    help="Never report local paths or Node.js built-ins as missing dependencies.",
)
def review_command(
    file_path: str,
    review_type: str,
    output_format: str,
    manifest_path: str | None,
    rule_files: tuple[str, ...],
    skip_local_and_builtin: bool,
) -> None:
    """Review the source file at FILE_PATH.

    Exit code 0 if there is nothing to report, 1 if suggestions exist.
    """
    source = Path(file_path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _fail(f"Could not read {file_path}: {exc}", output_format)

    selected = ReviewType(review_type)
    extra_rules: list[RuleSet] = []
    if rule_files and selected not in _RULE_FILE_TYPES:
        logger.warning(
            "--rules only applies to --type rules or all; ignoring %d rule file(s)",
            len(rule_files),
        )
    elif rule_files:
        try:
            extra_rules = _load_rule_files(rule_files)
        except RuleError as exc:
            _fail(str(exc), output_format)

    config = replace(
        ReviewConfig().with_extra_rules(extra_rules),
        skip_local_and_builtin=skip_local_and_builtin,
    )
    if selected in _MANIFEST_TYPES:
        config = config.with_manifest(_resolve_manifest(source, manifest_path))

    try:
        feedback = review_source(text, file_path, selected, config)
    except RealtimePRError as exc:
        _fail(str(exc), output_format)

    language = detect_language(source)
    if output_format == "json":
        click.echo(json.dumps(
            _feedback_to_json(feedback, file_path, language, review_type),
            indent=2,
        ))
    else:
        from realtimepr.cli.output import print_feedback
        print_feedback(feedback, file_path, language, review_type)

    sys.exit(1 if feedback.suggestions else 0)

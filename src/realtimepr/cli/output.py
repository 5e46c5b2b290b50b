"""Rich output formatting helpers for the realtimepr CLI.

Provides severity-colored terminal output for review feedback and the rule
catalog.

Severity Color Mapping:
    ERROR = bold red, WARNING = yellow, INFO = cyan
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from realtimepr.core.review import Feedback
from realtimepr.core.rules import RuleSet, Severity

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}

console = Console()


def severity_style(severity: Severity) -> str:
    """Return the Rich style string for a given severity level."""
    return _SEVERITY_STYLES.get(severity, "white")


def print_feedback(
    feedback: Feedback, file_path: str, language: str, review_type: str
) -> None:
    """Print the summary panel followed by the suggestions table.

    Args:
        feedback: Result of one review run.
        file_path: The reviewed file, shown in the panel title.
        language: Detected language key.
        review_type: The review type that produced ``feedback``.
    """
    title = f"{file_path} ({language}, {review_type})"
    console.print(Panel(Text(feedback.summary), title="Summary", subtitle=Text(title)))

    if not feedback.suggestions:
        console.print("[green]No suggestions. File passed all checks.[/green]")
        return

    table = Table(title="Suggestions", show_header=True, header_style="bold")
    table.add_column("Line", justify="right")
    table.add_column("Severity", justify="center")
    table.add_column("Category", style="dim")
    table.add_column("Message")
    for s in feedback.suggestions:
        table.add_row(
            str(s.line),
            Text(s.severity.name, style=severity_style(s.severity)),
            s.category,
            s.message,
        )
    console.print(table)

    counts = feedback.count_by_severity()
    parts = [f"[bold]{len(feedback.suggestions)}[/bold] suggestions"]
    for severity in sorted(Severity, reverse=True):
        count = counts.get(severity.name.lower(), 0)
        if count:
            style = severity_style(severity)
            parts.append(f"[{style}]{count} {severity.name.lower()}[/{style}]")
    console.print(" | ".join(parts))


def print_rule_sets(review_type: str, rule_sets: Sequence[RuleSet]) -> None:
    """Print one table listing every rule of a review type."""
    table = Table(title=f"{review_type} rules", show_header=True, header_style="bold")
    table.add_column("Rule Set", style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("Severity", justify="center")
    table.add_column("Message")
    for rule_set in rule_sets:
        for rule in rule_set.rules:
            table.add_row(
                rule_set.name,
                rule.rule_id,
                Text(rule.severity.name, style=severity_style(rule.severity)),
                rule.message,
            )
    console.print(table)

"""``realtimepr rules``: List the built-in rule catalog.

Prints one table per rule set showing each rule's identifier, severity and
message. ``--type`` restricts the listing to one rule-driven review type.

Exit Codes:
    0: Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from realtimepr.core.review import ReviewEngine, ReviewType

# Review types whose checks are rule tables, in listing order.
_RULE_TYPES: tuple[ReviewType, ...] = (
    ReviewType.STYLE,
    ReviewType.SECURITY,
    ReviewType.PERFORMANCE,
    ReviewType.RULES,
)


@click.command("rules")
@click.option(
    "--type", "review_type",
    type=click.Choice([t.value for t in _RULE_TYPES]),
    default=None,
    help="Only list the rules of this review type.",
)
def rules_command(review_type: str | None) -> None:
    """List built-in rules grouped by rule set."""
    from realtimepr.cli.output import print_rule_sets

    engine = ReviewEngine()
    selected = _RULE_TYPES if review_type is None else (ReviewType(review_type),)
    for rule_type in selected:
        print_rule_sets(rule_type.value, engine.rule_sets_for(rule_type))

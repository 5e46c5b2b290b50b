"""realtimepr CLI: line-oriented review of a single source file.

Entry point for the ``realtimepr`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    review  Run one review type (or all of them) over a file.
    rules   List the built-in rule catalog.

Usage::

    realtimepr review src/app.ts                      # Dependency analysis
    realtimepr review src/app.ts --type security
    realtimepr review src/app.ts --type all --format json
    realtimepr review src/app.ts --rules team-rules.yaml --type rules
    realtimepr rules --type performance
    realtimepr --verbose review src/app.ts
"""

from __future__ import annotations

import logging

import click

from realtimepr import __version__
from realtimepr.cli.review import review_command
from realtimepr.cli.rules_cmd import rules_command

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    """Attach a fresh stderr handler to the package logger."""
    package_logger = logging.getLogger("realtimepr")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """realtimepr: Review source files for dependency, style, security
    and performance issues.

    Every check is line-oriented pattern matching over the file's text;
    no program is parsed or executed.
    """
    _configure_logging(verbose)


cli.add_command(review_command)
cli.add_command(rules_command)

# topmark:header:start
#
#   project      : TagPrint
#   file         : printer.py
#   file_relpath : src/tagprint/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Print helpers writing one rendered line to standard output.

`print_values()` formats each argument with `tagprint.formatter.format_value`,
joins the results with a single space and writes the line. The severity
helpers (`info`, `success`, `error`, `warning`, `debug`) prepend a styled label.

Example:
    ```python
    from tagprint import info, print_values

    print_values("[b]Totals[/]", {"ok": 3, "failed": 0})
    info("cache warmed in", 1.25, "seconds")
    ```
"""

from __future__ import annotations

from enum import Enum

import click

from tagprint.formatter import format_value


class Severity(str, Enum):
    """Severity levels with the markup label each prints in front of a line."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    DEBUG = "debug"

    @property
    def label(self) -> str:
        """Return the pre-tagged label literal for this severity."""
        return _LABELS[self]


_LABELS: dict[Severity, str] = {
    Severity.INFO: "[blue][b]INFO:[/b][/blue]",
    Severity.SUCCESS: "[green][b]SUCC:[/b][/green]",
    Severity.ERROR: "[red][b]ERRR:[/b][/red]",
    Severity.WARNING: "[yellow][b]WARN:[/b][/yellow]",
    Severity.DEBUG: "[gray][b]DEBUG:[/b][/gray]",
}


def render_line(*values: object) -> str:
    """Return the line `print_values()` would write, without the newline."""
    return " ".join(format_value(v) for v in values)


def print_values(*values: object) -> None:
    """Format every value and write them as one line to stdout."""
    # color=True: escape codes are written even when stdout is not a terminal.
    click.echo(render_line(*values), color=True)


def log(severity: Severity, *values: object) -> None:
    """Print ``values`` prefixed with the label of ``severity``."""
    print_values(severity.label, *values)


def info(*values: object) -> None:
    """Print an ``INFO:`` line."""
    log(Severity.INFO, *values)


def success(*values: object) -> None:
    """Print a ``SUCC:`` line."""
    log(Severity.SUCCESS, *values)


def error(*values: object) -> None:
    """Print an ``ERRR:`` line."""
    log(Severity.ERROR, *values)


def warning(*values: object) -> None:
    """Print a ``WARN:`` line."""
    log(Severity.WARNING, *values)


def debug(*values: object) -> None:
    """Print a ``DEBUG:`` line."""
    log(Severity.DEBUG, *values)

# topmark:header:start
#
#   project      : TagPrint
#   file         : log.py
#   file_relpath : src/tagprint/cli/commands/log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `log` command.

Prints VALUEs behind a severity label (``INFO:``, ``SUCC:``, ``ERRR:``,
``WARN:`` or ``DEBUG:``).
"""

from __future__ import annotations

import click

from tagprint.cli.cli_types import EnumChoiceParam
from tagprint.cli.options import decode_values, json_input_option
from tagprint.printer import Severity, log


@click.command(
    name="log",
    help=f"Print values behind a severity label ({', '.join(s.value for s in Severity)}).",
)
@json_input_option
@click.argument("severity", type=EnumChoiceParam(Severity))
@click.argument("values", nargs=-1)
def log_command(
    *,
    severity: Severity,
    values: tuple[str, ...],
    as_json: bool = False,
) -> None:
    """Print a severity-labelled line.

    Args:
        severity (Severity): Label to prepend.
        values (tuple[str, ...]): Raw VALUE arguments.
        as_json (bool): Decode every VALUE as JSON first.
    """
    log(severity, *decode_values(values, as_json=as_json))

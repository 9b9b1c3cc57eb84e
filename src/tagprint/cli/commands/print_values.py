# topmark:header:start
#
#   project      : TagPrint
#   file         : print_values.py
#   file_relpath : src/tagprint/cli/commands/print_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `print` command.

Formats every VALUE and prints them space-separated on one line. With
``--json`` each VALUE is decoded first, so numbers, booleans, arrays and
objects get their structured rendering.
"""

from __future__ import annotations

import click

from tagprint.cli.options import decode_values, json_input_option
from tagprint.printer import print_values


@click.command(
    name="print",
    help="Format values (plain text, or JSON with --json) and print them on one line.",
)
@json_input_option
@click.argument("values", nargs=-1)
def print_command(*, values: tuple[str, ...], as_json: bool = False) -> None:
    """Print formatted values.

    Args:
        values (tuple[str, ...]): Raw VALUE arguments.
        as_json (bool): Decode every VALUE as JSON first.
    """
    print_values(*decode_values(values, as_json=as_json))

# topmark:header:start
#
#   project      : TagPrint
#   file         : version.py
#   file_relpath : src/tagprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `version` command.

Prints the current TagPrint version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagprint.constants import TAGPRINT_VERSION

if TYPE_CHECKING:
    from tagprint.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TagPrint.",
)
def version_command() -> None:
    """Show the current version of TagPrint."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    console.print(TAGPRINT_VERSION)

# topmark:header:start
#
#   project      : TagPrint
#   file         : styles.py
#   file_relpath : src/tagprint/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `styles` command.

Lists the registered markup tag names with their escape code and a sample.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagprint.rendering.styles import STYLES, get_style

if TYPE_CHECKING:
    from tagprint.cli.console import ConsoleLike


@click.command(
    name="styles",
    help="List the markup tag names TagPrint recognizes.",
)
def styles_command() -> None:
    """List the style registry."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    reset: str = get_style("reset")
    width: int = max(len(s.name) for s in STYLES)
    for style in STYLES:
        kind = "color" if style.is_color else "attribute"
        sample = f"{style.sequence}[{style.name}]{reset}"
        console.print(f"{style.name:<{width}}  {style.code:>3}  {kind:<9}  {sample}")

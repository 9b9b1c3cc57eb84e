# topmark:header:start
#
#   project      : TagPrint
#   file         : render.py
#   file_relpath : src/tagprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint `render` command.

Expands markup tags in each TEXT argument and prints one line per argument.
Keywords are not highlighted; use `tagprint print` for full value formatting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagprint.rendering.markup import parse_tags
from tagprint.rendering.styles import get_style

if TYPE_CHECKING:
    from tagprint.cli.console import ConsoleLike


@click.command(
    name="render",
    help="Expand markup tags such as [b], [red] and [/] into terminal escape codes.",
)
@click.option(
    "--reset/--no-reset",
    "append_reset",
    default=True,
    help="Append a reset sequence after each line (default: on).",
)
@click.argument("texts", nargs=-1, required=True)
def render_command(*, texts: tuple[str, ...], append_reset: bool = True) -> None:
    """Render markup text.

    Args:
        texts (tuple[str, ...]): Markup strings, one output line each.
        append_reset (bool): Restore default terminal attributes after each line.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    suffix: str = get_style("reset") if append_reset else ""
    for text in texts:
        console.print(parse_tags(text) + suffix)

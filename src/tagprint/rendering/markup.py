# topmark:header:start
#
#   project      : TagPrint
#   file         : markup.py
#   file_relpath : src/tagprint/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stack-based markup tag parser.

Expands inline tags such as ``[b]``, ``[red]`` or ``[b red]`` into terminal
escape sequences. Tags nest: every text run is prefixed with the codes of *all*
styles currently on the stack, so ``[b][red]x`` renders ``x`` with ``1;31``.

Grammar:
    - ``[name ...]`` opens one style per whitespace-separated registered name.
    - ``[/]`` or ``[/anything]`` pops the most recently opened style.
    - Unknown names are ignored; popping an empty stack is a no-op.
    - A ``[`` without a matching ``]`` drops the rest of that segment.

Example:
    ```python
    parse_tags("[b][red]x[/][/]y")
    # '\\x1b[1m\\x1b[1;31mx\\x1b[1m\\x1b[my'
    ```

A ``[`` directly preceded by ESC belongs to an escape sequence that was already
rendered, so feeding rendered output back into the parser leaves it intact.

The parser never appends a closing reset; callers close their tags (or add
``[reset]``) when the terminal state must be restored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from tagprint.config.logging import get_logger
from tagprint.constants import ESC
from tagprint.rendering.styles import style_code

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tagprint.config.logging import TagprintLogger

logger: TagprintLogger = get_logger(__name__)

# Split on every "[" that does not continue an escape introducer.
_TAG_OPEN_RE: Final[re.Pattern[str]] = re.compile(rf"(?<!{ESC})\[")

CLOSE_PREFIX: Final[str] = "/"


def apply_styling(text: str, stack: Sequence[str]) -> str:
    """Prefix ``text`` with an escape sequence carrying every code in ``stack``.

    Args:
        text (str): The text run to render.
        stack (Sequence[str]): Active SGR codes, oldest first.

    Returns:
        str: ``ESC[<codes joined by ;>m`` followed by ``text``.
    """
    return f"{ESC}[{';'.join(stack)}m{text}"


def _apply_tokens(header: str, stack: list[str]) -> None:
    """Apply the whitespace-separated tag tokens of ``header`` to ``stack``."""
    for raw in header.split():
        token = raw.strip("[]").lower()
        if token.startswith(CLOSE_PREFIX):
            if stack:
                stack.pop()
            continue
        code: str | None = style_code(token)
        if code is None:
            logger.trace("Ignoring unknown tag %r", raw)
            continue
        stack.append(code)


def parse_tags(text: str) -> str:
    """Expand markup tags in ``text`` into terminal escape sequences.

    The style stack lives only for the duration of this call.

    Args:
        text (str): Markup text.

    Returns:
        str: The rendered text. Text before the first tag is returned unchanged.
    """
    leading, *segments = _TAG_OPEN_RE.split(text)
    stack: list[str] = []
    rendered: list[str] = [leading]

    for segment in segments:
        header, sep, rest = segment.partition("]")
        if not sep:
            logger.trace("Dropping unterminated tag segment %r", segment)
            continue
        _apply_tokens(header, stack)
        rendered.append(apply_styling(rest, stack))

    return "".join(rendered)

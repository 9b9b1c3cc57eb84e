# topmark:header:start
#
#   project      : TagPrint
#   file         : styles.py
#   file_relpath : src/tagprint/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style registry for TagPrint markup.

The registry is built once at import time and exposed as a read-only mapping
from tag name to `Style`. Names are stored lowercase; lookups accept any
letter case.

Registered names:
    - Non-color entries: ``reset`` (0), ``unstyle`` (22), ``b`` (1), ``i`` (3),
      ``u`` (4), ``s`` (9), ``blink`` (5), ``x`` (7, inverse).
    - Colors: ``white`` (97), ``gray`` (37), ``red`` (31), ``green`` (32),
      ``cyan`` (36), ``blue`` (34), ``yellow`` (33).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from tagprint.constants import ESC, FALLBACK_STYLE_CODE

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class Style:
    """A named terminal attribute or color.

    Attributes:
        name (str): Tag name used in markup (lowercase).
        code (str): SGR parameter emitted inside ``ESC[...m``.
        is_color (bool): Whether the entry is a foreground color.
    """

    name: str
    code: str
    is_color: bool

    @property
    def sequence(self) -> str:
        """Return the full escape sequence for this style alone."""
        return f"{ESC}[{self.code}m"


STYLES: Final[tuple[Style, ...]] = (
    Style("reset", "0", False),
    Style("unstyle", "22", False),
    Style("b", "1", False),
    Style("i", "3", False),
    Style("u", "4", False),
    Style("s", "9", False),
    Style("blink", "5", False),
    Style("x", "7", False),
    Style("white", "97", True),
    Style("gray", "37", True),
    Style("red", "31", True),
    Style("green", "32", True),
    Style("cyan", "36", True),
    Style("blue", "34", True),
    Style("yellow", "33", True),
)

STYLE_MAP: Final[Mapping[str, Style]] = MappingProxyType({s.name: s for s in STYLES})


def find_style(name: str) -> Style | None:
    """Return the registered `Style` for ``name`` (any case), or None."""
    return STYLE_MAP.get(name.lower())


def style_code(name: str) -> str | None:
    """Return the raw SGR code for ``name`` (any case), or None when unregistered."""
    style: Style | None = find_style(name)
    return style.code if style is not None else None


def get_style(name: str) -> str:
    """Return the escape sequence for a style name.

    Never fails: names missing from the registry resolve to the fallback
    gray-like sequence ``ESC[37m``.

    Args:
        name (str): Style name, compared case-insensitively.

    Returns:
        str: The escape sequence ``ESC[<code>m``.
    """
    code: str = style_code(name) or FALLBACK_STYLE_CODE
    return f"{ESC}[{code}m"

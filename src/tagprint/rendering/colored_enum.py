# topmark:header:start
#
#   project      : TagPrint
#   file         : colored_enum.py
#   file_relpath : src/tagprint/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

This module provides a small base enum that stores a textual value while
attaching a colorizer (callable that decorates strings).

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `EscapeColorizer`: A `Colorizer` that wraps text in a registry style
      followed by a full reset.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the colorizer
      is exposed via `.color`.

Example:
    ```python
    class Level(ColoredStrEnum):
        OK    = ("ok", EscapeColorizer("green"))
        ERROR = ("error", EscapeColorizer("red"))

    Level.OK.value            # 'ok'
    Level.OK.color("hello")   # '\\x1b[32mhello\\x1b[0m'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from tagprint.constants import RESET_SEQUENCE
from tagprint.rendering.styles import get_style


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class EscapeColorizer:
    """Colorizer backed by the TagPrint style registry.

    Args:
        style_name (str): Registry name of the style to apply.
    """

    def __init__(self, style_name: str) -> None:
        self.style_name = style_name
        self.prefix: str = get_style(style_name)

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join ``args`` with ``sep`` and wrap the result in the style + reset."""
        return f"{self.prefix}{sep.join(str(a) for a in args)}{RESET_SEQUENCE}"

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EscapeColorizer({self.style_name!r})"


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

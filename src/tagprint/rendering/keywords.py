# topmark:header:start
#
#   project      : TagPrint
#   file         : keywords.py
#   file_relpath : src/tagprint/rendering/keywords.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity keyword highlighting.

Whole-word, case-insensitive occurrences of ``success``, ``error``, ``warning``
and ``info`` are wrapped in their color followed by a reset. All keywords are
matched by a single combined pattern in one left-to-right pass, so text
inserted for one keyword is never rescanned for another.

Word boundaries are ASCII-only: ``éinfo`` still matches ``info`` since
``é`` is not an ASCII word character.
"""

from __future__ import annotations

import re
from typing import Final

from tagprint.rendering.colored_enum import ColoredStrEnum, EscapeColorizer


class Keyword(ColoredStrEnum):
    """Highlighted severity words and their colors."""

    SUCCESS = ("success", EscapeColorizer("green"))
    ERROR = ("error", EscapeColorizer("red"))
    WARNING = ("warning", EscapeColorizer("yellow"))
    INFO = ("info", EscapeColorizer("cyan"))


KEYWORD_RE: Final[re.Pattern[str]] = re.compile(
    r"\b(" + "|".join(re.escape(k.value) for k in Keyword) + r")\b",
    re.IGNORECASE | re.ASCII,
)


def _highlight(match: re.Match[str]) -> str:
    word: str = match.group(0)
    return Keyword(word.lower()).color(word)


def colorize_keywords(text: str) -> str:
    """Highlight severity keywords in ``text``.

    Args:
        text (str): Plain (or already tag-expanded) text.

    Returns:
        str: ``text`` with every keyword wrapped in its color and a reset.
            The original letter case of each match is preserved.
    """
    return KEYWORD_RE.sub(_highlight, text)

# topmark:header:start
#
#   project      : TagPrint
#   file         : test_keywords.py
#   file_relpath : tests/rendering/test_keywords.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyword highlighter and the colored enum it is built on."""

from __future__ import annotations

import pytest

from tagprint.rendering.colored_enum import EscapeColorizer
from tagprint.rendering.keywords import Keyword, colorize_keywords
from tests.escapes import RESET, sgr


def test_whole_word_keyword_is_wrapped() -> None:
    """Only the keyword is wrapped; surrounding text is untouched."""
    assert colorize_keywords("Operation success") == (
        "Operation " + sgr("32") + "success" + RESET
    )


def test_partial_word_is_not_wrapped() -> None:
    """'successful' is not a whole-word match."""
    assert colorize_keywords("successful") == "successful"
    assert colorize_keywords("informative errors") == "informative errors"


@pytest.mark.parametrize(
    ("word", "code"),
    [("success", "32"), ("error", "31"), ("warning", "33"), ("info", "36")],
)
def test_each_keyword_has_its_color(word: str, code: str) -> None:
    """Each keyword maps to its documented color."""
    assert colorize_keywords(word) == sgr(code) + word + RESET


def test_matching_is_case_insensitive_and_preserves_case() -> None:
    """Mixed-case matches are wrapped with their original spelling."""
    assert colorize_keywords("ERROR: Warning") == (
        sgr("31") + "ERROR" + RESET + ": " + sgr("33") + "Warning" + RESET
    )


def test_every_occurrence_is_wrapped() -> None:
    """All independent matches are replaced."""
    out = colorize_keywords("info, info and info")
    assert out.count(sgr("36") + "info" + RESET) == 3


def test_text_without_keywords_is_unchanged() -> None:
    """No keywords, no change."""
    assert colorize_keywords("nothing to see") == "nothing to see"


def test_keyword_enum_values_and_colorizers() -> None:
    """`Keyword` members are plain strings carrying an escape colorizer."""
    assert Keyword.ERROR == "error"
    assert Keyword("warning") is Keyword.WARNING
    assert Keyword.INFO.color("x") == sgr("36") + "x" + RESET


def test_escape_colorizer_joins_arguments() -> None:
    """`EscapeColorizer` follows the chalk call signature."""
    colorize = EscapeColorizer("blue")
    assert colorize("a", "b") == sgr("34") + "a b" + RESET
    assert colorize("a", "b", sep="-") == sgr("34") + "a-b" + RESET
    assert repr(colorize) == "EscapeColorizer('blue')"

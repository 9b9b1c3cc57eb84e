# topmark:header:start
#
#   project      : TagPrint
#   file         : test_markup.py
#   file_relpath : tests/rendering/test_markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag parser: nesting, closing, malformed markup and rendered input.

Covers `parse_tags` and `apply_styling`.
"""

from __future__ import annotations

import pytest

from tagprint.rendering.markup import apply_styling, parse_tags
from tests.escapes import ESC, sgr


def test_text_without_tags_is_unchanged() -> None:
    """Plain text passes through untouched (no escape prefix at all)."""
    assert parse_tags("hello world") == "hello world"
    assert parse_tags("") == ""


def test_leading_text_is_kept_verbatim() -> None:
    """Text before the first tag is never styled."""
    assert parse_tags("pre [red]x") == "pre " + sgr("31") + "x"


def test_open_then_close() -> None:
    """Closing pops the stack; the next run carries an empty prefix."""
    assert parse_tags("[red]x[/]y") == sgr("31") + "x" + sgr() + "y"


def test_nested_styles_compose_in_push_order() -> None:
    """Each run reflects the full stack, oldest code first."""
    out = parse_tags("[b][red]x[/][/]y")
    assert out == sgr("1") + sgr("1", "31") + "x" + sgr("1") + sgr() + "y"


def test_multiple_tokens_in_one_header() -> None:
    """Space-separated tokens are applied left to right."""
    assert parse_tags("[b u green]x") == sgr("1", "4", "32") + "x"


def test_tag_names_are_case_insensitive() -> None:
    """Tag tokens are compared case-insensitively."""
    assert parse_tags("[RED]x") == parse_tags("[red]x")


@pytest.mark.parametrize("close", ["[/]", "[/red]", "[/anything]", "[/B]"])
def test_any_slash_token_pops_most_recent(close: str) -> None:
    """Close tags are not matched to their opener: they pop the top of the stack."""
    assert parse_tags(f"[b][red]{close}x") == sgr("1") + sgr("1", "31") + sgr("1") + "x"


def test_close_on_empty_stack_is_a_no_op() -> None:
    """An unbalanced close tag does not fail."""
    assert parse_tags("[/]text") == sgr() + "text"


def test_unknown_tag_is_ignored() -> None:
    """Unknown names push nothing and are not echoed."""
    assert parse_tags("[nonexistent]text") == sgr() + "text"


def test_unknown_tokens_mixed_with_known() -> None:
    """Only registered names among several tokens are pushed."""
    assert parse_tags("[bold cyan]7") == sgr("36") + "7"


def test_segment_without_closing_bracket_is_dropped() -> None:
    """A '[' with no following ']' drops the remainder of that segment."""
    assert parse_tags("a[red b") == "a"
    assert parse_tags("[red]x[oops y[/]z") == sgr("31") + "x" + sgr() + "z"


def test_no_trailing_reset_is_appended() -> None:
    """Unclosed styles are left dangling for the caller to close."""
    out = parse_tags("[red]x")
    assert out.endswith("x")
    assert not out.endswith(sgr("0"))


def test_stack_does_not_leak_between_calls() -> None:
    """Each call starts with an empty stack."""
    parse_tags("[b][red]unclosed")
    assert parse_tags("[/]x") == sgr() + "x"


def test_rendered_escape_sequences_are_not_reparsed() -> None:
    """An ESC-introduced '[' is part of an escape sequence, not a tag."""
    rendered = parse_tags("[red]x[/]y")
    assert parse_tags(rendered) == rendered
    assert parse_tags(f"{ESC}[31mx [b]y") == f"{ESC}[31mx " + sgr("1") + "y"


def test_apply_styling_joins_full_stack() -> None:
    """`apply_styling` emits every code on the stack separated by ';'."""
    assert apply_styling("t", ["1", "4", "31"]) == sgr("1", "4", "31") + "t"
    assert apply_styling("t", []) == sgr() + "t"

# topmark:header:start
#
#   project      : TagPrint
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style registry: contents, immutability and case-insensitive lookup."""

from __future__ import annotations

import dataclasses

import pytest

from tagprint.rendering.styles import STYLE_MAP, STYLES, Style, get_style, style_code
from tests.escapes import sgr

EXPECTED_CODES: dict[str, str] = {
    "reset": "0",
    "unstyle": "22",
    "b": "1",
    "i": "3",
    "u": "4",
    "s": "9",
    "blink": "5",
    "x": "7",
    "white": "97",
    "gray": "37",
    "red": "31",
    "green": "32",
    "cyan": "36",
    "blue": "34",
    "yellow": "33",
}


def test_registry_matches_documented_codes() -> None:
    """Every documented tag name is registered with its SGR code, and nothing else."""
    assert {s.name: s.code for s in STYLES} == EXPECTED_CODES
    assert len(STYLE_MAP) == len(STYLES)


def test_only_color_entries_are_flagged_as_colors() -> None:
    """Attributes and the two pseudo-entries are not colors."""
    colors = {s.name for s in STYLES if s.is_color}
    assert colors == {"white", "gray", "red", "green", "cyan", "blue", "yellow"}
    assert not STYLE_MAP["reset"].is_color
    assert not STYLE_MAP["unstyle"].is_color


def test_registry_is_read_only() -> None:
    """Neither the mapping nor its records can be mutated."""
    with pytest.raises(TypeError):
        STYLE_MAP["magenta"] = Style("magenta", "35", True)  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        STYLE_MAP["red"].code = "91"  # type: ignore[misc]


@pytest.mark.parametrize("name", sorted(EXPECTED_CODES))
def test_lookup_is_case_insensitive(name: str) -> None:
    """Any letter case resolves to the same escape sequence as the lowercase name."""
    expected = sgr(EXPECTED_CODES[name])
    assert get_style(name) == expected
    assert get_style(name.upper()) == expected
    assert get_style(name.title()) == expected


@pytest.mark.parametrize("name", ["bold", "magenta", "", "re d"])
def test_unknown_names_fall_back_to_gray(name: str) -> None:
    """Unregistered names always resolve to the fallback sequence."""
    assert get_style(name) == sgr("37")
    assert get_style(name) == get_style(name)
    assert style_code(name) is None


def test_style_sequence_property() -> None:
    """`Style.sequence` renders the style alone."""
    assert STYLE_MAP["u"].sequence == sgr("4")

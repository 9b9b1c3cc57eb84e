# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint package.

TagPrint renders inline markup tags (``[b]``, ``[red]``, ``[/]``) into terminal
escape sequences and pretty-prints structured values (numbers, booleans,
sequences, mappings, records) with consistent styling. It exposes a small
Python API and a ``tagprint`` CLI.
"""

from __future__ import annotations

from tagprint.errors import TagprintError, UnrepresentableValueError
from tagprint.formatter import format_value
from tagprint.printer import Severity, debug, error, info, print_values, success, warning
from tagprint.rendering.keywords import colorize_keywords
from tagprint.rendering.markup import parse_tags
from tagprint.rendering.styles import STYLES, Style, get_style

__all__ = [
    "STYLES",
    "Severity",
    "Style",
    "TagprintError",
    "UnrepresentableValueError",
    "colorize_keywords",
    "debug",
    "error",
    "format_value",
    "get_style",
    "info",
    "parse_tags",
    "print_values",
    "success",
    "warning",
]

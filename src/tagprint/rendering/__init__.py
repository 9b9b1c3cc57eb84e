# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for TagPrint.

This package turns inline markup into terminal escape sequences. It knows
nothing about value shapes; `tagprint.formatter` builds on top of it.

Public modules:
    - tagprint.rendering.styles
    - tagprint.rendering.markup
    - tagprint.rendering.colored_enum
    - tagprint.rendering.keywords

"""

from __future__ import annotations

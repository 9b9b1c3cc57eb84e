# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TagPrint."""

from __future__ import annotations

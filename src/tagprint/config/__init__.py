# topmark:header:start
#
#   project      : TagPrint
#   file         : __init__.py
#   file_relpath : src/tagprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for TagPrint.

TagPrint reads no configuration files. The only runtime knob is the internal
log level (see `tagprint.config.logging`).
"""

from __future__ import annotations

# topmark:header:start
#
#   project      : TagPrint
#   file         : constants.py
#   file_relpath : src/tagprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagPrint Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TAGPRINT_VERSION: str = get_version("tagprint")
except PackageNotFoundError:  # running from a source checkout
    TAGPRINT_VERSION = "0.0.0"

# Terminal escape introducer (0x1B)
ESC: str = "\033"

# Escape sequence that restores default terminal attributes
RESET_SEQUENCE: str = f"{ESC}[0m"

# Code used by `get_style()` for names missing from the registry (gray-like)
FALLBACK_STYLE_CODE: str = "37"

# Environment variable selecting the internal log level
LOG_LEVEL_ENV_VAR: str = "TAGPRINT_LOG_LEVEL"

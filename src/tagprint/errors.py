# topmark:header:start
#
#   project      : TagPrint
#   file         : errors.py
#   file_relpath : src/tagprint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TagPrint library.

Malformed markup is never an error (see `tagprint.rendering.markup`); the only
library-level failure is a value whose shape cannot be introspected.
CLI-specific exceptions live in `tagprint.cli.errors`.
"""

from __future__ import annotations


class TagprintError(Exception):
    """Base class for all TagPrint library errors."""


class UnrepresentableValueError(TagprintError, TypeError):
    """Raised when a value cannot be converted into a renderable node.

    Args:
        value (object): The offending value.
        reason (str): Short description of what failed.

    Attributes:
        type_name (str): Qualified name of the value's type.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.type_name: str = type(value).__qualname__
        super().__init__(f"Cannot render value of type {self.type_name}: {reason}")

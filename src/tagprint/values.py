# topmark:header:start
#
#   project      : TagPrint
#   file         : values.py
#   file_relpath : src/tagprint/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed value model used by the formatter.

Python objects are converted into one of a fixed set of frozen node types by
`to_node()`. Rendering then matches exhaustively over these nodes instead of
probing arbitrary objects.

Shape resolution order:
    1. `bool` → `BooleanNode` (checked first: `bool` subclasses `int`).
    2. `numbers.Number` → `NumericNode`.
    3. `collections.abc.Mapping` → `MappingNode`.
    4. dataclass or named tuple instance → `RecordNode`.
    5. non-text `collections.abc.Sequence` → `SequenceNode`.
    6. anything else → `TextNode` (via ``str()``).

Objects that fail while being introspected (a raising ``__str__``, ``items()``
or iterator) raise `UnrepresentableValueError`, or become an
`UnrepresentableNode` placeholder when ``strict=False``.
"""

from __future__ import annotations

import collections.abc as abc
import dataclasses
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from tagprint.config.logging import get_logger
from tagprint.errors import UnrepresentableValueError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tagprint.config.logging import TagprintLogger

logger: TagprintLogger = get_logger(__name__)

# Sequences rendered as text rather than element lists
TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


@dataclass(frozen=True)
class NumericNode:
    """Integer, float, complex, Decimal or Fraction, kept as its ``str()`` text."""

    text: str


@dataclass(frozen=True)
class BooleanNode:
    """A `bool`."""

    value: bool


@dataclass(frozen=True)
class MappingNode:
    """Key-value entries in the mapping's iteration order."""

    entries: tuple[tuple[ValueNode, ValueNode], ...]


@dataclass(frozen=True)
class SequenceNode:
    """Ordered elements."""

    items: tuple[ValueNode, ...]


@dataclass(frozen=True)
class RecordNode:
    """Named fields in declaration order."""

    fields: tuple[tuple[str, ValueNode], ...]


@dataclass(frozen=True)
class TextNode:
    """Plain text and every other shape."""

    text: str


@dataclass(frozen=True)
class UnrepresentableNode:
    """Placeholder for a value that failed introspection."""

    type_name: str


ValueNode = Union[
    NumericNode,
    BooleanNode,
    MappingNode,
    SequenceNode,
    RecordNode,
    TextNode,
    UnrepresentableNode,
]


def is_record(value: object) -> bool:
    """Return True for dataclass instances and named tuple instances."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _text(value: object) -> str:
    try:
        return str(value)
    except Exception as exc:
        raise UnrepresentableValueError(value, f"str() failed: {exc!r}") from exc


def _collect(value: object, items: Callable[[], Iterable[object]], what: str) -> list[object]:
    try:
        return list(items())
    except Exception as exc:
        raise UnrepresentableValueError(value, f"{what} failed: {exc!r}") from exc


def _record_fields(value: object) -> list[tuple[str, object]]:
    try:
        if isinstance(value, tuple):
            names: tuple[str, ...] = type(value)._fields  # type: ignore[attr-defined]
            return list(zip(names, value))
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]  # type: ignore[arg-type]
    except Exception as exc:
        raise UnrepresentableValueError(value, f"field access failed: {exc!r}") from exc


def _adapt(value: object, strict: bool) -> ValueNode:
    if isinstance(value, bool):
        return BooleanNode(value)

    if isinstance(value, numbers.Number):
        return NumericNode(_text(value))

    if isinstance(value, abc.Mapping):
        pairs = _collect(value, lambda: [(k, v) for k, v in value.items()], "mapping iteration")
        return MappingNode(
            tuple(
                (to_node(k, strict=strict), to_node(v, strict=strict))
                for k, v in pairs  # type: ignore[misc]
            )
        )

    if is_record(value):
        return RecordNode(
            tuple((name, to_node(v, strict=strict)) for name, v in _record_fields(value))
        )

    if isinstance(value, abc.Sequence) and not isinstance(value, TEXT_TYPES):
        elements = _collect(value, lambda: value, "sequence iteration")
        return SequenceNode(tuple(to_node(e, strict=strict) for e in elements))

    return TextNode(_text(value))


def to_node(value: object, *, strict: bool = True) -> ValueNode:
    """Convert a Python object into a `ValueNode` tree.

    Args:
        value (object): Any Python object.
        strict (bool): If True, introspection failures raise. If False, the
            failing value (at whatever depth) becomes an `UnrepresentableNode`
            and the rest of the tree is kept.

    Returns:
        ValueNode: The converted node.

    Raises:
        UnrepresentableValueError: If ``strict`` and the value (or a nested one)
            cannot be introspected.
    """
    try:
        return _adapt(value, strict)
    except UnrepresentableValueError as exc:
        if strict:
            raise
        logger.warning("%s", exc)
        return UnrepresentableNode(exc.type_name)

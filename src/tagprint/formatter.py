# topmark:header:start
#
#   project      : TagPrint
#   file         : formatter.py
#   file_relpath : src/tagprint/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive value formatter.

`format_value()` renders any Python value into escape-coded text:

- numbers: ``[cyan][bold]<value>[/]``
- booleans: ``[green][bold]true[/]`` / ``[red][bold]false[/]``
- mappings: one ``  "<key>": <value>,`` line per entry between ``{`` and ``}``
  (every line, including the last, ends with a comma)
- sequences: ``[ a, b, c ]``
- records (dataclasses, named tuples): one `` <name>: <value>`` line per field
  between ``{`` and ``}``
- everything else: tag-expanded, keyword-highlighted ``str()``

Note that ``bold`` is not a registered tag name (``b`` is), so numbers and
booleans render in their color only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagprint.rendering.keywords import colorize_keywords
from tagprint.rendering.markup import parse_tags
from tagprint.values import (
    BooleanNode,
    MappingNode,
    NumericNode,
    RecordNode,
    SequenceNode,
    TextNode,
    UnrepresentableNode,
    to_node,
)

if TYPE_CHECKING:
    from tagprint.values import ValueNode


def format_number(node: NumericNode) -> str:
    """Render a numeric node."""
    return parse_tags(f"[cyan][bold]{node.text}[/]")


def format_bool(node: BooleanNode) -> str:
    """Render a boolean node as lowercase ``true``/``false``."""
    if node.value:
        return parse_tags("[green][bold]true[/]")
    return parse_tags("[red][bold]false[/]")


def format_text(text: str) -> str:
    """Tag-expand ``text`` and highlight severity keywords."""
    return colorize_keywords(parse_tags(text))


def format_mapping(node: MappingNode) -> str:
    """Render a mapping node, one entry per line."""
    lines: list[str] = ["{\n"]
    for key, value in node.entries:
        lines.append(f'  "{render_node(key)}": {render_node(value)},\n')
    lines.append("}")
    return "".join(lines)


def format_sequence(node: SequenceNode) -> str:
    """Render a sequence node inline."""
    return "[ " + ", ".join(render_node(item) for item in node.items) + " ]"


def format_record(node: RecordNode) -> str:
    """Render a record node, one field per line (no separators)."""
    lines: list[str] = ["{\n"]
    for name, value in node.fields:
        lines.append(f" {parse_tags(name)}: {render_node(value)}\n")
    lines.append("}")
    return "".join(lines)


def format_placeholder(node: UnrepresentableNode) -> str:
    """Render the placeholder used for values that failed introspection."""
    return parse_tags(f"[gray][i]<unrepresentable {node.type_name}>[/][/]")


def render_node(node: ValueNode) -> str:
    """Render a `ValueNode` tree into escape-coded text.

    Args:
        node (ValueNode): Node produced by `tagprint.values.to_node`.

    Returns:
        str: The rendered text.
    """
    match node:
        case NumericNode():
            return format_number(node)
        case BooleanNode():
            return format_bool(node)
        case MappingNode():
            return format_mapping(node)
        case SequenceNode():
            return format_sequence(node)
        case RecordNode():
            return format_record(node)
        case TextNode():
            return format_text(node.text)
        case UnrepresentableNode():
            return format_placeholder(node)


def format_value(value: object, *, strict: bool = False) -> str:
    """Format any value into a styled string.

    Args:
        value (object): The value to render.
        strict (bool): If True, raise `UnrepresentableValueError` when a value
            cannot be introspected. By default such values render as a gray
            ``<unrepresentable TypeName>`` placeholder and the rest of the
            output is kept.

    Returns:
        str: The rendered text with embedded escape sequences.

    Raises:
        UnrepresentableValueError: Only when ``strict`` is True.
    """
    return render_node(to_node(value, strict=strict))

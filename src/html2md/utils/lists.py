#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/lists.py
"""List prefix and indentation arithmetic.

Every continuation line of a multi-line list item has to align under the
first character of the item's content, and nested lists must not count an
ancestor's indentation twice. Prefixes and cumulative indent widths are
computed here and carried through the conversion in ``ListItemContext``
values; the document tree is never annotated.

For an item at depth ``d`` whose ancestors have prefix lengths
``p_1 .. p_{d-1}``:

- the item line starts with ``sum(p_1 .. p_{d-1})`` spaces (``indent_width``)
- continuation lines start with ``indent_width + p_d`` spaces
  (``continuation_width``)

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bs4 import Tag

from html2md.utils.nodes import child_elements, get_attr

logger = logging.getLogger(__name__)

_LIST_ITEM_LINE = re.compile(r"^(?:[-*+]|\d+\.) ")


@dataclass(frozen=True)
class ListPrefix:
    """The literal marker placed at the start of an item's first line."""

    prefix: str
    prefix_length: int


@dataclass(frozen=True)
class ListItemContext:
    """Prefix and indentation computed for a single ``li``.

    Parameters
    ----------
    item : Tag
        The ``li`` element the context belongs to
    prefix : str
        Marker text, e.g. ``"- "`` or ``"3. "``
    prefix_length : int
        Length of ``prefix``
    indent_width : int
        Sum of all ancestor item prefix lengths
    depth : int
        Nesting depth, starting at 1 for top-level lists
    index : int
        Zero-based position among the list's ``li`` children

    """

    item: Tag
    prefix: str
    prefix_length: int
    indent_width: int = 0
    depth: int = 1
    index: int = 0

    @property
    def continuation_width(self) -> int:
        """Indent of continuation lines and of nested lists' items."""
        return self.indent_width + self.prefix_length


def is_list_item(line: str) -> bool:
    """Return True if ``line`` starts (after indentation) with a list marker."""
    return bool(_LIST_ITEM_LINE.match(line.lstrip()))


def _list_start(list_node: Tag) -> int:
    start = get_attr(list_node, "start").strip()
    if not start:
        return 1
    try:
        return int(start)
    except ValueError:
        logger.debug("Ignoring non-numeric list start attribute %r", start)
        return 1


def calculate_list_prefix(list_node: Tag, index: int, bullet_marker: str) -> ListPrefix:
    """Compute the marker for the ``index``-th ``li`` of ``list_node``.

    Parameters
    ----------
    list_node : Tag
        The ``ul`` or ``ol`` element
    index : int
        Zero-based position among the list's direct ``li`` children
    bullet_marker : str
        Marker character for unordered lists

    Returns
    -------
    ListPrefix
        ``"{start + index}. "`` for ordered lists, ``"{bullet_marker} "`` otherwise

    """
    if list_node.name == "ol":
        prefix = f"{_list_start(list_node) + index}. "
    else:
        prefix = f"{bullet_marker} "
    return ListPrefix(prefix=prefix, prefix_length=len(prefix))


def list_item_contexts(
    list_node: Tag,
    bullet_marker: str,
    parent_indent_width: int = 0,
    depth: int = 1,
) -> list[ListItemContext]:
    """Build a context for each direct ``li`` child of ``list_node``.

    Non-``li`` children do not count toward the item index.
    """
    contexts = []
    for index, item in enumerate(child_elements(list_node, "li")):
        list_prefix = calculate_list_prefix(list_node, index, bullet_marker)
        contexts.append(
            ListItemContext(
                item=item,
                prefix=list_prefix.prefix,
                prefix_length=list_prefix.prefix_length,
                indent_width=parent_indent_width,
                depth=depth,
                index=index,
            )
        )
    return contexts


def preprocess_list(list_node: Tag, bullet_marker: str, parent_indent_width: int = 0) -> list[ListItemContext]:
    """Compute contexts for every item of a list at every nesting depth.

    Nested lists found directly inside an item inherit
    ``parent_indent_width + item.prefix_length``. The result is in document
    order; the tree itself is left untouched.

    Parameters
    ----------
    list_node : Tag
        Top-level ``ul`` or ``ol``
    bullet_marker : str
        Marker character for unordered lists
    parent_indent_width : int, default 0
        Indentation already consumed by enclosing items

    Returns
    -------
    list[ListItemContext]
        One context per item, parents before their nested items

    """
    return _preprocess(list_node, bullet_marker, parent_indent_width, depth=1)


def _preprocess(list_node: Tag, bullet_marker: str, parent_indent_width: int, depth: int) -> list[ListItemContext]:
    result = []
    for context in list_item_contexts(list_node, bullet_marker, parent_indent_width, depth):
        result.append(context)
        for nested in child_elements(context.item, "ul", "ol"):
            result.extend(_preprocess(nested, bullet_marker, context.continuation_width, depth + 1))
    return result


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def indent_multi_line_list_item(text: str, indent_width: int) -> str:
    """Indent the continuation lines of a converted list item.

    The first line already carries the item prefix and is left alone, as are
    blank lines and lines of nested lists. A nested list's lines were
    produced with absolute indentation by the recursive conversion, so its
    item lines and the deeper-indented lines that follow them are kept as is.

    Parameters
    ----------
    text : str
        Converted item content
    indent_width : int
        Width continuation lines must be indented by

    Returns
    -------
    str
        The indented text

    """
    indent = " " * indent_width
    lines = text.split("\n")
    in_nested_list = False

    for i, line in enumerate(lines):
        if i == 0 or not line.strip():
            continue
        if is_list_item(line):
            in_nested_list = True
            continue
        if in_nested_list and _leading_spaces(line) >= indent_width:
            continue
        in_nested_list = False
        lines[i] = indent + line

    return "\n".join(lines)


__all__ = [
    "ListPrefix",
    "ListItemContext",
    "is_list_item",
    "calculate_list_prefix",
    "list_item_contexts",
    "preprocess_list",
    "indent_multi_line_list_item",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/plugins/table.py
"""GFM pipe table rules.

Rows are emitted one per line; the heading row is followed by a delimiter
row carrying column alignment. Tables without a heading row get an empty
one, since GFM requires it. Captions are emitted after the table as an
italic line.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TYPE_CHECKING

from bs4 import Tag
from bs4.element import PageElement

from html2md.constants import DEFAULT_TABLE_BORDER, TABLE_ALIGNMENT_BORDERS
from html2md.rules.base import ConversionContext, Plugin, Rule
from html2md.utils.escape import escape_markdown
from html2md.utils.nodes import child_elements, first_child_element, get_attr, is_first_element
from html2md.utils.spacing import delimiter_for_every_line

if TYPE_CHECKING:
    from html2md.converter import Converter

_NEWLINE_RUN = re.compile(r"\n+")
_UNESCAPED_PIPE = re.compile(r"(?<!\\)\|")
_WHITESPACE_RUN = re.compile(r"\s+")
_TEXT_ALIGN = re.compile(r"text-align\s*:\s*(left|center|right)")


def _table_rows(table: Tag) -> Iterator[Tag]:
    """Yield the rows that belong to ``table`` itself, not to nested tables."""
    for row in table.find_all("tr"):
        if row.find_parent("table") is table:
            yield row


def _row_cells(row: Tag) -> list[Tag]:
    return list(child_elements(row, "th", "td"))


def _colspan(cell: Tag) -> int:
    try:
        return max(1, int(get_attr(cell, "colspan", "1")))
    except ValueError:
        return 1


def _column_count(table: Tag) -> int:
    counts = [sum(_colspan(cell) for cell in _row_cells(row)) for row in _table_rows(table)]
    return max(counts, default=0)


def is_heading_row(row: Tag) -> bool:
    """Return True if ``row`` is the table's heading row.

    That is the first row of a ``thead``, or the first row of a table
    without ``thead`` when it holds ``th`` cells.
    """
    table = row.find_parent("table")
    parent = row.parent
    if parent is not None and parent.name == "thead":
        return first_child_element(parent, "tr") is row
    if table is None or table.find("thead") is not None:
        return False
    first_row = next(_table_rows(table), None)
    return first_row is row and row.find("th") is not None


def _has_heading_row(table: Tag) -> bool:
    return any(is_heading_row(row) for row in _table_rows(table))


def cell_alignment_border(cell: Tag) -> str:
    """Return the delimiter row segment for ``cell``'s alignment."""
    align = get_attr(cell, "align").strip().lower()
    if align not in TABLE_ALIGNMENT_BORDERS:
        match = _TEXT_ALIGN.search(get_attr(cell, "style").lower())
        align = match.group(1) if match else ""
    return TABLE_ALIGNMENT_BORDERS.get(align, DEFAULT_TABLE_BORDER)


def _caption_text(table: Tag, context: ConversionContext) -> str:
    caption = first_child_element(table, "caption")
    if caption is None:
        return ""
    text = _WHITESPACE_RUN.sub(" ", caption.get_text()).strip()
    if text and context.options.escape_mode == "basic":
        text = escape_markdown(text)
    return text


def _replace_table(content: str, node: PageElement, context: ConversionContext) -> str:
    if not _has_heading_row(node):
        columns = _column_count(node)
        if columns > 0:
            header = "|" + "     |" * columns
            divider = "|" + " --- |" * columns
            content = header + "\n" + divider + content

    markdown = "\n\n" + content.strip() + "\n\n"

    caption = _caption_text(node, context)
    if caption:
        markdown += delimiter_for_every_line(caption, context.options.em_delimiter) + "\n\n"
    return markdown


def _replace_section(content: str, node: PageElement, context: ConversionContext) -> str:
    return content


def _replace_row(content: str, node: PageElement, context: ConversionContext) -> str:
    borders = ""
    if is_heading_row(node):
        segments = []
        for cell in _row_cells(node):
            segments.extend([cell_alignment_border(cell)] * _colspan(cell))
        if segments:
            borders = "| " + " | ".join(segments) + " |"

    return "\n" + content + ("\n" + borders if borders else "")


def _replace_cell(content: str, node: PageElement, context: ConversionContext) -> str:
    content = _NEWLINE_RUN.sub("<br>", content.strip())
    content = _UNESCAPED_PIPE.sub(r"\|", content)

    prefix = "| " if is_first_element(node) else " "
    cell = prefix + content + " |"
    # Spanned columns become empty cells so the row keeps its width
    return cell + " |" * (_colspan(node) - 1)


def _replace_caption(content: str, node: PageElement, context: ConversionContext) -> str | None:
    parent = node.parent
    if parent is not None and parent.name == "table":
        # Emitted by the table rule after the rows
        return ""
    trimmed = content.strip()
    if not trimmed:
        return None
    return "\n\n" + delimiter_for_every_line(trimmed, context.options.em_delimiter) + "\n\n"


table_rule = Rule(filter=("table",), replacement=_replace_table, name="table")
table_section_rule = Rule(filter=("thead", "tbody", "tfoot"), replacement=_replace_section, name="table_section")
table_row_rule = Rule(filter=("tr",), replacement=_replace_row, name="table_row")
table_cell_rule = Rule(filter=("th", "td"), replacement=_replace_cell, name="table_cell")
table_caption_rule = Rule(filter=("caption",), replacement=_replace_caption, name="table_caption")

table_rules: tuple[Rule, ...] = (
    table_rule,
    table_section_rule,
    table_row_rule,
    table_cell_rule,
    table_caption_rule,
)


def table_plugin() -> Plugin:
    """Return a plugin contributing the GFM table rules."""

    def plugin(converter: Converter) -> tuple[Rule, ...]:
        return table_rules

    return plugin


__all__ = ["table_plugin", "table_rules", "is_heading_row", "cell_alignment_border"]

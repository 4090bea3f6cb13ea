#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/plugins/gfm.py
"""GitHub Flavored Markdown plugin.

Layers tables, strikethrough, task list checkboxes, highlight, subscript
and superscript on top of the CommonMark rules. The plugin is a function
producing rules; it obtains the table rules by invoking the table plugin.

The four inline rules share the bold rule's guard: empty content renders
as nothing and the token is padded by the spacing heuristics.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import NavigableString
from bs4.element import PageElement

from html2md.plugins.table import table_plugin
from html2md.rules.base import ConversionContext, Plugin, Rule
from html2md.utils.nodes import closest, get_attr
from html2md.utils.spacing import add_space_if_necessary

if TYPE_CHECKING:
    from html2md.converter import Converter


def _replace_strikethrough(content: str, node: PageElement, context: ConversionContext) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, f"~~{trimmed}~~")


def _replace_task_list_item(content: str, node: PageElement, context: ConversionContext) -> str | None:
    if get_attr(node, "type").strip().lower() != "checkbox":
        return None
    if closest(node, "li") is None:
        return None
    marker = "[x]" if node.has_attr("checked") else "[ ]"
    following = node.next_sibling
    if isinstance(following, NavigableString) and str(following)[:1].isspace():
        # The label text already supplies the separating space
        return marker
    return marker + " "


def _replace_mark(content: str, node: PageElement, context: ConversionContext) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, f"=={trimmed}==")


def _replace_subscript(content: str, node: PageElement, context: ConversionContext) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, f"~{trimmed}~")


def _replace_superscript(content: str, node: PageElement, context: ConversionContext) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, f"^{trimmed}^")


strikethrough_rule = Rule(filter=("del", "s", "strike"), replacement=_replace_strikethrough, name="strikethrough")
task_list_rule = Rule(filter=("input",), replacement=_replace_task_list_item, name="task_list")
mark_rule = Rule(filter=("mark",), replacement=_replace_mark, name="mark")
subscript_rule = Rule(filter=("sub",), replacement=_replace_subscript, name="subscript")
superscript_rule = Rule(filter=("sup",), replacement=_replace_superscript, name="superscript")


def gfm_plugin() -> Plugin:
    """Return the GFM plugin: table rules followed by the GFM inline rules.

    Examples
    --------
        >>> from html2md import Converter, commonmark_rules, gfm_plugin
        >>> converter = Converter().add_rules(*commonmark_rules).use(gfm_plugin())
        >>> converter.convert_string("<del>old</del>")
        '~~old~~'

    """

    def plugin(converter: Converter) -> list[Rule]:
        rules = list(table_plugin()(converter) or ())
        rules.extend([strikethrough_rule, task_list_rule, mark_rule, subscript_rule, superscript_rule])
        return rules

    return plugin


__all__ = [
    "gfm_plugin",
    "strikethrough_rule",
    "task_list_rule",
    "mark_rule",
    "subscript_rule",
    "superscript_rule",
]

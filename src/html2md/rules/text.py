#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/rules/text.py
"""Text node rule."""

from __future__ import annotations

import re

from bs4 import Tag
from bs4.element import PageElement

from html2md.constants import STRUCTURAL_WHITESPACE_PARENTS, TEXT_NODE
from html2md.rules.base import ConversionContext, Rule
from html2md.utils.escape import escape_markdown
from html2md.utils.nodes import parent_name

# HTML whitespace; non-breaking spaces are content and are kept
_HTML_WHITESPACE_RUN = re.compile(r"[ \t\n\r\f]+")


def _is_br(node: PageElement | None) -> bool:
    return isinstance(node, Tag) and node.name == "br"


def _replace_text(content: str, node: PageElement, context: ConversionContext) -> str:
    text = str(node)

    if context.in_pre:
        return text

    if not _HTML_WHITESPACE_RUN.sub("", text):
        # Whitespace-only: keep one separating space between inline content
        if parent_name(node) in STRUCTURAL_WHITESPACE_PARENTS:
            return ""
        if _is_br(node.previous_sibling) or _is_br(node.next_sibling):
            return ""
        return " " if (" " in text or "\n" in text) else ""

    text = _HTML_WHITESPACE_RUN.sub(" ", text)
    if _is_br(node.previous_sibling):
        text = text.lstrip(" ")
    if _is_br(node.next_sibling):
        text = text.rstrip(" ")

    if context.options.escape_mode == "basic":
        text = escape_markdown(text)

    return text


text_rule = Rule(filter=(TEXT_NODE,), replacement=_replace_text, name="text")

__all__ = ["text_rule"]

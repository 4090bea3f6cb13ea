#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/nodes.py
"""Small BeautifulSoup node inspection helpers shared by rules and utilities."""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, PageElement, ProcessingInstruction

from html2md.exceptions import DependencyError

_IGNORABLE_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def is_ignorable_string(node: PageElement) -> bool:
    """Return True for comments, doctypes and other non-content strings."""
    return isinstance(node, _IGNORABLE_STRINGS)


def is_text_node(node: PageElement) -> bool:
    """Return True for content-bearing text nodes."""
    return isinstance(node, NavigableString) and not is_ignorable_string(node)


def parent_name(node: PageElement) -> str | None:
    """Return the lower-cased tag name of ``node``'s parent, if any."""
    parent = node.parent
    if parent is None or not parent.name:
        return None
    return parent.name.lower()


def closest(node: PageElement, *names: str) -> Tag | None:
    """Return ``node`` itself or its nearest ancestor named one of ``names``."""
    if isinstance(node, Tag) and node.name in names:
        return node
    return node.find_parent(list(names))


def child_elements(node: Tag, *names: str) -> Iterator[Tag]:
    """Yield direct element children, optionally restricted to ``names``."""
    for child in node.children:
        if isinstance(child, Tag) and (not names or child.name in names):
            yield child


def first_child_element(node: Tag, *names: str) -> Tag | None:
    """Return the first direct element child named one of ``names``."""
    return next(child_elements(node, *names), None)


def is_first_element(node: Tag) -> bool:
    """Return True if no element sibling precedes ``node``."""
    return node.find_previous_sibling(True) is None


def get_attr(node: Tag, name: str, default: str = "") -> str:
    """Return an attribute as a string; multi-valued attributes are space-joined."""
    value = node.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def parse_html(html: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse an HTML string with the given BeautifulSoup parser backend.

    Raises
    ------
    DependencyError
        If the parser backend (lxml, html5lib) is not installed.

    """
    try:
        return BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise DependencyError(
            f"HTML parser '{parser}' is not available; install it or use 'html.parser'",
            missing_packages=[parser],
            original_error=e,
        ) from e


__all__ = [
    "is_ignorable_string",
    "is_text_node",
    "parent_name",
    "closest",
    "child_elements",
    "first_child_element",
    "is_first_element",
    "get_attr",
    "parse_html",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/spacing.py
"""Spacing and whitespace heuristics for inline Markdown tokens.

Inline delimiters such as ``**`` only parse as emphasis when they are not
glued to adjacent words. These helpers inspect a node's neighbouring
siblings to decide whether a separating space has to be inserted.

"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import NavigableString, Tag
from bs4.element import PageElement

from html2md.constants import INLINE_ELEMENTS, SELF_PADDING_TAGS
from html2md.utils.nodes import is_ignorable_string

logger = logging.getLogger(__name__)

_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")
_NESTED_EMPHASIS = ({"b", "strong"}, {"em", "i"})


@dataclass(frozen=True)
class Spacing:
    """Whether a space is required before and after an inline token."""

    before: bool = False
    after: bool = False


def is_inline_element(tag_name: str | None) -> bool:
    """Return True if ``tag_name`` names an inline HTML element."""
    if not tag_name:
        return False
    return tag_name.lower() in INLINE_ELEMENTS


def _adjacent_sibling(node: PageElement, forward: bool) -> PageElement | None:
    sibling = node.next_sibling if forward else node.previous_sibling
    while sibling is not None:
        if isinstance(sibling, NavigableString):
            if not is_ignorable_string(sibling):
                return sibling
        elif isinstance(sibling, Tag):
            return sibling
        sibling = sibling.next_sibling if forward else sibling.previous_sibling
    return None


def _sibling_text(node: PageElement, forward: bool) -> str:
    sibling = _adjacent_sibling(node, forward)
    if isinstance(sibling, Tag):
        return sibling.get_text()
    return str(sibling) if sibling is not None else ""


def get_prev_sibling_text(node: PageElement) -> str:
    """Return the text of the nearest preceding sibling, or ``""``."""
    return _sibling_text(node, forward=False)


def get_next_sibling_text(node: PageElement) -> str:
    """Return the text of the nearest following sibling, or ``""``."""
    return _sibling_text(node, forward=True)


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def _next_token_pads_itself(node: PageElement) -> bool:
    following = _adjacent_sibling(node, forward=True)
    if not isinstance(following, Tag):
        return False
    name = (following.name or "").lower()
    if name not in SELF_PADDING_TAGS:
        return False
    parent = (node.parent.name or "").lower() if node.parent is not None else ""
    if any(name in group and parent in group for group in _NESTED_EMPHASIS):
        # Emphasis nested in the same emphasis renders without delimiters or padding
        return False
    own_text = node.get_text() if isinstance(node, Tag) else str(node)
    return bool(own_text) and not own_text[-1].isspace()


def needs_spacing(node: PageElement) -> Spacing:
    """Work out whether an inline token rendered for ``node`` needs padding.

    A leading space is needed when the preceding text ends in a
    non-whitespace character. A trailing space is needed when the following
    text starts with a character that is neither whitespace nor punctuation.
    The trailing space is left out when the following sibling is a
    self-padding inline element, which adds the separating space itself.

    Parameters
    ----------
    node : PageElement
        The element the inline token is rendered for

    Returns
    -------
    Spacing
        Required padding on each side

    """
    prev_text = get_prev_sibling_text(node)
    next_text = get_next_sibling_text(node)

    before = bool(prev_text) and not prev_text[-1].isspace()
    after = bool(next_text) and not next_text[0].isspace() and not _is_punctuation(next_text[0])
    if after and _next_token_pads_itself(node):
        after = False
    return Spacing(before=before, after=after)


def add_space_if_necessary(node: PageElement, markdown: str) -> str:
    """Pad an inline Markdown token so it does not merge with its neighbours.

    Examples
    --------
    For ``hello<b>world</b>there`` the bold token becomes ``" **world** "``,
    so the paragraph reads ``hello **world** there``.

    """
    if not markdown:
        return markdown

    spacing = needs_spacing(node)
    if spacing.before:
        markdown = " " + markdown
    if spacing.after:
        markdown = markdown + " "
    return markdown


def trim_leading_spaces(text: str) -> str:
    """Strip leading whitespace from every line."""
    return "\n".join(line.lstrip() for line in text.split("\n"))


def delimiter_for_every_line(text: str, delimiter: str) -> str:
    """Wrap each non-blank line of ``text`` in ``delimiter``.

    Emphasis cannot span a blank line, so multi-line bold or italic content
    is delimited line by line.
    """
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        lines.append(f"{delimiter}{line}{delimiter}" if line else "")
    return "\n".join(lines)


def get_absolute_url(url: str, base_url: str | None = None) -> str:
    """Resolve ``url`` against ``base_url``.

    Absolute, protocol-relative and scheme-bearing URLs (``data:``,
    ``mailto:`` ...) are returned unchanged, as is any URL that cannot be
    resolved.
    """
    if not url or not base_url:
        return url

    if url.startswith("//") or _URL_SCHEME.match(url):
        return url

    try:
        return urljoin(base_url, url)
    except ValueError as e:
        logger.debug("Could not resolve %r against %r: %s", url, base_url, e)
        return url


__all__ = [
    "Spacing",
    "is_inline_element",
    "get_prev_sibling_text",
    "get_next_sibling_text",
    "needs_spacing",
    "add_space_if_necessary",
    "trim_leading_spaces",
    "delimiter_for_every_line",
    "get_absolute_url",
]

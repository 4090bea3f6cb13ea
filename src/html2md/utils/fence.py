#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/fence.py
"""Code fence sizing and code language detection.

A fence is always one character longer than the longest run of the fence
character inside the content, so the content can never close the fence
early.

"""

from __future__ import annotations

import re

from bs4 import NavigableString, Tag
from bs4.element import PageElement

from html2md.constants import COMMON_CODE_LANGUAGES, MIN_CODE_FENCE_LENGTH
from html2md.utils.nodes import get_attr, is_ignorable_string

_LANGUAGE_CLASS = re.compile(r"(?:language-|lang-|hljs-)([\w+#-]+)")
_BRUSH_CLASS = re.compile(r"brush:\s*([\w+#-]+)")
_HIGHLIGHTER_CLASSES = frozenset({"hljs", "highlight", "sourcecode", "code"})
_FENCE_OPEN = re.compile(r"^(?: *(?:>|[-*+] |\d{1,9}[.)] ))* *(`{3,}(?!.*`)|~{3,})")


def longest_run(content: str, char: str) -> int:
    """Return the length of the longest run of ``char`` in ``content``."""
    longest = 0
    current = 0
    for c in content:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def calculate_fence(content: str, fence_char: str = "`") -> str:
    """Return a code block fence that cannot collide with ``content``.

    Parameters
    ----------
    content : str
        Code block content
    fence_char : str, default "`"
        Fence character, a backtick or a tilde

    Returns
    -------
    str
        ``fence_char`` repeated ``max(3, longest_run + 1)`` times

    """
    count = max(MIN_CODE_FENCE_LENGTH, longest_run(content, fence_char) + 1)
    return fence_char * count


def inline_code_delimiter(content: str) -> str:
    """Return the backtick delimiter for an inline code span.

    Content without backticks gets a single backtick; content holding a run
    of ``n`` backticks gets ``n + 1``.
    """
    return "`" * (longest_run(content, "`") + 1)


def match_fence_open(line: str) -> str | None:
    """Return the fence opened by ``line``, or None if it opens no fenced block.

    The fence may follow indentation, blockquote markers and list markers,
    as in ``> ```` or ``- ~~~``. A backtick run followed by more backticks
    on the same line is an inline code span, not a fence.
    """
    match = _FENCE_OPEN.match(line)
    return match.group(1) if match else None


def closes_fence(line: str, fence: str) -> bool:
    """Return True if ``line`` closes a block opened with ``fence``."""
    stripped = line.strip().lstrip("> ")
    return len(stripped) >= len(fence) and stripped == fence[0] * len(stripped)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of blank lines to a single blank line.

    Lines inside fenced code blocks are kept as they are.

    Examples
    --------
        >>> collapse_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'

    """
    result: list[str] = []
    fence: str | None = None
    for line in text.split("\n"):
        if fence is not None:
            result.append(line)
            if closes_fence(line, fence):
                fence = None
            continue

        fence = match_fence_open(line)
        if fence is None and not line.strip() and result and not result[-1].strip():
            continue
        result.append(line)
    return "\n".join(result)


def extract_language(class_attribute: str | None) -> str | None:
    """Extract a language name from an element's class attribute.

    Recognizes ``language-x``, ``lang-x``, ``hljs-x`` and ``brush: x``
    patterns, and a bare class that is a well-known language name.

    Examples
    --------
        >>> extract_language("highlight language-python")
        'python'
        >>> extract_language("js")
        'js'
        >>> extract_language("wide") is None
        True

    """
    if not class_attribute:
        return None

    if match := _LANGUAGE_CLASS.search(class_attribute):
        return match.group(1)
    if match := _BRUSH_CLASS.search(class_attribute):
        return match.group(1)

    for cls in class_attribute.split():
        if cls.lower() in _HIGHLIGHTER_CLASSES:
            continue
        if cls.lower() in COMMON_CODE_LANGUAGES:
            return cls
    return None


def find_code_language(node: Tag) -> str:
    """Find the language of a ``pre`` or ``code`` element.

    Checks the ``data-lang`` attribute and the class of the element itself,
    then those of a ``code`` child.
    """
    candidates = [node]
    if node.name != "code":
        code = node.find("code")
        if code is not None:
            candidates.append(code)

    for candidate in candidates:
        data_lang = get_attr(candidate, "data-lang").strip()
        if data_lang:
            return data_lang
        language = extract_language(get_attr(candidate, "class"))
        if language:
            return language
    return ""


def collect_code_content(node: PageElement) -> str:
    """Return the raw text of a code element, turning ``<br>`` into newlines."""
    parts: list[str] = []
    _collect(node, parts)
    return "".join(parts)


def _collect(node: PageElement, parts: list[str]) -> None:
    if isinstance(node, NavigableString):
        if not is_ignorable_string(node):
            parts.append(str(node))
        return
    if isinstance(node, Tag):
        if node.name == "br":
            parts.append("\n")
            return
        for child in node.children:
            _collect(child, parts)


__all__ = [
    "longest_run",
    "calculate_fence",
    "inline_code_delimiter",
    "match_fence_open",
    "closes_fence",
    "collapse_blank_lines",
    "extract_language",
    "find_code_language",
    "collect_code_content",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/escape.py
"""Markdown text escaping utilities.

Escaping is an ordered pipeline: every step operates on the output of the
previous one, so the order of ``_MARKDOWN_REPLACEMENTS`` is significant.
The pipeline is not idempotent; escaping already escaped text escapes the
backslashes introduced by the first pass.

"""

from __future__ import annotations

import re
from typing import Callable, Union

_Replacement = Union[str, Callable[[re.Match[str]], str]]

_MARKDOWN_REPLACEMENTS: tuple[tuple[re.Pattern[str], _Replacement], ...] = (
    # Backslashes first so later escapes are not doubled
    (re.compile(r"\\(\S)"), r"\\\\\1"),
    # ATX heading markers
    (re.compile(r"^(#{1,6} )", re.MULTILINE), r"\\\1"),
    # Ordered list markers
    (re.compile(r"^(\W* {0,3})(\d+)\. ", re.MULTILINE), r"\1\2\\. "),
    # Unordered list markers
    (re.compile(r"^([^\\\w]*)([*+-] )", re.MULTILINE), r"\1\\\2"),
    # Blockquote markers
    (re.compile(r"^(\W* {0,3})> ", re.MULTILINE), r"\1\\> "),
    # Emphasis, inline code and table pipes
    (re.compile(r"[*_`|]"), r"\\\g<0>"),
    # Link brackets
    (re.compile(r"[\[\]]"), r"\\\g<0>"),
)

_NEWLINE_RUN = re.compile(r"\n+")


def escape_markdown(text: str) -> str:
    r"""Escape Markdown-significant characters in plain text.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text that renders literally when parsed as Markdown

    Examples
    --------
        >>> escape_markdown("1. not a list *really*")
        '1\\. not a list \\*really\\*'

    """
    if not text:
        return text

    for pattern, replacement in _MARKDOWN_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def escape_multi_line(text: str) -> str:
    """Collapse newlines to single spaces so content fits on one Markdown line.

    Parameters
    ----------
    text : str
        Already converted Markdown, e.g. a link label

    Returns
    -------
    str
        Single-line, trimmed text

    """
    return _NEWLINE_RUN.sub(" ", text).strip()


__all__ = ["escape_markdown", "escape_multi_line"]

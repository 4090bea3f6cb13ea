#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utilities used by conversion rules: escaping, spacing, lists and code fences."""

from html2md.utils.escape import escape_markdown, escape_multi_line
from html2md.utils.fence import (
    calculate_fence,
    collect_code_content,
    extract_language,
    find_code_language,
    inline_code_delimiter,
)
from html2md.utils.lists import (
    ListItemContext,
    ListPrefix,
    calculate_list_prefix,
    indent_multi_line_list_item,
    is_list_item,
    list_item_contexts,
    preprocess_list,
)
from html2md.utils.spacing import (
    Spacing,
    add_space_if_necessary,
    delimiter_for_every_line,
    get_absolute_url,
    is_inline_element,
    needs_spacing,
    trim_leading_spaces,
)

__all__ = [
    "escape_markdown",
    "escape_multi_line",
    "calculate_fence",
    "collect_code_content",
    "extract_language",
    "find_code_language",
    "inline_code_delimiter",
    "ListItemContext",
    "ListPrefix",
    "calculate_list_prefix",
    "indent_multi_line_list_item",
    "is_list_item",
    "list_item_contexts",
    "preprocess_list",
    "Spacing",
    "add_space_if_necessary",
    "delimiter_for_every_line",
    "get_absolute_url",
    "is_inline_element",
    "needs_spacing",
    "trim_leading_spaces",
]

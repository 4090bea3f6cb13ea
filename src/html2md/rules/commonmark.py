#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/rules/commonmark.py
"""Baseline CommonMark rule set.

One rule per construct. Block rules surround their output with blank lines
and leave it to the final normalisation pass to collapse the excess; inline
rules pad themselves through the spacing heuristics so delimiters never
merge with neighbouring words.

"""

from __future__ import annotations

import re

from bs4 import Tag
from bs4.element import PageElement

from html2md.constants import (
    DROPPED_ELEMENTS,
    HARD_LINE_BREAK,
    HEADING_TAGS,
    INDENTED_CODE_PREFIX,
    LIST_TAGS,
    SINGLE_LINE_CONTEXTS,
)
from html2md.rules.base import ConversionContext, Rule, RuleResult
from html2md.rules.text import text_rule
from html2md.utils.escape import escape_markdown, escape_multi_line
from html2md.utils.fence import (
    calculate_fence,
    collapse_blank_lines,
    collect_code_content,
    find_code_language,
    inline_code_delimiter,
)
from html2md.utils.lists import ListItemContext, indent_multi_line_list_item
from html2md.utils.nodes import get_attr, parent_name
from html2md.utils.spacing import (
    add_space_if_necessary,
    delimiter_for_every_line,
    get_absolute_url,
    is_inline_element,
    trim_leading_spaces,
)

_BLANK_LINE_RUN = re.compile(r"\n{2,}")
_UNESCAPED_HASH = re.compile(r"(?<!\\)#")
_NEEDS_ANGLE_BRACKETS = re.compile(r"[\s()<>]")


def _replace_list(content: str, node: PageElement, context: ConversionContext) -> str:
    if context.list_item is not None:
        # Nested list: attach directly below the enclosing item's text
        return "\n" + content.strip("\n") + "\n"
    return "\n\n" + content + "\n\n"


def _replace_list_item(content: str, node: PageElement, context: ConversionContext) -> str | None:
    if not content.strip():
        return None

    item = context.list_item
    if item is None or item.item is not node:
        # An li outside of ul/ol renders as a bullet item
        bullet = f"{context.options.bullet_marker} "
        item = ListItemContext(
            item=node,
            prefix=bullet,
            prefix_length=len(bullet),
            indent_width=context.parent_indent_width,
        )

    content = indent_multi_line_list_item(content.strip(), item.continuation_width)
    return " " * item.indent_width + item.prefix + content + "\n"


def _replace_paragraph(content: str, node: PageElement, context: ConversionContext) -> str:
    parent = parent_name(node)
    if is_inline_element(parent) or parent == "li":
        return "\n" + content.strip() + "\n"

    content = content.strip()
    if isinstance(node, Tag) and node.find(["pre", "ul", "ol"]) is None:
        content = trim_leading_spaces(content)
    return "\n\n" + content + "\n\n"


def _replace_heading(content: str, node: PageElement, context: ConversionContext) -> str | None:
    if not content.strip():
        return None

    options = context.options
    content = content.replace("\r", " ").replace("\n", " ")
    content = _UNESCAPED_HASH.sub(r"\#", content).strip()

    if node.find_parent("a") is not None:
        return add_space_if_necessary(node, f"{options.strong_delimiter}{content}{options.strong_delimiter}")

    level = int(node.name[1])
    if options.heading_style == "setext" and level < 3:
        underline = ("=" if level == 1 else "-") * len(content)
        return f"\n\n{content}\n{underline}\n\n"

    return "\n\n" + "#" * level + " " + content + "\n\n"


def _replace_bold(content: str, node: PageElement, context: ConversionContext) -> str:
    if parent_name(node) in ("strong", "b"):
        return content

    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, delimiter_for_every_line(trimmed, context.options.strong_delimiter))


def _replace_italic(content: str, node: PageElement, context: ConversionContext) -> str:
    if parent_name(node) in ("em", "i"):
        return content

    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(node, delimiter_for_every_line(trimmed, context.options.em_delimiter))


def _format_title(title: str) -> str:
    if not title:
        return ""
    title = title.replace("\n", " ").replace('"', '\\"')
    return f' "{title}"'


def _format_destination(url: str) -> str:
    if _NEEDS_ANGLE_BRACKETS.search(url):
        return "<" + url.replace("<", "%3C").replace(">", "%3E") + ">"
    return url


def _replace_image(content: str, node: PageElement, context: ConversionContext) -> str:
    src = get_attr(node, "src").strip()
    if not src:
        return ""

    src = get_absolute_url(src, context.options.base_url)
    alt = get_attr(node, "alt").replace("\n", " ").strip()
    title = _format_title(get_attr(node, "title").strip())
    return f"![{alt}]({_format_destination(src)}{title})"


def _replace_link(content: str, node: PageElement, context: ConversionContext) -> str | RuleResult | None:
    options = context.options
    href = get_attr(node, "href").strip()
    if not href or href == "#":
        return content

    href = _format_destination(get_absolute_url(href, options.base_url))
    title_attr = get_attr(node, "title").strip()
    title = _format_title(title_attr)

    content = escape_multi_line(content)
    if not content:
        fallback = title_attr or get_attr(node, "aria-label").strip()
        content = escape_markdown(fallback) if options.escape_mode == "basic" else fallback
    if not content:
        return None

    if options.link_style == "inlined":
        return add_space_if_necessary(node, f"[{content}]({href}{title})")

    if options.link_reference_style == "full":
        index = context.references.add(href, title)
        markdown = f"[{content}][{index}]"
        footer = f"[{index}]: {href}{title}"
    elif options.link_reference_style == "collapsed":
        markdown = f"[{content}][]"
        footer = f"[{content}]: {href}{title}"
    else:
        markdown = f"[{content}]"
        footer = f"[{content}]: {href}{title}"

    return RuleResult(markdown=add_space_if_necessary(node, markdown), footer=footer)


def _replace_inline_code(content: str, node: PageElement, context: ConversionContext) -> str | None:
    if node.find_parent("pre") is not None:
        return None

    code = _BLANK_LINE_RUN.sub("\n", collect_code_content(node))
    if not code:
        return ""

    delimiter = inline_code_delimiter(code)
    if code.startswith("`"):
        code = " " + code
    if code.endswith("`"):
        code = code + " "
    return add_space_if_necessary(node, f"{delimiter}{code}{delimiter}")


def _replace_code_block(content: str, node: PageElement, context: ConversionContext) -> str:
    options = context.options
    code = collect_code_content(node)
    if code.startswith("\n"):
        code = code[1:]
    code = code.rstrip("\n")

    if options.code_block_style == "indented":
        lines = [INDENTED_CODE_PREFIX + line if line else "" for line in code.split("\n")]
        return "\n\n" + "\n".join(lines) + "\n\n"

    language = find_code_language(node)
    fence = calculate_fence(code, options.code_fence_char)
    return f"\n\n{fence}{language}\n{code}\n{fence}\n\n"


def _replace_horizontal_rule(content: str, node: PageElement, context: ConversionContext) -> str:
    if node.find_parent(list(HEADING_TAGS)) is not None:
        return ""
    return f"\n\n{context.options.horizontal_rule}\n\n"


def _replace_line_break(content: str, node: PageElement, context: ConversionContext) -> str:
    if node.find_parent(list(SINGLE_LINE_CONTEXTS)) is not None:
        return " "
    return HARD_LINE_BREAK


def _replace_blockquote(content: str, node: PageElement, context: ConversionContext) -> str | None:
    content = content.strip()
    if not content:
        return None

    content = collapse_blank_lines(content)
    content = "\n".join("> " + line for line in content.split("\n"))
    return "\n\n" + content + "\n\n"


def _replace_dropped(content: str, node: PageElement, context: ConversionContext) -> str:
    return ""


def _replace_figure(content: str, node: PageElement, context: ConversionContext) -> str:
    return "\n\n" + content.strip() + "\n\n"


def _replace_figcaption(content: str, node: PageElement, context: ConversionContext) -> str | None:
    trimmed = content.strip()
    if not trimmed:
        return None
    return "\n\n" + delimiter_for_every_line(trimmed, context.options.em_delimiter) + "\n\n"


list_rule = Rule(filter=LIST_TAGS, replacement=_replace_list, name="list")
list_item_rule = Rule(filter=("li",), replacement=_replace_list_item, name="list_item")
paragraph_rule = Rule(filter=("p", "div"), replacement=_replace_paragraph, name="paragraph")
heading_rule = Rule(filter=HEADING_TAGS, replacement=_replace_heading, name="heading")
bold_rule = Rule(filter=("strong", "b"), replacement=_replace_bold, name="bold")
italic_rule = Rule(filter=("em", "i"), replacement=_replace_italic, name="italic")
image_rule = Rule(filter=("img",), replacement=_replace_image, name="image")
link_rule = Rule(filter=("a",), replacement=_replace_link, name="link")
inline_code_rule = Rule(filter=("code", "kbd", "samp", "tt"), replacement=_replace_inline_code, name="inline_code")
code_block_rule = Rule(filter=("pre",), replacement=_replace_code_block, name="code_block")
horizontal_rule_rule = Rule(filter=("hr",), replacement=_replace_horizontal_rule, name="horizontal_rule")
line_break_rule = Rule(filter=("br",), replacement=_replace_line_break, name="line_break")
blockquote_rule = Rule(filter=("blockquote",), replacement=_replace_blockquote, name="blockquote")
dropped_rule = Rule(filter=DROPPED_ELEMENTS, replacement=_replace_dropped, name="dropped")
figure_rule = Rule(filter=("figure",), replacement=_replace_figure, name="figure")
figcaption_rule = Rule(filter=("figcaption",), replacement=_replace_figcaption, name="figcaption")

commonmark_rules: tuple[Rule, ...] = (
    text_rule,
    list_rule,
    list_item_rule,
    paragraph_rule,
    heading_rule,
    bold_rule,
    italic_rule,
    image_rule,
    link_rule,
    inline_code_rule,
    code_block_rule,
    horizontal_rule_rule,
    line_break_rule,
    blockquote_rule,
    dropped_rule,
    figure_rule,
    figcaption_rule,
)

__all__ = [
    "list_rule",
    "list_item_rule",
    "paragraph_rule",
    "heading_rule",
    "bold_rule",
    "italic_rule",
    "image_rule",
    "link_rule",
    "inline_code_rule",
    "code_block_rule",
    "horizontal_rule_rule",
    "line_break_rule",
    "blockquote_rule",
    "dropped_rule",
    "figure_rule",
    "figcaption_rule",
    "commonmark_rules",
]

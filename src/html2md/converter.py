#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/converter.py
"""Rule-driven HTML to Markdown converter.

The :class:`Converter` walks a BeautifulSoup tree depth-first. Each
element's children are converted first; the concatenated children text is
then handed to the first rule whose filter matches the element and whose
replacement does not decline. Text nodes are dispatched the same way.
Elements no rule accepts contribute their children text unchanged.

Rules are supplied by the caller, either directly through
:meth:`Converter.add_rules` or through plugins registered with
:meth:`Converter.use`. :func:`create_converter` assembles the usual
CommonMark plus GFM configuration.

Examples
--------
    >>> from html2md import create_converter
    >>> create_converter().convert_string("<p>Hello <b>world</b></p>")
    'Hello **world**'

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

from html2md.constants import LIST_TAGS
from html2md.exceptions import ConversionError
from html2md.options.converter import ConverterOptions
from html2md.plugins.gfm import gfm_plugin
from html2md.rules.base import ConversionContext, Plugin, Rule, RuleResult, RuleSet
from html2md.rules.commonmark import commonmark_rules
from html2md.utils.escape import escape_markdown
from html2md.utils.fence import closes_fence, match_fence_open
from html2md.utils.lists import list_item_contexts
from html2md.utils.nodes import is_ignorable_string, is_text_node, parse_html

logger = logging.getLogger(__name__)

BeforeHook = Callable[[BeautifulSoup], None]
AfterHook = Callable[[str], str]


def normalize_whitespace(markdown: str) -> str:
    """Collapse blank line runs and strip trailing whitespace.

    Runs of three or more newlines become exactly two. Trailing whitespace is
    removed from every line except a hard line break (two trailing spaces
    followed by a non-blank line). Lines inside fenced code blocks are left
    untouched.

    Parameters
    ----------
    markdown : str
        Raw Markdown assembled by the rules

    Returns
    -------
    str
        Normalized Markdown

    """
    lines = markdown.split("\n")
    result: list[str] = []
    fence: str | None = None

    for i, line in enumerate(lines):
        if fence is not None:
            result.append(line)
            if closes_fence(line, fence):
                fence = None
            continue

        fence = match_fence_open(line)
        if fence is not None:
            result.append(line.rstrip())
            continue

        stripped = line.rstrip()
        if not stripped:
            if result and not result[-1]:
                continue
            result.append("")
            continue

        if line.endswith("  ") and i + 1 < len(lines) and lines[i + 1].strip():
            stripped += "  "
        result.append(stripped)

    return "\n".join(result)


def _trim_document(markdown: str) -> str:
    markdown = markdown.strip("\n").rstrip()
    first_line = markdown.split("\n", 1)[0]
    # Four leading spaces open an indented code block and must survive
    if len(first_line) - len(first_line.lstrip(" ")) < 4:
        markdown = markdown.lstrip(" ")
    return markdown


def _owner_document(node: PageElement) -> PageElement:
    root = node
    while root.parent is not None:
        root = root.parent
    return root


class Converter:
    """Convert BeautifulSoup trees to Markdown using an ordered rule set.

    Parameters
    ----------
    options : ConverterOptions, optional
        Output options handed to every rule; defaults are used when omitted

    Notes
    -----
    A converter starts with no rules at all. Rules registered earlier take
    precedence over rules registered later, except for plugins registered
    with ``precedence=True``, whose rules go to the front.

    A converter holds no per-document state; it can be reused for any
    number of conversions, including from several threads.

    """

    def __init__(self, options: ConverterOptions | None = None):
        self.options = options or ConverterOptions()
        self._rules = RuleSet()
        self._keep: set[str] = set()
        self._remove: set[str] = set()
        self._before_hooks: list[BeforeHook] = []
        self._after_hooks: list[AfterHook] = []

    @property
    def rules(self) -> RuleSet:
        """The converter's ordered rule set."""
        return self._rules

    def add_rules(self, *rules: Rule) -> Converter:
        """Append rules after the existing ones."""
        self._rules.extend(rules)
        return self

    def use(self, *plugins: Plugin, precedence: bool = False) -> Converter:
        """Register plugins.

        Each plugin is invoked with this converter and its rules are appended,
        or placed before all existing rules when ``precedence`` is True.
        Plugins are applied in the order given, so with ``precedence`` the
        last plugin's rules end up first.

        Parameters
        ----------
        *plugins : Plugin
            Callables returning a sequence of rules (or None)
        precedence : bool, default False
            Give the plugins' rules priority over existing rules

        Returns
        -------
        Converter
            This converter, for chaining

        """
        for plugin in plugins:
            rules = list(plugin(self) or ())
            logger.debug("Plugin %r contributed %d rule(s)", plugin, len(rules))
            if precedence:
                self._rules.prepend(rules)
            else:
                self._rules.extend(rules)
        return self

    def keep(self, *tags: str) -> Converter:
        """Emit these elements as raw HTML instead of converting them."""
        self._keep.update(tag.lower() for tag in tags)
        return self

    def remove(self, *tags: str) -> Converter:
        """Drop these elements and their content entirely."""
        self._remove.update(tag.lower() for tag in tags)
        return self

    def before(self, *hooks: BeforeHook) -> Converter:
        """Register hooks run on the document tree before conversion."""
        self._before_hooks.extend(hooks)
        return self

    def after(self, *hooks: AfterHook) -> Converter:
        """Register hooks applied to the trimmed Markdown output, in registration order."""
        self._after_hooks.extend(hooks)
        return self

    def convert_string(self, html: str) -> str:
        """Parse an HTML string and convert its body.

        Raises
        ------
        ConversionError
            If ``html`` is None
        DependencyError
            If the configured parser backend is not installed

        """
        if html is None:
            raise ConversionError("convert_string() requires an HTML string, got None")
        soup = parse_html(html, self.options.html_parser)
        return self.convert(soup.body or soup)

    def convert(self, node: PageElement) -> str:
        """Convert a document or element to Markdown.

        Parameters
        ----------
        node : PageElement
            A BeautifulSoup document, element or text node

        Returns
        -------
        str
            Markdown with surrounding whitespace removed, then passed through
            the after hooks

        Raises
        ------
        ConversionError
            If ``node`` is None or not a BeautifulSoup node

        """
        if node is None:
            raise ConversionError("convert() requires a document tree, got None")
        if not isinstance(node, PageElement):
            raise ConversionError(f"convert() requires a BeautifulSoup node, got {type(node).__name__}")

        document = _owner_document(node)
        for hook in self._before_hooks:
            hook(document)

        context = ConversionContext(options=self.options)
        headers: list[str] = []
        footers: list[str] = []
        try:
            markdown = self._process(node, context, headers, footers)
        except RecursionError:
            logger.warning("Document nesting too deep to convert; falling back to plain text")
            text = node.get_text() if isinstance(node, Tag) else str(node)
            markdown = escape_markdown(text) if self.options.escape_mode == "basic" else text

        markdown = self._attach_headers_and_footers(markdown, headers, footers)
        markdown = _trim_document(normalize_whitespace(markdown))

        for after_hook in self._after_hooks:
            markdown = after_hook(markdown)

        return markdown

    @staticmethod
    def _attach_headers_and_footers(markdown: str, headers: Sequence[str], footers: Sequence[str]) -> str:
        unique_footers = list(dict.fromkeys(footers))
        if headers:
            markdown = "\n".join(headers) + "\n\n" + markdown
        if unique_footers:
            markdown = markdown + "\n\n" + "\n".join(unique_footers)
        return markdown

    def _process(self, node: PageElement, context: ConversionContext, headers: list[str], footers: list[str]) -> str:
        if is_ignorable_string(node):
            return ""

        if is_text_node(node):
            return self._apply_rules(str(node), node, context, headers, footers, default=str(node))

        if not isinstance(node, Tag):
            return ""

        name = (node.name or "").lower()
        if name in self._remove:
            return ""
        if name in self._keep:
            return str(node)

        content = self._process_children(node, context, headers, footers)
        return self._apply_rules(content, node, context, headers, footers, default=content)

    def _process_children(
        self, node: Tag, context: ConversionContext, headers: list[str], footers: list[str]
    ) -> str:
        if node.name == "pre":
            context = context.enter_pre()

        item_contexts = {}
        if node.name in LIST_TAGS:
            for item in list_item_contexts(
                node,
                self.options.bullet_marker,
                parent_indent_width=context.parent_indent_width,
                depth=context.list_depth + 1,
            ):
                item_contexts[id(item.item)] = item

        parts = []
        for child in list(node.children):
            item = item_contexts.get(id(child))
            child_context = context.enter_list_item(item) if item is not None else context
            parts.append(self._process(child, child_context, headers, footers))
        return "".join(parts)

    def _apply_rules(
        self,
        content: str,
        node: PageElement,
        context: ConversionContext,
        headers: list[str],
        footers: list[str],
        default: str,
    ) -> str:
        for rule in self._rules.matching(node):
            result = rule.replacement(content, node, context)
            if result is None:
                logger.debug("Rule %r declined <%s>", rule.name, getattr(node, "name", None) or "#text")
                continue
            if isinstance(result, RuleResult):
                if result.header:
                    headers.append(result.header)
                if result.footer:
                    footers.append(result.footer)
                return result.markdown
            return result
        return default


def create_converter(
    options: ConverterOptions | None = None,
    plugins: Iterable[Plugin] | None = None,
) -> Converter:
    """Build a converter with the CommonMark rules and the given plugins.

    Parameters
    ----------
    options : ConverterOptions, optional
        Output options
    plugins : iterable of Plugin, optional
        Plugins applied after the CommonMark rules. Defaults to the GFM
        plugin; pass an empty sequence for plain CommonMark.

    Returns
    -------
    Converter
        Ready-to-use converter

    """
    if plugins is None:
        plugins = (gfm_plugin(),)
    return Converter(options).add_rules(*commonmark_rules).use(*plugins)


__all__ = ["Converter", "create_converter", "normalize_whitespace", "BeforeHook", "AfterHook"]

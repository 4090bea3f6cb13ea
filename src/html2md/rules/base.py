#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/rules/base.py
"""Rule contract, ordered rule sets and the per-run conversion context.

A rule pairs a filter with a replacement function. The filter is either a
sequence of tag names (``"#text"`` addresses text nodes) or a predicate
over nodes. The replacement receives the node's converted children text,
the node and the :class:`ConversionContext`, and returns Markdown text, a
:class:`RuleResult`, or ``None`` to decline so the next matching rule gets
a chance.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

from bs4 import Tag
from bs4.element import PageElement

from html2md.constants import TEXT_NODE
from html2md.options.converter import ConverterOptions
from html2md.utils.lists import ListItemContext
from html2md.utils.nodes import is_text_node

if TYPE_CHECKING:
    from html2md.converter import Converter

NodePredicate = Callable[[PageElement], bool]


@dataclass(frozen=True)
class RuleResult:
    """Markdown produced by a rule, with optional document header/footer text."""

    markdown: str
    header: str | None = None
    footer: str | None = None


Replacement = Callable[[str, PageElement, "ConversionContext"], Union[str, RuleResult, None]]


@dataclass(frozen=True)
class Rule:
    """A (filter, replacement) pair.

    Parameters
    ----------
    filter : sequence of str or callable
        Tag names the rule applies to, or a predicate over nodes
    replacement : callable
        ``replacement(content, node, context)`` returning Markdown, a
        ``RuleResult``, or ``None`` to decline
    name : str, optional
        Label used in debug logging

    """

    filter: Union[tuple[str, ...], NodePredicate]
    replacement: Replacement
    name: str = ""

    def __post_init__(self) -> None:
        """Normalise tag name filters to a lower-cased tuple."""
        if not callable(self.filter):
            tags = (self.filter,) if isinstance(self.filter, str) else self.filter
            object.__setattr__(self, "filter", tuple(tag.lower() for tag in tags))

    def matches(self, node: PageElement) -> bool:
        """Return True if this rule applies to ``node``."""
        if callable(self.filter):
            return bool(self.filter(node))
        if is_text_node(node):
            return TEXT_NODE in self.filter
        if isinstance(node, Tag) and node.name:
            return node.name.lower() in self.filter
        return False


class RuleSet:
    """An ordered sequence of rules; earlier rules take precedence."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = list(rules)

    def extend(self, rules: Iterable[Rule]) -> None:
        """Append rules after the existing ones."""
        self._rules.extend(rules)

    def prepend(self, rules: Iterable[Rule]) -> None:
        """Place rules before the existing ones, keeping their relative order."""
        self._rules[:0] = list(rules)

    def matching(self, node: PageElement) -> Iterator[Rule]:
        """Yield the rules whose filter matches ``node``, in order."""
        return (rule for rule in self._rules if rule.matches(node))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class LinkReferences:
    """Collects reference-style link definitions during one conversion run."""

    def __init__(self) -> None:
        self._indices: dict[tuple[str, str], int] = {}

    def add(self, href: str, title: str = "") -> int:
        """Register a link target and return its one-based reference number."""
        key = (href, title)
        if key not in self._indices:
            self._indices[key] = len(self._indices) + 1
        return self._indices[key]

    def __len__(self) -> int:
        return len(self._indices)


@dataclass(frozen=True)
class ConversionContext:
    """State threaded down the recursive conversion of one document.

    Parameters
    ----------
    options : ConverterOptions
        Active converter options
    list_item : ListItemContext or None
        Prefix/indent of the nearest enclosing list item
    list_depth : int
        Number of enclosing ``ul``/``ol`` elements
    in_pre : bool
        True inside preformatted content, where whitespace is kept verbatim
    references : LinkReferences
        Reference link numbering for the current run

    """

    options: ConverterOptions = field(default_factory=ConverterOptions)
    list_item: ListItemContext | None = None
    list_depth: int = 0
    in_pre: bool = False
    references: LinkReferences = field(default_factory=LinkReferences, compare=False)

    def enter_list_item(self, item: ListItemContext) -> ConversionContext:
        """Return a child context for the contents of a list item."""
        return replace(self, list_item=item, list_depth=item.depth)

    def enter_pre(self) -> ConversionContext:
        """Return a child context for preformatted content."""
        return self if self.in_pre else replace(self, in_pre=True)

    @property
    def parent_indent_width(self) -> int:
        """Indentation that a list opened at this point must start from."""
        return self.list_item.continuation_width if self.list_item is not None else 0


Plugin = Callable[["Converter"], Union[Sequence[Rule], Iterable[Rule], None]]


__all__ = [
    "NodePredicate",
    "Replacement",
    "Rule",
    "RuleResult",
    "RuleSet",
    "LinkReferences",
    "ConversionContext",
    "Plugin",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the noise-stripping HTML cleaner.

The selector and parameter lists are configuration data; the defaults come
from :mod:`html2md.constants` and can be replaced per call.
"""
# src/html2md/options/cleaner.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from html2md.constants import (
    CLEANER_EXCLUDE_SELECTORS,
    CLEANER_REMOVE_TAGS,
    DEFAULT_HTML_PARSER,
    TRACKING_QUERY_PARAMS,
    TRACKING_QUERY_PREFIXES,
    HtmlParser,
)
from html2md.options.base import CloneFrozenMixin, validate_choice


@dataclass(frozen=True)
class CleanerOptions(CloneFrozenMixin):
    """Options controlling :func:`html2md.cleaner.clean_html`.

    Parameters
    ----------
    exclude_selectors : tuple[str, ...]
        CSS selectors whose matches are removed with their content.
    remove_tags : tuple[str, ...]
        Tag names that are always removed with their content.
    tracking_params : frozenset[str]
        Query parameter names stripped from link targets.
    tracking_prefixes : tuple[str, ...]
        Query parameter name prefixes stripped from link targets.
    remove_hidden : bool, default True
        Remove elements hidden through attributes or inline styles.
    remove_empty : bool, default True
        Remove text-less containers that hold no media or tables.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup parser backend.

    """

    exclude_selectors: tuple[str, ...] = field(
        default=CLEANER_EXCLUDE_SELECTORS,
        metadata={"help": "CSS selectors for noise elements to remove"},
    )
    remove_tags: tuple[str, ...] = field(
        default=CLEANER_REMOVE_TAGS,
        metadata={"help": "Tags removed together with their content"},
    )
    tracking_params: frozenset[str] = field(
        default=TRACKING_QUERY_PARAMS,
        metadata={"help": "Query parameters stripped from links"},
    )
    tracking_prefixes: tuple[str, ...] = field(
        default=TRACKING_QUERY_PREFIXES,
        metadata={"help": "Query parameter prefixes stripped from links"},
    )
    remove_hidden: bool = field(
        default=True,
        metadata={"help": "Remove hidden elements", "cli_name": "no-remove-hidden"},
    )
    remove_empty: bool = field(
        default=True,
        metadata={"help": "Remove empty container elements", "cli_name": "no-remove-empty"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser to use", "choices": ["html.parser", "lxml", "html5lib"]},
    )

    def __post_init__(self) -> None:
        """Validate option values."""
        validate_choice("html_parser", self.html_parser, get_args(HtmlParser))

    def is_tracking_param(self, name: str) -> bool:
        """Return True when ``name`` is a tracking query parameter."""
        lowered = name.lower()
        return lowered in self.tracking_params or lowered.startswith(self.tracking_prefixes)

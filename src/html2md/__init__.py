"""html2md - rule-driven HTML to Markdown conversion.

html2md walks a BeautifulSoup tree and converts it to Markdown through an
ordered set of rules. Each rule pairs a filter (tag names or a predicate)
with a replacement function that receives the node's already-converted
children. The CommonMark rules cover the core constructs; plugins such as
the GFM plugin add tables, strikethrough, task lists and more.

Key Features
------------
- Pluggable, ordered rule set with declining rules
- Markdown escaping that keeps ordinary prose readable
- Correct indentation for nested and multi-line list items
- Code fences that never collide with backticks in the code
- GFM tables with alignment, captions and column spans
- Noise-stripping preprocessor (navigation, ads, tracking parameters)

Requirements
------------
- Python 3.10+
- beautifulsoup4 (lxml or html5lib optional as parser backends)

Examples
--------
Convert an HTML string in one call:

    >>> from html2md import html_to_markdown
    >>> html_to_markdown("<p>Hello <b>world</b></p>")
    'Hello **world**'

Build a converter with custom rules:

    >>> from html2md import Converter, Rule, commonmark_rules
    >>> shout = Rule(filter=("em",), replacement=lambda content, node, ctx: content.upper())
    >>> converter = Converter().add_rules(shout, *commonmark_rules)
    >>> converter.convert_string("<p>be <em>loud</em></p>")
    'be LOUD'

See Also
--------
html2md.rules : Rule contract and CommonMark rules
html2md.plugins : GFM and table plugins
html2md.cleaner : HTML preprocessing

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2md.api import html_to_markdown  # noqa: E402
from html2md.cleaner import clean_html  # noqa: E402
from html2md.converter import Converter, create_converter, normalize_whitespace  # noqa: E402
from html2md.exceptions import (  # noqa: E402
    ConversionError,
    DependencyError,
    Html2MdError,
    ValidationError,
)
from html2md.options import CleanerOptions, ConverterOptions  # noqa: E402
from html2md.plugins import gfm_plugin, table_plugin  # noqa: E402
from html2md.rules import (  # noqa: E402
    ConversionContext,
    Plugin,
    Rule,
    RuleResult,
    commonmark_rules,
    text_rule,
)

__all__ = [
    "__version__",
    "html_to_markdown",
    "clean_html",
    "Converter",
    "create_converter",
    "normalize_whitespace",
    # Rules and plugins
    "Rule",
    "RuleResult",
    "ConversionContext",
    "Plugin",
    "commonmark_rules",
    "text_rule",
    "gfm_plugin",
    "table_plugin",
    # Options
    "ConverterOptions",
    "CleanerOptions",
    # Exceptions
    "Html2MdError",
    "ValidationError",
    "ConversionError",
    "DependencyError",
]

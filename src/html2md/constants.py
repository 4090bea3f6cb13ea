#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2md library.

This module centralizes literal types, default option values, and the
tag/selector tables consulted by the converter and the cleaner.

Constants are organized by category:
1. Type Definitions - All Literal types
2. Markdown Formatting Defaults
3. Element Tables - tag groups used by rules and heuristics
4. Cleaner Configuration - noise selectors and tracking parameters
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EscapeMode = Literal["basic", "none"]
HeadingStyle = Literal["atx", "setext"]
BulletMarker = Literal["-", "*", "+"]
CodeFenceChar = Literal["`", "~"]
CodeBlockStyle = Literal["fenced", "indented"]
EmphasisDelimiter = Literal["_", "*"]
StrongDelimiter = Literal["**", "__"]
LinkStyle = Literal["inlined", "referenced"]
LinkReferenceStyle = Literal["full", "collapsed", "shortcut"]
HtmlParser = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Markdown Formatting Defaults
# =============================================================================

DEFAULT_ESCAPE_MODE: EscapeMode = "basic"
DEFAULT_HEADING_STYLE: HeadingStyle = "atx"
DEFAULT_BULLET_MARKER: BulletMarker = "-"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_BLOCK_STYLE: CodeBlockStyle = "fenced"
DEFAULT_HORIZONTAL_RULE = "---"
DEFAULT_EM_DELIMITER: EmphasisDelimiter = "_"
DEFAULT_STRONG_DELIMITER: StrongDelimiter = "**"
DEFAULT_LINK_STYLE: LinkStyle = "inlined"
DEFAULT_LINK_REFERENCE_STYLE: LinkReferenceStyle = "full"
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

MIN_CODE_FENCE_LENGTH = 3
INDENTED_CODE_PREFIX = "    "
HARD_LINE_BREAK = "  \n"

# Pseudo tag name under which text node rules are registered
TEXT_NODE = "#text"

# =============================================================================
# Element Tables
# =============================================================================

INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdo",
        "big",
        "br",
        "button",
        "cite",
        "code",
        "dfn",
        "em",
        "i",
        "img",
        "input",
        "kbd",
        "label",
        "map",
        "object",
        "output",
        "q",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "tt",
        "var",
    }
)

# Inline elements whose bundled rules pad their own token with spaces
SELF_PADDING_TAGS = frozenset(
    {"b", "strong", "em", "i", "code", "kbd", "samp", "tt", "del", "s", "strike", "mark", "sub", "sup"}
)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
LIST_TAGS = ("ul", "ol")

# Whitespace-only text directly inside these is layout noise, not content
STRUCTURAL_WHITESPACE_PARENTS = frozenset({"ul", "ol", "table", "thead", "tbody", "tfoot", "tr", "colgroup"})

# Elements in which a <br> cannot render as a hard line break
SINGLE_LINE_CONTEXTS = ("h1", "h2", "h3", "h4", "h5", "h6", "th", "td", "a")

# Elements with no renderable Markdown text value
DROPPED_ELEMENTS = ("noscript", "iframe", "embed", "object", "script", "style", "template")

COMMON_CODE_LANGUAGES = frozenset(
    {
        "javascript",
        "js",
        "typescript",
        "ts",
        "python",
        "py",
        "ruby",
        "rb",
        "java",
        "go",
        "rust",
        "c",
        "cpp",
        "csharp",
        "cs",
        "php",
        "swift",
        "kotlin",
        "scala",
        "bash",
        "sh",
        "shell",
        "zsh",
        "powershell",
        "ps1",
        "sql",
        "html",
        "css",
        "scss",
        "sass",
        "less",
        "json",
        "yaml",
        "yml",
        "xml",
        "markdown",
        "md",
        "plaintext",
        "text",
        "diff",
        "dockerfile",
    }
)

TABLE_ALIGNMENT_BORDERS = {
    "left": ":---",
    "center": ":---:",
    "right": "---:",
}
DEFAULT_TABLE_BORDER = "---"

# =============================================================================
# Cleaner Configuration
# =============================================================================

CLEANER_EXCLUDE_SELECTORS = (
    # Navigation
    "header",
    "footer",
    "nav",
    "aside",
    ".header",
    ".top",
    ".navbar",
    "#header",
    ".footer",
    ".bottom",
    "#footer",
    ".sidebar",
    ".side",
    ".aside",
    "#sidebar",
    ".menu",
    ".navigation",
    "#nav",
    ".breadcrumbs",
    "#breadcrumbs",
    # Modals and popups
    ".modal",
    ".popup",
    "#modal",
    ".overlay",
    ".cookie",
    "#cookie",
    ".consent",
    # Ads
    ".ad",
    ".ads",
    ".advert",
    "#ad",
    ".advertisement",
    ".sponsored",
    # Social and sharing
    ".social",
    ".social-media",
    ".social-links",
    "#social",
    ".share",
    "#share",
    ".sharing",
    # Language selectors
    ".lang-selector",
    ".language",
    "#language-selector",
    # Widgets
    ".widget",
    "#widget",
    ".newsletter",
    ".subscribe",
    ".comments",
    "#comments",
    ".related",
    ".recommended",
)

CLEANER_REMOVE_TAGS = ("script", "style", "noscript", "meta", "link", "svg", "canvas")

CLEANER_LANDMARK_SELECTOR = '[role="banner"], [role="navigation"], [role="complementary"], [role="contentinfo"]'

CLEANER_HIDDEN_SELECTOR = '[hidden], [aria-hidden="true"], [style*="display: none"], [style*="display:none"]'

CLEANER_EMPTY_CONTAINER_TAGS = ("div", "span", "p", "section", "article")

CLEANER_MEDIA_SELECTOR = "img, video, audio, iframe, table"

TRACKING_QUERY_PARAMS = frozenset(
    {
        "fbclid",
        "gclid",
        "msclkid",
        "dclid",
        "ref",
        "ref_src",
        "ref_url",
    }
)
TRACKING_QUERY_PREFIXES = ("utm_",)

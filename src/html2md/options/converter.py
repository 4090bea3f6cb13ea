#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML to Markdown converter.

The options record is handed to every rule's replacement function (through
the conversion context) and controls delimiters, markers and escaping.
"""
# src/html2md/options/converter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from html2md.constants import (
    DEFAULT_BULLET_MARKER,
    DEFAULT_CODE_BLOCK_STYLE,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_EM_DELIMITER,
    DEFAULT_ESCAPE_MODE,
    DEFAULT_HEADING_STYLE,
    DEFAULT_HORIZONTAL_RULE,
    DEFAULT_HTML_PARSER,
    DEFAULT_LINK_REFERENCE_STYLE,
    DEFAULT_LINK_STYLE,
    DEFAULT_STRONG_DELIMITER,
    BulletMarker,
    CodeBlockStyle,
    CodeFenceChar,
    EmphasisDelimiter,
    EscapeMode,
    HeadingStyle,
    HtmlParser,
    LinkReferenceStyle,
    LinkStyle,
    StrongDelimiter,
)
from html2md.exceptions import ValidationError
from html2md.options.base import CloneFrozenMixin, validate_choice


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    """Markdown output options for the rule-driven converter.

    Parameters
    ----------
    escape_mode : {"basic", "none"}, default "basic"
        Whether Markdown-significant characters in plain text are escaped.
    bullet_marker : {"-", "*", "+"}, default "-"
        Marker used for unordered list items.
    heading_style : {"atx", "setext"}, default "atx"
        ``#`` prefixed headings, or underlined headings for h1/h2.
    code_fence_char : {"`", "~"}, default "`"
        Character used to build code block fences.
    code_block_style : {"fenced", "indented"}, default "fenced"
        Fenced blocks, or four-space indented blocks.
    horizontal_rule : str, default "---"
        Text emitted for ``<hr>``.
    em_delimiter : {"_", "*"}, default "_"
        Delimiter for italic text.
    strong_delimiter : {"**", "__"}, default "**"
        Delimiter for bold text.
    link_style : {"inlined", "referenced"}, default "inlined"
        Inline ``[text](url)`` links, or reference links collected at the end.
    link_reference_style : {"full", "collapsed", "shortcut"}, default "full"
        Label style used when ``link_style`` is ``"referenced"``.
    base_url : str or None, default None
        Base URL used to make relative link and image targets absolute.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup parser used by ``Converter.convert_string``.

    """

    escape_mode: EscapeMode = field(
        default=DEFAULT_ESCAPE_MODE,
        metadata={"help": "Escape Markdown characters in text", "choices": ["basic", "none"]},
    )
    bullet_marker: BulletMarker = field(
        default=DEFAULT_BULLET_MARKER,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"]},
    )
    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={"help": "Heading style (atx uses #, setext underlines h1/h2)", "choices": ["atx", "setext"]},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Character used for code block fences", "choices": ["`", "~"]},
    )
    code_block_style: CodeBlockStyle = field(
        default=DEFAULT_CODE_BLOCK_STYLE,
        metadata={"help": "Code block style", "choices": ["fenced", "indented"]},
    )
    horizontal_rule: str = field(
        default=DEFAULT_HORIZONTAL_RULE,
        metadata={"help": "Text emitted for thematic breaks"},
    )
    em_delimiter: EmphasisDelimiter = field(
        default=DEFAULT_EM_DELIMITER,
        metadata={"help": "Delimiter for emphasis", "choices": ["_", "*"]},
    )
    strong_delimiter: StrongDelimiter = field(
        default=DEFAULT_STRONG_DELIMITER,
        metadata={"help": "Delimiter for strong emphasis", "choices": ["**", "__"]},
    )
    link_style: LinkStyle = field(
        default=DEFAULT_LINK_STYLE,
        metadata={"help": "Inline or reference-style links", "choices": ["inlined", "referenced"]},
    )
    link_reference_style: LinkReferenceStyle = field(
        default=DEFAULT_LINK_REFERENCE_STYLE,
        metadata={"help": "Reference label style", "choices": ["full", "collapsed", "shortcut"]},
    )
    base_url: str | None = field(
        default=None,
        metadata={"help": "Base URL for resolving relative hrefs and image sources"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser to use when converting strings",
            "choices": ["html.parser", "lxml", "html5lib"],
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field holds a value outside its allowed choices.

        """
        validate_choice("escape_mode", self.escape_mode, get_args(EscapeMode))
        validate_choice("bullet_marker", self.bullet_marker, get_args(BulletMarker))
        validate_choice("heading_style", self.heading_style, get_args(HeadingStyle))
        validate_choice("code_fence_char", self.code_fence_char, get_args(CodeFenceChar))
        validate_choice("code_block_style", self.code_block_style, get_args(CodeBlockStyle))
        validate_choice("em_delimiter", self.em_delimiter, get_args(EmphasisDelimiter))
        validate_choice("strong_delimiter", self.strong_delimiter, get_args(StrongDelimiter))
        validate_choice("link_style", self.link_style, get_args(LinkStyle))
        validate_choice("link_reference_style", self.link_reference_style, get_args(LinkReferenceStyle))
        validate_choice("html_parser", self.html_parser, get_args(HtmlParser))
        if not self.horizontal_rule.strip():
            raise ValidationError(
                "horizontal_rule must not be empty",
                parameter_name="horizontal_rule",
                parameter_value=self.horizontal_rule,
            )

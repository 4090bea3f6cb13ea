#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/api.py
"""One-call HTML to Markdown conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from html2md.cleaner import clean_html
from html2md.converter import create_converter
from html2md.exceptions import ConversionError
from html2md.options.cleaner import CleanerOptions
from html2md.options.converter import ConverterOptions
from html2md.rules.base import Plugin

logger = logging.getLogger(__name__)


def html_to_markdown(
    html: str,
    base_url: str | None = None,
    options: ConverterOptions | None = None,
    clean: bool = True,
    plugins: Iterable[Plugin] | None = None,
    cleaner_options: CleanerOptions | None = None,
) -> str:
    """Convert an HTML document to Markdown.

    The document is first run through :func:`~html2md.cleaner.clean_html`
    (unless ``clean`` is False) and then converted with the CommonMark rules
    plus the given plugins (GFM by default).

    Parameters
    ----------
    html : str
        HTML document or fragment
    base_url : str, optional
        Base URL for resolving relative links and image sources. Used for
        ``options.base_url`` when that is not set.
    options : ConverterOptions, optional
        Markdown output options
    clean : bool, default True
        Strip navigation, ads and other page noise before converting
    plugins : iterable of Plugin, optional
        Plugins applied after the CommonMark rules; defaults to GFM
    cleaner_options : CleanerOptions, optional
        Options for the cleaning pass

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    ConversionError
        If ``html`` is None
    DependencyError
        If a configured parser backend is not installed

    Examples
    --------
        >>> html_to_markdown('<nav>Home</nav><h1>Title</h1><p>Body <em>text</em></p>')
        '# Title\\n\\nBody _text_'

    """
    if html is None:
        raise ConversionError("html_to_markdown() requires an HTML string, got None")

    options = options or ConverterOptions()
    if base_url and options.base_url is None:
        options = options.create_updated(base_url=base_url)

    if clean:
        html = clean_html(html, base_url=base_url, options=cleaner_options)
        logger.debug("Cleaned HTML is %d characters", len(html))

    return create_converter(options, plugins).convert_string(html)


__all__ = ["html_to_markdown"]

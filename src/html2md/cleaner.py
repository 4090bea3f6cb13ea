#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/cleaner.py
"""Noise-stripping HTML preprocessor.

Runs before conversion and returns cleaned HTML: page chrome (navigation,
ads, cookie banners, hidden elements) is removed, responsive images are
collapsed to one ``src``, relative links are made absolute and tracking
query parameters are stripped. The selector and parameter lists live in
:class:`~html2md.options.CleanerOptions`.

"""

from __future__ import annotations

import logging
import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from html2md.constants import (
    CLEANER_EMPTY_CONTAINER_TAGS,
    CLEANER_HIDDEN_SELECTOR,
    CLEANER_LANDMARK_SELECTOR,
    CLEANER_MEDIA_SELECTOR,
)
from html2md.options.cleaner import CleanerOptions
from html2md.utils.nodes import get_attr, parse_html
from html2md.utils.spacing import get_absolute_url

logger = logging.getLogger(__name__)

_DESCRIPTOR = re.compile(r"^(\d+(?:\.\d+)?)([wx])$", re.IGNORECASE)


def _remove_all(soup: BeautifulSoup, selector: str) -> int:
    """Decompose every element matching ``selector``; return how many went."""
    try:
        matches = soup.select(selector)
    except SelectorSyntaxError as e:
        logger.debug("Skipping invalid cleaner selector %r: %s", selector, e)
        return 0

    removed = 0
    for element in matches:
        if element.decomposed:
            continue
        element.decompose()
        removed += 1
    return removed


def select_srcset_candidate(srcset: str, src: str | None = None) -> str | None:
    """Choose the best image URL from a ``srcset`` attribute.

    The candidate with the largest width (``w``) descriptor wins. When every
    candidate uses a density (``x``) descriptor, ``src`` takes part as a
    ``1x`` candidate and the highest density wins. Candidates without a
    descriptor count as ``1x``.

    Parameters
    ----------
    srcset : str
        Raw ``srcset`` attribute value
    src : str, optional
        The image's current ``src``

    Returns
    -------
    str or None
        Chosen URL, or None if ``srcset`` holds no candidates

    """
    widths: list[tuple[float, str]] = []
    densities: list[tuple[float, str]] = []

    for candidate in srcset.split(","):
        parts = candidate.split()
        if not parts:
            continue
        url = parts[0]
        descriptor = parts[1] if len(parts) > 1 else "1x"
        match = _DESCRIPTOR.match(descriptor)
        if match is None:
            logger.debug("Ignoring srcset descriptor %r for %s", descriptor, url)
            densities.append((1.0, url))
            continue
        value, unit = float(match.group(1)), match.group(2).lower()
        (widths if unit == "w" else densities).append((value, url))

    if widths:
        return max(widths, key=lambda pair: pair[0])[1]
    if src:
        densities.append((1.0, src))
    if not densities:
        return None
    return max(densities, key=lambda pair: pair[0])[1]


def strip_tracking_params(url: str, options: CleanerOptions | None = None) -> str:
    """Remove tracking query parameters from ``url``.

    URLs without tracking parameters are returned unchanged; relative URLs
    stay relative.

    Examples
    --------
        >>> strip_tracking_params("https://x.test/p?utm_source=a&id=1")
        'https://x.test/p?id=1'

    """
    options = options or CleanerOptions()
    try:
        parts = urlsplit(url)
    except ValueError as e:
        logger.debug("Leaving unparsable URL %r untouched: %s", url, e)
        return url

    if not parts.query:
        return url

    params = parse_qsl(parts.query, keep_blank_values=True)
    kept = [(name, value) for name, value in params if not options.is_tracking_param(name)]
    if len(kept) == len(params):
        return url
    return urlunsplit(parts._replace(query=urlencode(kept)))


def _collapse_srcset(soup: BeautifulSoup) -> None:
    for img in soup.select("img[srcset]"):
        chosen = select_srcset_candidate(get_attr(img, "srcset"), img.get("src"))
        if chosen:
            img["src"] = chosen
        del img["srcset"]


def _make_urls_absolute(soup: BeautifulSoup, base_url: str) -> None:
    for img in soup.select("img[src]"):
        img["src"] = get_absolute_url(get_attr(img, "src"), base_url)

    for link in soup.select("a[href]"):
        href = get_attr(link, "href")
        if href.startswith("#") or href.lower().startswith("javascript:"):
            continue
        link["href"] = get_absolute_url(href, base_url)


def _is_empty_container(element: Tag) -> bool:
    return not element.get_text().strip() and element.select_one(CLEANER_MEDIA_SELECTOR) is None


def _remove_empty_containers(soup: BeautifulSoup) -> None:
    # Innermost first, so a container emptied by its children is caught too
    for element in reversed(soup.find_all(list(CLEANER_EMPTY_CONTAINER_TAGS))):
        if element.decomposed:
            continue
        if _is_empty_container(element):
            element.decompose()


def clean_html(html: str, base_url: str | None = None, options: CleanerOptions | None = None) -> str:
    """Strip page noise from an HTML document and return the cleaned HTML.

    Parameters
    ----------
    html : str
        HTML document or fragment
    base_url : str, optional
        Base URL for making ``img`` sources and ``a`` targets absolute
    options : CleanerOptions, optional
        Selector lists and toggles; defaults are used when omitted

    Returns
    -------
    str
        Inner HTML of the cleaned document body

    Raises
    ------
    DependencyError
        If the configured parser backend is not installed

    Examples
    --------
        >>> clean_html('<nav>Menu</nav><p>Text</p>')
        '<p>Text</p>'

    """
    options = options or CleanerOptions()
    soup = parse_html(html, options.html_parser)

    for tag in options.remove_tags:
        _remove_all(soup, tag)
    if soup.head is not None:
        soup.head.decompose()

    removed = sum(_remove_all(soup, selector) for selector in options.exclude_selectors)
    removed += _remove_all(soup, CLEANER_LANDMARK_SELECTOR)
    if options.remove_hidden:
        removed += _remove_all(soup, CLEANER_HIDDEN_SELECTOR)
    logger.debug("Removed %d noise element(s)", removed)

    _collapse_srcset(soup)
    if base_url:
        _make_urls_absolute(soup, base_url)

    if options.remove_empty:
        _remove_empty_containers(soup)

    for link in soup.select("a[href]"):
        link["href"] = strip_tracking_params(get_attr(link, "href"), options)

    root = soup.body or soup
    return root.decode_contents()


__all__ = ["clean_html", "select_srcset_candidate", "strip_tracking_params"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_nodes.py
"""Tests for BeautifulSoup node helpers."""

from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup, FeatureNotFound

from html2md.exceptions import DependencyError
from html2md.utils.nodes import (
    closest,
    get_attr,
    is_first_element,
    is_ignorable_string,
    is_text_node,
    parent_name,
    parse_html,
)


@pytest.mark.unit
class TestNodeHelpers:
    def test_text_and_comment_nodes(self) -> None:
        soup = BeautifulSoup("<p>text<!-- comment --></p>", "html.parser")
        text, comment = soup.p.contents
        assert is_text_node(text)
        assert not is_ignorable_string(text)
        assert is_ignorable_string(comment)
        assert not is_text_node(comment)
        assert not is_text_node(soup.p)

    def test_parent_name(self) -> None:
        soup = BeautifulSoup("<DIV><span>x</span></DIV>", "html.parser")
        assert parent_name(soup.span) == "div"

    def test_closest_includes_node_itself(self) -> None:
        soup = BeautifulSoup("<li><p><b>x</b></p></li>", "html.parser")
        assert closest(soup.b, "li") is soup.li
        assert closest(soup.li, "li") is soup.li
        assert closest(soup.b, "table") is None

    def test_get_attr_joins_multi_valued(self) -> None:
        soup = BeautifulSoup('<code class="hljs language-go" id="c">x</code>', "html.parser")
        assert get_attr(soup.code, "class") == "hljs language-go"
        assert get_attr(soup.code, "id") == "c"
        assert get_attr(soup.code, "title", "none") == "none"

    def test_is_first_element_ignores_text(self) -> None:
        soup = BeautifulSoup("<tr> <td>a</td> <td>b</td></tr>", "html.parser")
        first, second = soup.find_all("td")
        assert is_first_element(first)
        assert not is_first_element(second)


@pytest.mark.unit
class TestParseHtml:
    def test_parses_with_default_parser(self) -> None:
        soup = parse_html("<p>x</p>")
        assert soup.p.get_text() == "x"

    def test_missing_parser_raises_dependency_error(self) -> None:
        with patch("html2md.utils.nodes.BeautifulSoup", side_effect=FeatureNotFound("nope")):
            with pytest.raises(DependencyError) as exc_info:
                parse_html("<p>x</p>", "lxml")
        assert exc_info.value.missing_packages == ["lxml"]
        assert isinstance(exc_info.value.original_error, FeatureNotFound)

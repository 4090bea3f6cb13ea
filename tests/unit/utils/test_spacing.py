#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_spacing.py
"""Tests for inline spacing heuristics and URL helpers."""

import pytest
from bs4 import BeautifulSoup

from html2md.utils.spacing import (
    add_space_if_necessary,
    delimiter_for_every_line,
    get_absolute_url,
    get_next_sibling_text,
    get_prev_sibling_text,
    is_inline_element,
    needs_spacing,
    trim_leading_spaces,
)


def _bold(html: str):
    return BeautifulSoup(html, "html.parser").find("b")


@pytest.mark.unit
class TestSiblingText:
    def test_text_and_element_siblings(self) -> None:
        node = _bold("<p><i>before</i><b>x</b> after</p>")
        assert get_prev_sibling_text(node) == "before"
        assert get_next_sibling_text(node) == " after"

    def test_comments_skipped(self) -> None:
        node = _bold("<p>word<!-- c --><b>x</b></p>")
        assert get_prev_sibling_text(node) == "word"

    def test_no_siblings(self) -> None:
        node = _bold("<p><b>x</b></p>")
        assert get_prev_sibling_text(node) == ""
        assert get_next_sibling_text(node) == ""


@pytest.mark.unit
class TestNeedsSpacing:
    """Test when inline tokens must be padded."""

    def test_glued_on_both_sides(self) -> None:
        spacing = needs_spacing(_bold("<p>hello<b>world</b>there</p>"))
        assert spacing.before and spacing.after

    def test_whitespace_neighbours(self) -> None:
        spacing = needs_spacing(_bold("<p>hello <b>world</b> there</p>"))
        assert not spacing.before and not spacing.after

    def test_punctuation_after(self) -> None:
        """Punctuation may follow a token directly."""
        spacing = needs_spacing(_bold("<p>a <b>b</b>, c</p>"))
        assert not spacing.after

    def test_no_trailing_space_before_self_padding_token(self) -> None:
        soup = BeautifulSoup("<p><b>a</b><i>b</i></p>", "html.parser")
        assert not needs_spacing(soup.find("b")).after
        assert needs_spacing(soup.find("i")).before

    def test_trailing_space_kept_before_plain_element(self) -> None:
        assert needs_spacing(_bold("<p><b>a</b><span>b</span></p>")).after

    def test_trailing_space_kept_when_own_text_ends_in_space(self) -> None:
        assert needs_spacing(_bold("<p><b>a </b><i>b</i></p>")).after

    def test_add_space_if_necessary(self) -> None:
        node = _bold("<p>hello<b>world</b>there</p>")
        assert add_space_if_necessary(node, "**world**") == " **world** "

    def test_add_space_to_empty_token(self) -> None:
        assert add_space_if_necessary(_bold("<p>a<b></b>b</p>"), "") == ""


@pytest.mark.unit
class TestTextHelpers:
    def test_is_inline_element(self) -> None:
        assert is_inline_element("span")
        assert is_inline_element("A")
        assert not is_inline_element("div")
        assert not is_inline_element(None)

    def test_trim_leading_spaces(self) -> None:
        assert trim_leading_spaces("  a\n\tb\nc") == "a\nb\nc"

    def test_delimiter_for_every_line(self) -> None:
        assert delimiter_for_every_line("one\n\n two ", "**") == "**one**\n\n**two**"


@pytest.mark.unit
class TestGetAbsoluteUrl:
    """Test relative URL resolution."""

    def test_relative_resolved(self) -> None:
        assert get_absolute_url("img/a.png", "https://x.test/docs/") == "https://x.test/docs/img/a.png"

    def test_root_relative(self) -> None:
        assert get_absolute_url("/a", "https://x.test/docs/page") == "https://x.test/a"

    @pytest.mark.parametrize(
        "url",
        ["https://other.test/a", "//cdn.test/a.js", "mailto:me@x.test", "data:image/png;base64,AAAA"],
    )
    def test_absolute_unchanged(self, url: str) -> None:
        assert get_absolute_url(url, "https://x.test/") == url

    def test_colon_in_query_is_relative(self) -> None:
        assert get_absolute_url("page?t=12:00", "https://x.test/") == "https://x.test/page?t=12:00"

    def test_without_base(self) -> None:
        assert get_absolute_url("a.png") == "a.png"
        assert get_absolute_url("", "https://x.test/") == ""

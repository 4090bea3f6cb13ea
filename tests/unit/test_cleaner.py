#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cleaner.py
"""Tests for the noise-stripping HTML cleaner."""

import pytest
from bs4 import BeautifulSoup

from html2md import CleanerOptions, clean_html
from html2md.cleaner import select_srcset_candidate, strip_tracking_params


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.mark.unit
class TestNoiseRemoval:
    """Test removal of page chrome and hidden content."""

    def test_navigation_removed(self) -> None:
        assert clean_html("<nav>Menu</nav><p>Text</p>") == "<p>Text</p>"

    def test_class_and_id_selectors(self) -> None:
        html = '<div class="ad">Buy</div><div id="sidebar">Links</div><p>Text</p>'
        assert clean_html(html) == "<p>Text</p>"

    def test_landmark_roles_removed(self) -> None:
        assert clean_html('<div role="navigation">x</div><p>Text</p>') == "<p>Text</p>"

    def test_always_removed_tags(self) -> None:
        html = "<script>alert(1)</script><style>p {}</style><svg><rect/></svg><p>Text</p>"
        assert clean_html(html) == "<p>Text</p>"

    def test_head_removed(self) -> None:
        html = "<html><head><title>t</title></head><body><p>Text</p></body></html>"
        assert clean_html(html) == "<p>Text</p>"

    @pytest.mark.parametrize(
        "hidden",
        [
            "<p hidden>secret</p>",
            '<p aria-hidden="true">secret</p>',
            '<p style="display:none">secret</p>',
            '<p style="color: red; display: none">secret</p>',
        ],
    )
    def test_hidden_elements_removed(self, hidden: str) -> None:
        assert clean_html(hidden + "<p>shown</p>") == "<p>shown</p>"

    def test_hidden_kept_when_disabled(self) -> None:
        result = clean_html("<p hidden>secret</p>", options=CleanerOptions(remove_hidden=False))
        assert "secret" in result

    def test_invalid_selector_skipped(self) -> None:
        options = CleanerOptions(exclude_selectors=("div[", ".ad"))
        assert clean_html('<div class="ad">x</div><p>Text</p>', options=options) == "<p>Text</p>"

    def test_custom_selectors_replace_defaults(self) -> None:
        options = CleanerOptions(exclude_selectors=(".promo",))
        result = clean_html('<nav>Menu</nav><p class="promo">Sale</p>', options=options)
        assert result == "<nav>Menu</nav>"


@pytest.mark.unit
class TestEmptyContainers:
    def test_empty_containers_removed(self) -> None:
        html = '<div><span> </span></div><section><img src="a.png"/></section><p>Text</p>'
        result = _soup(clean_html(html))
        assert result.find("div") is None
        assert result.find("section") is not None
        assert result.p.get_text() == "Text"

    def test_table_keeps_container(self) -> None:
        html = "<div><table><tr><td></td></tr></table></div>"
        assert _soup(clean_html(html)).find("table") is not None

    def test_kept_when_disabled(self) -> None:
        result = clean_html("<div></div><p>x</p>", options=CleanerOptions(remove_empty=False))
        assert result == "<div></div><p>x</p>"


@pytest.mark.unit
class TestSrcset:
    """Test responsive image collapsing."""

    def test_largest_width_wins(self) -> None:
        assert select_srcset_candidate("s.jpg 300w, l.jpg 1200w, m.jpg 600w", "orig.jpg") == "l.jpg"

    def test_density_includes_src(self) -> None:
        assert select_srcset_candidate("b.jpg 2x, c.jpg 1.5x", "a.jpg") == "b.jpg"
        assert select_srcset_candidate("b.jpg 0.5x", "a.jpg") == "a.jpg"

    def test_missing_descriptor_is_one_x(self) -> None:
        assert select_srcset_candidate("only.jpg") == "only.jpg"

    def test_empty(self) -> None:
        assert select_srcset_candidate("  ,  ") is None

    def test_clean_html_rewrites_src(self) -> None:
        html = '<img src="s.jpg" srcset="m.jpg 600w, l.jpg 1200w" alt="x">'
        img = _soup(clean_html(html)).img
        assert img["src"] == "l.jpg"
        assert not img.has_attr("srcset")


@pytest.mark.unit
class TestUrls:
    """Test URL rewriting and tracking parameter removal."""

    def test_tracking_params_stripped(self) -> None:
        html = '<a href="https://x.test/p?utm_source=news&id=1&fbclid=abc">x</a>'
        assert clean_html(html) == '<a href="https://x.test/p?id=1">x</a>'

    def test_relative_url_stays_relative(self) -> None:
        assert strip_tracking_params("/p?utm_medium=x&ref=y&page=2") == "/p?page=2"

    def test_untracked_url_unchanged(self) -> None:
        assert strip_tracking_params("/p?b=2&a=1") == "/p?b=2&a=1"
        assert strip_tracking_params("https://x.test/p") == "https://x.test/p"

    def test_blank_values_kept(self) -> None:
        assert strip_tracking_params("/p?flag=&gclid=1") == "/p?flag="

    def test_absolute_urls(self) -> None:
        html = (
            '<a href="page.html">a</a><a href="#s">b</a><a href="javascript:void(0)">c</a>'
            '<img src="i.png" alt="i">'
        )
        soup = _soup(clean_html(html, base_url="https://x.test/docs/"))
        hrefs = [a["href"] for a in soup.find_all("a")]
        assert hrefs == ["https://x.test/docs/page.html", "#s", "javascript:void(0)"]
        assert soup.img["src"] == "https://x.test/docs/i.png"

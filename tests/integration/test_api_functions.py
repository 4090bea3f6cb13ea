#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api_functions.py
"""Integration tests for the one-call conversion API."""

import pytest

from html2md import ConversionError, ConverterOptions, html_to_markdown

ARTICLE = """
<!DOCTYPE html>
<html>
<head><title>Post</title><script>track()</script></head>
<body>
  <nav><a href="/">Home</a></nav>
  <article>
    <h1>Release notes</h1>
    <p>Version <code>2.0</code> is <strong>out</strong>. Read the
       <a href="/blog/post?utm_source=feed&id=7">full post</a>.</p>
    <ul>
      <li><input type="checkbox" checked> Faster parser</li>
      <li><input type="checkbox"> Plugin docs</li>
    </ul>
    <pre><code class="language-bash">pip install html2md</code></pre>
    <table>
      <thead><tr><th>Setting</th><th align="right">Default</th></tr></thead>
      <tbody><tr><td>bullet</td><td>-</td></tr></tbody>
    </table>
  </article>
  <footer>Copyright</footer>
</body>
</html>
"""

EXPECTED = """# Release notes

Version `2.0` is **out**. Read the [full post](https://x.test/blog/post?id=7).

- [x] Faster parser
- [ ] Plugin docs

```bash
pip install html2md
```

| Setting | Default |
| --- | ---: |
| bullet | - |"""


@pytest.mark.integration
class TestHtmlToMarkdown:
    """End-to-end conversions through html_to_markdown."""

    def test_article(self) -> None:
        assert html_to_markdown(ARTICLE, base_url="https://x.test") == EXPECTED

    def test_without_cleaning_keeps_navigation(self) -> None:
        result = html_to_markdown(ARTICLE, base_url="https://x.test", clean=False)
        assert result.startswith("[Home](https://x.test/)")
        assert "Copyright" in result

    def test_plain_commonmark(self) -> None:
        result = html_to_markdown(ARTICLE, plugins=())
        assert "| Setting |" not in result
        assert "~~" not in result

    def test_ordered_list_start(self) -> None:
        assert html_to_markdown('<ol start="3"><li>a</li><li>b</li></ol>') == "3. a\n4. b"

    def test_task_list_item(self) -> None:
        assert html_to_markdown('<ul><li><input type="checkbox" checked> Done</li></ul>') == "- [x] Done"

    def test_inline_code_with_double_backticks(self) -> None:
        assert html_to_markdown("<p><code>a``b</code></p>") == "```a``b```"

    def test_explicit_base_url_option_wins(self) -> None:
        options = ConverterOptions(base_url="https://docs.test/")
        result = html_to_markdown('<a href="x.html">x</a>', options=options, clean=False, base_url="https://other.test/")
        assert result == "[x](https://docs.test/x.html)"

    def test_none_rejected(self) -> None:
        with pytest.raises(ConversionError):
            html_to_markdown(None)

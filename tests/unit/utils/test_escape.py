#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_escape.py
"""Tests for the Markdown escaping pipeline."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html2md.utils.escape import escape_markdown, escape_multi_line


@pytest.mark.unit
class TestEscapeMarkdown:
    """Test the ordered escape pipeline."""

    def test_plain_text_unchanged(self) -> None:
        """Ordinary prose passes through untouched."""
        assert escape_markdown("Hello, world. It's 3 o'clock.") == "Hello, world. It's 3 o'clock."

    def test_empty_string(self) -> None:
        assert escape_markdown("") == ""

    def test_emphasis_characters(self) -> None:
        """Asterisks, underscores, backticks and pipes are escaped everywhere."""
        assert escape_markdown("a*b_c`d|e") == "a\\*b\\_c\\`d\\|e"

    def test_square_brackets(self) -> None:
        assert escape_markdown("[not a link]") == "\\[not a link\\]"

    def test_heading_marker_at_line_start(self) -> None:
        assert escape_markdown("# Title") == "\\# Title"

    def test_hash_inside_line_unchanged(self) -> None:
        """Only a line-leading heading marker is escaped."""
        assert escape_markdown("issue #42") == "issue #42"

    def test_ordered_list_marker(self) -> None:
        assert escape_markdown("1. not a list") == "1\\. not a list"

    def test_ordered_list_marker_after_spaces(self) -> None:
        assert escape_markdown("  12. item") == "  12\\. item"

    def test_number_mid_line_unchanged(self) -> None:
        assert escape_markdown("version 1. two") == "version 1. two"

    def test_unordered_list_markers(self) -> None:
        assert escape_markdown("- item") == "\\- item"
        assert escape_markdown("+ item") == "\\+ item"

    def test_hyphen_mid_line_unchanged(self) -> None:
        assert escape_markdown("well - known") == "well - known"

    def test_blockquote_marker(self) -> None:
        assert escape_markdown("> quoted") == "\\> quoted"

    def test_backslash_before_character(self) -> None:
        """Backslashes are escaped first so they are not read as escapes."""
        assert escape_markdown("C:\\path") == "C:\\\\path"

    def test_trailing_backslash_unchanged(self) -> None:
        assert escape_markdown("end\\ here") == "end\\ here"

    def test_multiline_markers(self) -> None:
        """Line-start patterns apply to every line."""
        assert escape_markdown("a\n# b\n1. c") == "a\n\\# b\n1\\. c"

    def test_not_idempotent(self) -> None:
        """Escaping twice escapes the backslashes added by the first pass."""
        once = escape_markdown("*")
        assert once == "\\*"
        assert escape_markdown(once) == "\\\\\\*"


@pytest.mark.unit
class TestEscapeMultiLine:
    """Test newline collapsing for single-line contexts."""

    def test_collapses_newlines(self) -> None:
        assert escape_multi_line("a\nb\n\n\nc") == "a b c"

    def test_trims(self) -> None:
        assert escape_multi_line("\n  label  \n") == "label"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestEscapeProperties:
    """Property-based checks of the escape pipeline."""

    @given(st.text(alphabet="*_`|[]ab #.>-+1\n", max_size=60))
    def test_special_characters_always_preceded_by_backslash(self, text: str) -> None:
        """Every emphasis, code, pipe and bracket character ends up escaped."""
        escaped = escape_markdown(text)
        for index, char in enumerate(escaped):
            if char in "*_`|[]":
                assert index > 0 and escaped[index - 1] == "\\"

    @given(st.text(alphabet="abc XYZ,.;:!?'\"\n", max_size=60))
    def test_prose_without_markers_is_unchanged(self, text: str) -> None:
        """Text without Markdown syntax is never altered."""
        assert escape_markdown(text) == text

"""Tests for text_utils module."""

from define.utils.text_utils import clean_text, strip_markup


class TestCleanText:
    """Tests for clean_text function."""

    def test_collapses_whitespace(self):
        assert clean_text("  a\n  b\tc  ") == "a b c"

    def test_unescapes_entities(self):
        assert clean_text("salt &amp; pepper &quot;hot&quot;") == 'salt & pepper "hot"'

    def test_empty(self):
        assert clean_text("") == ""


class TestStripMarkup:
    """Tests for strip_markup function."""

    def test_formatting_tokens_removed(self):
        assert strip_markup("{bc}a {it}round{/it} {sx|ball||}") == "a round ball"

    def test_link_tokens_keep_display_word(self):
        assert strip_markup("{a_link|cat} and {d_link|measuring|measure:1}") == "cat and measuring"

    def test_quotes(self):
        assert strip_markup("{ldquo}hi{rdquo}") == '"hi"'

    def test_cross_reference_removed(self):
        assert strip_markup("{bc}a result {dx}compare {dxt|trial||}{/dx}") == "a result"

    def test_plain_text_unchanged(self):
        assert strip_markup("plain text") == "plain text"

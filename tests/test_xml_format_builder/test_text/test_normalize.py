"""Tests for whitespace normalization."""

import pytest

from xml_format_builder.text import normalize_space


class TestNormalizeSpace:
    """Test suite for normalize_space."""

    @pytest.mark.parametrize("text,expected", [
        ("a \n  b", "a b"),
        ("a\r\n\tb", "a b"),
        ("one two", "one two"),
        ("  lead", " lead"),
        ("trail \n", "trail "),
        ("\n\n", " "),
    ])
    def test_collapses_whitespace_runs(self, text: str, expected: str) -> None:
        """Test every whitespace run becomes a single space."""
        assert normalize_space(text) == expected

    def test_empty_and_none(self) -> None:
        """Test empty input."""
        assert normalize_space("") == ""
        assert normalize_space(None) == ""

    def test_preserves_non_whitespace(self) -> None:
        """Test markup characters and order are kept."""
        assert normalize_space("<x>\n&amp;\n</x>") == "<x> &amp; </x>"

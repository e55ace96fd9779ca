"""Tests for text_processor.tokenizer module."""

from __future__ import annotations

from text_processor.tokenizer import tokenize


class TestTokenize:
    """Tests for tokenize function."""

    def test_basic_extraction(self) -> None:
        """Test basic word extraction."""
        assert tokenize("Hello world") == ["hello", "world"]

    def test_lower_cases_words(self) -> None:
        """Test that words are folded to lower case."""
        assert tokenize("Hello WORLD HeLLo") == ["hello", "world", "hello"]

    def test_various_separators(self) -> None:
        """Test that any non-letter splits words."""
        text = "a_text*with#various|separator,characters!and.a-duplicate"
        assert tokenize(text) == [
            "a",
            "text",
            "with",
            "various",
            "separator",
            "characters",
            "and",
            "a",
            "duplicate",
        ]

    def test_digits_are_separators(self) -> None:
        """Test that digits are never part of a word."""
        assert tokenize("abc123def 456") == ["abc", "def"]

    def test_empty_string(self) -> None:
        """Test tokenizing an empty string."""
        assert tokenize("") == []

    def test_only_separators(self) -> None:
        """Test tokenizing a string without letters."""
        assert tokenize("!@#$%^&*() 123 __") == []

    def test_no_empty_tokens(self) -> None:
        """Test that leading, trailing and repeated separators add no words."""
        result = tokenize("  ,,hello--  world!! ")
        assert result == ["hello", "world"]
        assert "" not in result

    def test_non_ascii_letters_are_separators(self) -> None:
        """Test that non-ASCII letters split words and are dropped."""
        assert tokenize("zażółć gęślą") == ["za", "g", "l"]

    def test_non_ascii_does_not_fold_into_ascii(self) -> None:
        """Test that characters lower-casing to ASCII are not words."""
        # U+0130 and U+212A lower-case to "i" + combining dot and "k"
        assert tokenize("\u0130 \u212a ok") == ["ok"]

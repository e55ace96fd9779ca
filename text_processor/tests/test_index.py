"""Tests for text_processor.index module."""

from __future__ import annotations

from collections import Counter

from text_processor.index import WordFrequency, build_index, sort_index


class TestBuildIndex:
    """Tests for build_index function."""

    def test_counts_tokens(self) -> None:
        """Test counting repeated tokens."""
        index = build_index(["the", "sun", "the"])
        assert index == Counter({"the": 2, "sun": 1})

    def test_exact_equality(self) -> None:
        """Test that tokens are not normalized any further."""
        index = build_index(["Hello", "hello"])
        assert index["Hello"] == 1
        assert index["hello"] == 1

    def test_empty_tokens(self) -> None:
        """Test that no tokens give an empty index."""
        assert len(build_index([])) == 0


class TestSortIndex:
    """Tests for sort_index function."""

    def test_frequency_descending(self) -> None:
        """Test that higher frequencies come first."""
        index: Counter[str] = Counter({"b": 1, "a": 3, "c": 2})
        assert [entry.word for entry in sort_index(index)] == ["a", "c", "b"]

    def test_alphabetical_tie_break(self) -> None:
        """Test that equal frequencies are ordered alphabetically."""
        index = build_index(["sun", "shines", "over", "lake"])
        assert [entry.word for entry in sort_index(index)] == [
            "lake",
            "over",
            "shines",
            "sun",
        ]

    def test_ignores_insertion_order(self) -> None:
        """Test that ordering does not depend on first occurrence."""
        first = sort_index(build_index(["zeta", "alpha", "zeta", "alpha"]))
        second = sort_index(build_index(["alpha", "zeta", "alpha", "zeta"]))
        assert first == second == [("alpha", 2), ("zeta", 2)]

    def test_returns_word_frequency(self) -> None:
        """Test that entries are WordFrequency tuples."""
        result = sort_index(Counter({"word": 2}))
        assert result == [WordFrequency(word="word", frequency=2)]
        assert isinstance(result[0], WordFrequency)

    def test_empty_index(self) -> None:
        """Test sorting an empty index."""
        assert sort_index(Counter()) == []

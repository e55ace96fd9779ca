"""Word frequency index built from a token sequence."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable


class WordFrequency(NamedTuple):
    """A word and the number of times it occurs."""

    word: str
    frequency: int


def build_index(tokens: Iterable[str]) -> Counter[str]:
    """Count how often each distinct token occurs.

    Args:
        tokens: Words as produced by the tokenizer.

    Returns:
        Counter mapping each distinct token to its frequency.
    """
    return Counter(tokens)


def sort_index(index: Counter[str]) -> list[WordFrequency]:
    """Order index entries by descending frequency, then alphabetically.

    Args:
        index: Word frequency index.

    Returns:
        All entries of the index as WordFrequency tuples.
    """
    # Counter.most_common keeps insertion order between ties, so sort explicitly
    entries = sorted(index.items(), key=lambda item: (-item[1], item[0]))
    return [WordFrequency(word, frequency) for word, frequency in entries]

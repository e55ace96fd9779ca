"""Word frequency queries over a text.

Frequency is case-insensitive. Words consist of the characters a-z and A-Z;
any other character separates words. Each query tokenizes the text and builds
a fresh index, so no state is shared between calls.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from text_processor.errors import InvalidCountError, InvalidWordError
from text_processor.index import WordFrequency, build_index, sort_index
from text_processor.tokenizer import tokenize

_logger = logging.getLogger(__name__)

_VALID_WORD = re.compile(r"[a-zA-Z]*")


def _guard_word_is_valid(word: str) -> None:
    if not _VALID_WORD.fullmatch(word):
        raise InvalidWordError(word)


def _guard_count_is_positive(n: int) -> None:
    if n < 1:
        raise InvalidCountError.not_positive()


def _guard_count_at_most_index_size(n: int, index_size: int) -> None:
    if n > index_size:
        raise InvalidCountError.too_high(n, index_size)


def highest_frequency(text: str) -> int:
    """Calculate the highest word frequency in a text.

    Args:
        text: The input text.

    Returns:
        The highest frequency of any word, or 0 if the text has no words.
    """
    index = build_index(tokenize(text))
    _logger.debug("Built index of %d unique words", len(index))
    return max(index.values(), default=0)


def frequency_for_word(text: str, word: str) -> int:
    """Calculate the frequency of a specified word in a text.

    The word is compared as given against the lower-case words of the text,
    so pass it in lower case to get a meaningful count.

    Args:
        text: The input text.
        word: Word to count, only characters a-z and A-Z.

    Returns:
        Number of occurrences of the word in the text.

    Raises:
        InvalidWordError: If the word contains a non-alphabetical character.
    """
    _guard_word_is_valid(word)

    words = tokenize(text)
    frequency = words.count(word)
    _logger.debug("Found %r %d times in %d words", word, frequency, len(words))
    return frequency


def most_frequent_n_words(text: str, n: int) -> list[WordFrequency]:
    """Calculate the n most frequent words in a text.

    Args:
        text: The input text.
        n: Number of words to return, between 1 and the number of unique
            words in the text.

    Returns:
        The n most frequent words (lower case) with their frequencies, sorted
        by descending frequency and then alphabetically.

    Raises:
        InvalidCountError: If n is not positive or exceeds the number of
            unique words.
    """
    _guard_count_is_positive(n)

    index = build_index(tokenize(text))
    _guard_count_at_most_index_size(n, len(index))

    _logger.debug("Selecting top %d of %d unique words", n, len(index))
    return sort_index(index)[:n]


class WordFrequencyAnalyzer(Protocol):
    """Anything that answers the three word frequency queries."""

    def calculate_highest_frequency(self, text: str) -> int: ...

    def calculate_frequency_for_word(self, text: str, word: str) -> int: ...

    def calculate_most_frequent_n_words(
        self, text: str, n: int
    ) -> list[WordFrequency]: ...


class TextAnalyzer:
    """Stateless WordFrequencyAnalyzer backed by the module-level queries."""

    def calculate_highest_frequency(self, text: str) -> int:
        return highest_frequency(text)

    def calculate_frequency_for_word(self, text: str, word: str) -> int:
        return frequency_for_word(text, word)

    def calculate_most_frequent_n_words(
        self, text: str, n: int
    ) -> list[WordFrequency]:
        return most_frequent_n_words(text, n)

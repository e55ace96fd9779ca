"""Text processor package - word frequency statistics over plain text.

This package provides:
1. Tokenization of text into lower-case ASCII words (tokenizer module)
2. Building and ordering word frequency indexes (index module)
3. Highest frequency, single word frequency and top-N queries (analyzer module)

Example usage:
    from text_processor import highest_frequency, most_frequent_n_words

    highest_frequency("The sun shines over the lake")  # 2
    most_frequent_n_words("The sun shines over the lake", 2)
    # [WordFrequency(word='the', frequency=2), WordFrequency(word='lake', frequency=1)]
"""

from __future__ import annotations

from text_processor.analyzer import (
    TextAnalyzer,
    WordFrequencyAnalyzer,
    frequency_for_word,
    highest_frequency,
    most_frequent_n_words,
)
from text_processor.errors import (
    InvalidCountError,
    InvalidWordError,
    TextAnalyzerError,
)
from text_processor.index import WordFrequency

__all__ = [
    "InvalidCountError",
    "InvalidWordError",
    "TextAnalyzer",
    "TextAnalyzerError",
    "WordFrequency",
    "WordFrequencyAnalyzer",
    "frequency_for_word",
    "highest_frequency",
    "most_frequent_n_words",
]

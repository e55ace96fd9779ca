"""Errors raised for invalid query input."""

from __future__ import annotations


class TextAnalyzerError(ValueError):
    """Base class for rejected analyzer input."""


class InvalidWordError(TextAnalyzerError):
    """The query word contains characters other than a-z, A-Z."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(
            f"Input word '{word}' is invalid. "
            "Can only contain alphabetical characters a-z, A-Z."
        )


class InvalidCountError(TextAnalyzerError):
    """The requested number of words is not positive or exceeds the unique words."""

    @classmethod
    def not_positive(cls) -> InvalidCountError:
        return cls("Input integer should be positive.")

    @classmethod
    def too_high(cls, n: int, unique_words: int) -> InvalidCountError:
        noun = "words" if unique_words > 1 else "word"
        return cls(
            f"Input integer {n} is too high. "
            f"Input text contains {unique_words} unique {noun}."
        )

"""Split text into lower-case words made of ASCII letters."""

from __future__ import annotations

import re

# Anything outside a-z, A-Z separates words, including digits and underscores.
_WORD_PATTERN = re.compile(r"[a-zA-Z]+")


def tokenize(text: str) -> list[str]:
    """Extract words from text.

    Words are maximal runs of the characters a-z and A-Z, returned in lower
    case in the order they appear. Every other character is a separator, so
    the result never contains an empty string.

    Args:
        text: The input text to tokenize.

    Returns:
        List of lower-case words found in the text.
    """
    # Fold per match so non-ASCII characters can never lower-case into a-z
    return [word.lower() for word in _WORD_PATTERN.findall(text)]

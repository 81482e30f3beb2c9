"""
String Utility Functions for prettyslug

This module provides the small, regex-free string helpers the slug pipeline
is built from.
"""

import string
from typing import Iterable

_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def join_words(text: str, separator: str) -> str:
    """
    Split `text` on runs of whitespace and rejoin the words with `separator`.

    Any Unicode whitespace counts, and leading/trailing whitespace produces no
    empty words, so `"  a \\t b "` joined with `"-"` is `"a-b"`.
    """
    return separator.join(text.split())


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; every other character is left as is."""
    return text.translate(_ASCII_LOWER_TABLE)


def trim_edges(text: str, tokens: Iterable[str]) -> str:
    """
    Strip leading and trailing occurrences of any of `tokens`.

    Stripping repeats until the text neither starts nor ends with a token, so
    mixed runs such as `"-_-"` are removed completely. Empty tokens are ignored.

    Args:
        text: The string to trim.
        tokens: Strings to remove from both ends.

    Returns:
        The trimmed string.
    """
    tokens = [token for token in tokens if token]
    if not tokens:
        return text

    start, end = 0, len(text)
    trimming = True
    while trimming and start < end:
        trimming = False
        for token in tokens:
            if text.startswith(token, start, end):
                start += len(token)
                trimming = True
                break

    trimming = True
    while trimming and start < end:
        trimming = False
        for token in tokens:
            if text.endswith(token, start, end):
                end -= len(token)
                trimming = True
                break

    return text[start:end]

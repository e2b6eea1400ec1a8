"""Character classes behind every word and WORD boundary."""

from __future__ import annotations

import string
from enum import Enum


class CharClass(Enum):
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    REGULAR = "regular"


def is_keyword_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def is_blank(char: str) -> bool:
    return char in string.whitespace


def classify(char: str) -> CharClass:
    if char.isspace() or is_blank(char):
        return CharClass.WHITESPACE
    if not is_keyword_char(char):
        return CharClass.PUNCTUATION
    return CharClass.REGULAR


def classify_big(char: str) -> CharClass:
    """Like :func:`classify` but punctuation folds into regular (WORD rules)."""

    cls = classify(char)
    if cls is CharClass.PUNCTUATION:
        return CharClass.REGULAR
    return cls


__all__ = ["CharClass", "classify", "classify_big", "is_blank", "is_keyword_char"]

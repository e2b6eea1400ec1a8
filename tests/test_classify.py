from __future__ import annotations

import pytest

from modal_engine.command import CharClass, classify
from modal_engine.command.classify import classify_big


@pytest.mark.parametrize(
    "char", [" ", "\t", "\n", "\r", "\x0b", "\x0c", "\u00a0", "\u2003"]
)
def test_whitespace_covers_ascii_and_unicode(char: str) -> None:
    assert classify(char) is CharClass.WHITESPACE


@pytest.mark.parametrize("char", ["a", "Z", "0", "_", "é", "ß"])
def test_keyword_characters_are_regular(char: str) -> None:
    assert classify(char) is CharClass.REGULAR


@pytest.mark.parametrize("char", ["+", "#", ".", "(", "-", "$"])
def test_other_characters_are_punctuation(char: str) -> None:
    assert classify(char) is CharClass.PUNCTUATION


def test_big_word_classes_fold_punctuation() -> None:
    assert classify_big("#") is CharClass.REGULAR
    assert classify_big("w") is CharClass.REGULAR
    assert classify_big("\u00a0") is CharClass.WHITESPACE

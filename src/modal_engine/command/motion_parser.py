"""Motion grammar: ``count? ('i'|'a')? selector``."""

from __future__ import annotations

from typing import Dict, Optional

from .errors import IncompleteCommand, UnknownCommand
from .models import (
    BigWord,
    Char,
    Direction,
    EndOfBigWord,
    EndOfLine,
    EndOfWord,
    Line,
    Motion,
    NextChar,
    RepeatNextChar,
    StartOfLine,
    TextObject,
    TextObjectMod,
    WholeLine,
    Word,
)
from .scanner import KeyStream, take_count

FORWARD = Direction.FORWARD
BACKWARD = Direction.BACKWARD

SIMPLE_SELECTORS: Dict[str, TextObject] = {
    "h": Char(BACKWARD),
    "l": Char(FORWARD),
    "j": Line(FORWARD),
    "k": Line(BACKWARD),
    "w": Word(FORWARD),
    "b": Word(BACKWARD),
    "W": BigWord(FORWARD),
    "B": BigWord(BACKWARD),
    "e": EndOfWord(FORWARD),
    "E": EndOfBigWord(FORWARD),
    "^": StartOfLine(),
    "$": EndOfLine(),
    ";": RepeatNextChar(opposite=True),
}

G_SELECTORS: Dict[str, TextObject] = {
    "e": EndOfWord(BACKWARD),
    "E": EndOfBigWord(BACKWARD),
}

# selector -> (place_before, direction)
FIND_SELECTORS: Dict[str, tuple[bool, Direction]] = {
    "f": (False, FORWARD),
    "F": (False, BACKWARD),
    "t": (True, FORWARD),
    "T": (True, BACKWARD),
}

MODIFIERS: Dict[str, TextObjectMod] = {
    "i": TextObjectMod.INNER_OBJECT,
    "a": TextObjectMod.AN_OBJECT,
}


def parse_motion(stream: KeyStream, opchar: Optional[str], raw: str) -> Motion:
    """Consume one motion from ``stream``.

    ``opchar`` is the operator character already consumed by the command
    parser (if any); seeing it again selects :class:`WholeLine` (``dd``,
    ``yy``). ``raw`` is the whole pending string, reported by
    :class:`UnknownCommand`.
    """

    count = take_count(stream)
    modifier = TextObjectMod.NONE
    peeked = stream.peek()
    if peeked in MODIFIERS:
        modifier = MODIFIERS[peeked]
        stream.next()

    selector = stream.peek()
    if selector is None:
        raise IncompleteCommand(raw)

    text_object: TextObject
    if selector in SIMPLE_SELECTORS:
        text_object = SIMPLE_SELECTORS[selector]
    elif selector == "g":
        stream.next()
        follow = stream.peek()
        if follow is None:
            raise IncompleteCommand(raw)
        if follow not in G_SELECTORS:
            raise UnknownCommand(raw)
        text_object = G_SELECTORS[follow]
    elif selector in FIND_SELECTORS:
        stream.next()
        target = stream.peek()
        if target is None:
            raise IncompleteCommand(raw)
        place_before, direction = FIND_SELECTORS[selector]
        text_object = NextChar(target, place_before, direction)
    elif opchar is not None and selector == opchar:
        text_object = WholeLine()
    else:
        raise UnknownCommand(raw)

    stream.next()
    return Motion(
        count=1 if count is None else count,
        object=text_object,
        modifier=modifier,
    )


__all__ = ["parse_motion", "SIMPLE_SELECTORS", "FIND_SELECTORS"]

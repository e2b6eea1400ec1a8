"""Value types produced by the keystroke grammar.

Every type here is an immutable description. None of them hold a buffer
reference; the resolver pairs a :class:`Motion` with a text view later.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

DEFAULT_REGISTER = '"'


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1

    def reversed(self) -> "Direction":
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        return Direction.FORWARD


class ModeTag(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    VISUAL = "visual"


# -- text objects -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Char:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Word:
    """``w``/``b``: word made of keyword characters or of punctuation."""

    direction: Direction


@dataclass(frozen=True, slots=True)
class BigWord:
    """``W``/``B``: whitespace-delimited WORD."""

    direction: Direction


@dataclass(frozen=True, slots=True)
class EndOfWord:
    direction: Direction


@dataclass(frozen=True, slots=True)
class EndOfBigWord:
    direction: Direction


@dataclass(frozen=True, slots=True)
class NextChar:
    """``f``/``F``/``t``/``T`` search for ``c`` on the given side."""

    c: str
    place_before: bool
    direction: Direction


@dataclass(frozen=True, slots=True)
class RepeatNextChar:
    opposite: bool


@dataclass(frozen=True, slots=True)
class WholeLine:
    pass


@dataclass(frozen=True, slots=True)
class Line:
    direction: Direction


@dataclass(frozen=True, slots=True)
class StartOfLine:
    pass


@dataclass(frozen=True, slots=True)
class EndOfLine:
    pass


@dataclass(frozen=True, slots=True)
class Paragraph:
    pass


TextObject = Union[
    Char,
    Word,
    BigWord,
    EndOfWord,
    EndOfBigWord,
    NextChar,
    RepeatNextChar,
    WholeLine,
    Line,
    StartOfLine,
    EndOfLine,
    Paragraph,
]


class TextObjectMod(Enum):
    NONE = "none"
    AN_OBJECT = "an"
    INNER_OBJECT = "inner"


@dataclass(frozen=True, slots=True)
class Motion:
    """``count`` applications of ``object``, each starting where the last ended."""

    count: int
    object: TextObject
    modifier: TextObjectMod = TextObjectMod.NONE

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("motion count cannot be negative")

    def repeated(self, factor: int) -> "Motion":
        return Motion(self.count * factor, self.object, self.modifier)


# -- operators --------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Repeat:
    pass


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class Change:
    pass


@dataclass(frozen=True, slots=True)
class Yank:
    pass


@dataclass(frozen=True, slots=True)
class Put:
    pass


@dataclass(frozen=True, slots=True)
class Indent:
    direction: Direction


@dataclass(frozen=True, slots=True)
class MoveAndEnterMode:
    mode: ModeTag


@dataclass(frozen=True, slots=True)
class NewLineAndEnterMode:
    direction: Direction
    mode: ModeTag


@dataclass(frozen=True, slots=True)
class ReplaceChar:
    char: str


Operator = Union[
    Repeat,
    Undo,
    Delete,
    Change,
    Yank,
    Put,
    Indent,
    MoveAndEnterMode,
    NewLineAndEnterMode,
    ReplaceChar,
]


# -- commands ---------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Move:
    motion: Motion


@dataclass(frozen=True, slots=True)
class Edit:
    op: Operator
    op_count: int
    mo: Motion
    target_register: str = DEFAULT_REGISTER


@dataclass(frozen=True, slots=True)
class ChangeMode:
    mode: ModeTag


Command = Union[Move, Edit, ChangeMode]


__all__ = [
    "DEFAULT_REGISTER",
    "Direction",
    "ModeTag",
    "Char",
    "Word",
    "BigWord",
    "EndOfWord",
    "EndOfBigWord",
    "NextChar",
    "RepeatNextChar",
    "WholeLine",
    "Line",
    "StartOfLine",
    "EndOfLine",
    "Paragraph",
    "TextObject",
    "TextObjectMod",
    "Motion",
    "Repeat",
    "Undo",
    "Delete",
    "Change",
    "Yank",
    "Put",
    "Indent",
    "MoveAndEnterMode",
    "NewLineAndEnterMode",
    "ReplaceChar",
    "Operator",
    "Move",
    "Edit",
    "ChangeMode",
    "Command",
]

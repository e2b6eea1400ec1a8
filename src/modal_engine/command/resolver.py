"""Turns a :class:`Motion` plus a cursor into a character-index range.

Each text object has a single-step rule ``(view, index) -> index``. A motion
applies its rule ``count`` times, feeding every step the previous end.
Index arithmetic saturates at ``0`` and ``len(view)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

from modal_engine.buffer.view import CharPredicate, TextQuery
from modal_engine.runtime import telemetry

from .classify import CharClass, classify, classify_big, is_keyword_char
from .errors import UnsupportedMotion
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
    Paragraph,
    RepeatNextChar,
    StartOfLine,
    TextObject,
    TextObjectMod,
    WholeLine,
    Word,
)

Classifier = Callable[[str], CharClass]


@dataclass(frozen=True, slots=True)
class TextRange:
    """``start`` is the cursor the motion began at; ``end`` may be smaller."""

    start: int
    end: int

    @property
    def reversed(self) -> bool:
        return self.end < self.start

    def normalized(self) -> "TextRange":
        if self.reversed:
            return TextRange(self.end, self.start)
        return self

    def __len__(self) -> int:
        return abs(self.end - self.start)


class TextCursor:
    """An index plus a scan direction over a :class:`TextQuery`.

    The index stays within ``0..len(view)``; ``advance`` reports ``False``
    instead of stepping outside that window.
    """

    __slots__ = ("view", "index", "direction")

    def __init__(
        self, view: TextQuery, index: int, direction: Direction = Direction.FORWARD
    ) -> None:
        self.view = view
        self.index = index
        self.direction = direction

    @property
    def char(self) -> Optional[str]:
        return self.view.char_at(self.index)

    def peek(self) -> Optional[str]:
        target = self.index + self.direction.step
        if target < 0:
            return None
        return self.view.char_at(target)

    def advance(self) -> bool:
        target = self.index + self.direction.step
        if target < 0 or target > len(self.view):
            return False
        self.index = target
        return True

    def skip(self, pred: CharPredicate) -> None:
        """Step while the character under the cursor satisfies ``pred``."""

        char = self.char
        while char is not None and pred(char) and self.advance():
            char = self.char

    def skip_ahead(self, pred: CharPredicate) -> None:
        """Step while the *next* character satisfies ``pred``."""

        char = self.peek()
        while char is not None and pred(char) and self.advance():
            char = self.peek()


def _is_space(char: str) -> bool:
    return classify(char) is CharClass.WHITESPACE


def _is_class(classifier: Classifier, cls: CharClass) -> CharPredicate:
    return lambda char: classifier(char) is cls


# -- single-step rules ------------------------------------------------------


def _char(view: TextQuery, index: int, obj: Char) -> int:
    target = index + obj.direction.step
    return max(0, min(target, len(view)))


def _line(view: TextQuery, index: int, obj: Line) -> int:
    if obj.direction is Direction.FORWARD:
        if view.index_of("\n", index) is None:
            return index
        line_start = view.next_line_index(index)
    else:
        line_start = view.last_line_index(index)
    newline = view.index_of("\n", line_start)
    line_end = len(view) if newline is None else newline
    return line_start + min(view.current_column(), line_end - line_start)


def _start_of_line(view: TextQuery, index: int, obj: StartOfLine) -> int:
    cursor = TextCursor(view, view.current_start_of_line(index))
    cursor.skip(lambda char: char != "\n" and _is_space(char))
    return cursor.index


def _end_of_line(view: TextQuery, index: int, obj: EndOfLine) -> int:
    if index >= len(view):
        return index
    return max(view.next_line_index(index) - 1, 0)


def _word_forward(view: TextQuery, index: int) -> int:
    char = view.char_at(index)
    if char is None:
        return len(view)
    if _is_space(char):
        found = view.index_of_pred(lambda c: not _is_space(c), index)
        return len(view) if found is None else found
    if is_keyword_char(char):
        found = view.index_of_pred(lambda c: not is_keyword_char(c), index)
    else:
        found = view.index_of_pred(
            lambda c: _is_space(c) or is_keyword_char(c), index + 1
        )
    landing = len(view) if found is None else found
    landed = view.char_at(landing)
    if landed is not None and _is_space(landed):
        after = view.index_of_pred(lambda c: not _is_space(c), landing)
        landing = len(view) if after is None else after
    return landing


def _word_backward(view: TextQuery, index: int, classifier: Classifier) -> int:
    if index <= 0:
        return 0
    cursor = TextCursor(view, index - 1, Direction.BACKWARD)
    cursor.skip(_is_space)
    char = cursor.char
    if char is None:
        return cursor.index
    cursor.skip_ahead(_is_class(classifier, classifier(char)))
    return cursor.index


def _word(view: TextQuery, index: int, obj: Word) -> int:
    if obj.direction is Direction.FORWARD:
        return _word_forward(view, index)
    return _word_backward(view, index, classify)


def _big_word(view: TextQuery, index: int, obj: BigWord) -> int:
    if obj.direction is Direction.BACKWARD:
        return _word_backward(view, index, classify_big)
    blank = view.dir_index_of(_is_space, index, Direction.FORWARD)
    if blank is None:
        return len(view)
    after = view.index_of_pred(lambda c: not _is_space(c), blank)
    return len(view) if after is None else after


def _end_of_run_forward(view: TextQuery, index: int, classifier: Classifier) -> int:
    if index >= len(view):
        return index
    cursor = TextCursor(view, index)
    starting = classifier(cursor.char or " ")
    cursor.advance()
    following = cursor.char
    if (
        starting is not CharClass.WHITESPACE
        and following is not None
        and classifier(following) is starting
    ):
        cursor.skip(_is_class(classifier, starting))
    else:
        cursor.skip(_is_class(classifier, CharClass.WHITESPACE))
        landed = cursor.char
        if landed is not None:
            cursor.skip(_is_class(classifier, classifier(landed)))
    return max(cursor.index - 1, 0)


def _end_of_run_backward(view: TextQuery, index: int, classifier: Classifier) -> int:
    if index <= 0:
        return 0
    cursor = TextCursor(view, index, Direction.BACKWARD)
    char = cursor.char
    starting = CharClass.WHITESPACE if char is None else classifier(char)
    cursor.advance()
    if starting is not CharClass.WHITESPACE:
        cursor.skip(_is_class(classifier, starting))
    cursor.skip(_is_class(classifier, CharClass.WHITESPACE))
    return cursor.index


def _end_of_word(view: TextQuery, index: int, obj: EndOfWord) -> int:
    if obj.direction is Direction.FORWARD:
        return _end_of_run_forward(view, index, classify)
    return _end_of_run_backward(view, index, classify)


def _end_of_big_word(view: TextQuery, index: int, obj: EndOfBigWord) -> int:
    if obj.direction is Direction.FORWARD:
        return _end_of_run_forward(view, index, classify_big)
    return _end_of_run_backward(view, index, classify_big)


def _next_char(view: TextQuery, index: int, obj: NextChar) -> int:
    if obj.direction is Direction.FORWARD:
        found = view.index_of(obj.c, index + 1)
    else:
        found = view.last_index_of_pred(lambda c: c == obj.c, index)
    if found is None:
        return index
    if obj.place_before:
        return found - obj.direction.step
    return found


def _unsupported(view: TextQuery, index: int, obj: TextObject) -> int:
    raise UnsupportedMotion(obj)


STEP_RULES: Dict[Type, Callable[[TextQuery, int, TextObject], int]] = {
    Char: _char,
    Line: _line,
    StartOfLine: _start_of_line,
    EndOfLine: _end_of_line,
    Word: _word,
    BigWord: _big_word,
    EndOfWord: _end_of_word,
    EndOfBigWord: _end_of_big_word,
    NextChar: _next_char,
    WholeLine: _unsupported,
    Paragraph: _unsupported,
    RepeatNextChar: _unsupported,
}


def step(view: TextQuery, index: int, obj: TextObject) -> int:
    """Apply the single-step rule of ``obj`` once, starting at ``index``."""

    rule = STEP_RULES.get(type(obj))
    if rule is None:
        raise UnsupportedMotion(obj)
    return rule(view, index, obj)


def resolve(motion: Motion, view: TextQuery) -> TextRange:
    """Range covered by ``motion`` starting at ``view.cursor_index``."""

    start = view.cursor_index
    with telemetry.span(
        "motion::resolve",
        logger_name="modal_engine.command",
        component="resolver",
        metadata={
            "object": type(motion.object).__name__,
            "count": motion.count,
            "cursor": start,
        },
    ) as handle:
        if motion.modifier is not TextObjectMod.NONE:
            raise UnsupportedMotion(motion.modifier)
        end = start
        for _ in range(motion.count):
            nxt = step(view, end, motion.object)
            if nxt == end:
                break
            end = nxt
        handle.add_metadata("end", end)
    return TextRange(start, end)


__all__ = ["TextCursor", "TextRange", "STEP_RULES", "resolve", "step"]

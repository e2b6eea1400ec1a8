"""Linear text buffer implementing :class:`~modal_engine.buffer.view.TextQuery`."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from modal_engine.command.models import Direction

from .validation import BufferValidationError, clamp_index, ensure_index
from .view import CharPredicate


class TextBuffer:
    """Text held as one string with a character-index cursor.

    Lines are separated by ``\\n``; the cursor may sit anywhere in
    ``0..len(text)`` (the end position is where appends happen).
    """

    def __init__(
        self, text: str = "", *, name: str = "default", cursor_index: int = 0
    ) -> None:
        self.name = name
        self._text = text
        self.version = 0
        self._cursor_index = ensure_index(len(text), cursor_index)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(text, name=name)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor_index(self) -> int:
        return self._cursor_index

    @cursor_index.setter
    def cursor_index(self, index: int) -> None:
        self._cursor_index = ensure_index(len(self._text), index)

    def snapshot(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "text": self._text,
            "cursor": self._cursor_index,
            "version": self.version,
        }

    def __len__(self) -> int:
        return len(self._text)

    def char_at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._text):
            return self._text[index]
        return None

    def slice(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        return self._text[clamp_index(len(self), start) : clamp_index(len(self), end)]

    # -- searching ----------------------------------------------------------

    def index_of(self, char: str, start: int) -> Optional[int]:
        found = self._text.find(char, max(start, 0))
        return None if found < 0 else found

    def last_index_of(self, char: str, start: int) -> Optional[int]:
        if start <= 0:
            return None
        found = self._text.rfind(char, 0, start)
        return None if found < 0 else found

    def index_of_pred(self, pred: CharPredicate, start: int) -> Optional[int]:
        for index in range(max(start, 0), len(self._text)):
            if pred(self._text[index]):
                return index
        return None

    def last_index_of_pred(self, pred: CharPredicate, start: int) -> Optional[int]:
        for index in range(min(start, len(self._text)) - 1, -1, -1):
            if pred(self._text[index]):
                return index
        return None

    def dir_index_of(
        self, pred: CharPredicate, start: int, direction: Direction
    ) -> Optional[int]:
        if direction is Direction.FORWARD:
            return self.index_of_pred(pred, start)
        return self.last_index_of_pred(pred, start)

    def chars(
        self, start: int, direction: Direction = Direction.FORWARD
    ) -> Iterator[str]:
        """Yield characters lazily from ``start`` (inclusive) in ``direction``."""

        index = start
        while 0 <= index < len(self._text):
            yield self._text[index]
            index += direction.step

    # -- lines --------------------------------------------------------------

    def current_start_of_line(self, index: int) -> int:
        newline = self.last_index_of("\n", index)
        return 0 if newline is None else newline + 1

    def next_line_index(self, index: int) -> int:
        newline = self.index_of("\n", index)
        return len(self._text) if newline is None else newline + 1

    def last_line_index(self, index: int) -> int:
        start = self.current_start_of_line(index)
        if start == 0:
            return 0
        return self.current_start_of_line(start - 1)

    def line_length(self, line_start: int) -> int:
        newline = self.index_of("\n", line_start)
        end = len(self._text) if newline is None else newline
        return max(end - line_start, 0)

    def current_column(self) -> int:
        return self.column_for_index(self._cursor_index)

    def line_for_index(self, index: int) -> int:
        return self._text.count("\n", 0, clamp_index(len(self), index))

    def column_for_index(self, index: int) -> int:
        return index - self.current_start_of_line(index)

    # -- mutation (editor layer only; the grammar core never calls these) ---

    def insert(self, index: int, text: str) -> int:
        ensure_index(len(self._text), index)
        self._text = self._text[:index] + text + self._text[index:]
        self.version += 1
        return index + len(text)

    def delete(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        ensure_index(len(self._text), start)
        ensure_index(len(self._text), end)
        removed = self._text[start:end]
        if removed:
            self._text = self._text[:start] + self._text[end:]
            self.version += 1
            if self._cursor_index > len(self._text):
                self._cursor_index = len(self._text)
        return removed

    def __repr__(self) -> str:
        return (
            f"TextBuffer(name={self.name!r}, len={len(self)}, "
            f"cursor_index={self._cursor_index}, version={self.version})"
        )


__all__ = ["TextBuffer", "BufferValidationError"]

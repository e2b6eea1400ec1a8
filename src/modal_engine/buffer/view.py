"""The read-only text capability the motion resolver consumes."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol

from modal_engine.command.models import Direction

CharPredicate = Callable[[str], bool]


class TextQuery(Protocol):
    """Anything that can answer character and line questions by linear index.

    Storage strategy is up to the implementer; :class:`TextBuffer` keeps a
    plain string.
    """

    cursor_index: int

    def __len__(self) -> int:
        ...

    def char_at(self, index: int) -> Optional[str]:
        ...

    def next_line_index(self, index: int) -> int:
        """Start of the line after the one holding ``index`` (``len`` if none)."""
        ...

    def last_line_index(self, index: int) -> int:
        """Start of the line before the one holding ``index`` (0 on line one)."""
        ...

    def current_start_of_line(self, index: int) -> int:
        ...

    def current_column(self) -> int:
        ...

    def index_of(self, char: str, start: int) -> Optional[int]:
        ...

    def index_of_pred(self, pred: CharPredicate, start: int) -> Optional[int]:
        """First index ``>= start`` whose character satisfies ``pred``."""
        ...

    def last_index_of_pred(self, pred: CharPredicate, start: int) -> Optional[int]:
        """Last index ``< start`` whose character satisfies ``pred``."""
        ...

    def dir_index_of(
        self, pred: CharPredicate, start: int, direction: Direction
    ) -> Optional[int]:
        ...

    def chars(
        self, start: int, direction: Direction = Direction.FORWARD
    ) -> Iterator[str]:
        ...


__all__ = ["CharPredicate", "TextQuery"]

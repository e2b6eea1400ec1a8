"""Forward cursor over pending keystrokes plus the count scanner."""

from __future__ import annotations

from typing import Optional


class KeyStream:
    """Peekable, forward-only view of a keystroke string."""

    __slots__ = ("source", "position")

    def __init__(self, source: str, position: int = 0) -> None:
        self.source = source
        self.position = position

    def peek(self) -> Optional[str]:
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def next(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self.position += 1
        return char

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.source)

    @property
    def remaining(self) -> str:
        return self.source[self.position :]


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


def take_count(stream: KeyStream) -> Optional[int]:
    """Consume a run of decimal digits; ``None`` (and nothing consumed) otherwise."""

    char = stream.peek()
    if not _is_digit(char):
        return None
    value = 0
    while char is not None and _is_digit(char):
        value = value * 10 + int(char)
        stream.next()
        char = stream.peek()
    return value


__all__ = ["KeyStream", "take_count"]

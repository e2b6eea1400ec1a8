"""Validation helpers shared across buffer services."""

from __future__ import annotations


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-range index."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


def ensure_index(length: int, index: int, *, allow_end: bool = True) -> int:
    upper = length if allow_end else length - 1
    if index < 0 or index > upper:
        raise BufferValidationError(
            f"Index {index} out of range 0..{upper}", index=index
        )
    return index


def clamp_index(length: int, index: int) -> int:
    return max(0, min(index, length))


__all__ = ["BufferValidationError", "ensure_index", "clamp_index"]

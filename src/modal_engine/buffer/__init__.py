"""Text buffer, text-query capability and register storage."""

from .registers import RegisterBank, RegisterValue
from .text import TextBuffer
from .validation import BufferValidationError, clamp_index, ensure_index
from .view import CharPredicate, TextQuery

__all__ = [
    "TextBuffer",
    "TextQuery",
    "CharPredicate",
    "RegisterBank",
    "RegisterValue",
    "BufferValidationError",
    "ensure_index",
    "clamp_index",
]

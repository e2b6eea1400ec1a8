from __future__ import annotations

import pytest

from modal_engine.buffer import (
    BufferValidationError,
    RegisterBank,
    RegisterValue,
    TextBuffer,
    clamp_index,
    ensure_index,
)
from modal_engine.command import Direction

TEXT = "abc\ndef\nghi"


def make_buffer(cursor: int = 0) -> TextBuffer:
    return TextBuffer(TEXT, name="scratch", cursor_index=cursor)


def test_char_at_is_none_outside_text() -> None:
    buffer = make_buffer()

    assert buffer.char_at(0) == "a"
    assert buffer.char_at(len(buffer)) is None
    assert buffer.char_at(-1) is None


def test_line_helpers() -> None:
    buffer = make_buffer()

    assert buffer.current_start_of_line(5) == 4
    assert buffer.current_start_of_line(4) == 4
    assert buffer.current_start_of_line(3) == 0
    assert buffer.next_line_index(4) == 8
    assert buffer.next_line_index(9) == len(TEXT)
    assert buffer.last_line_index(9) == 4
    assert buffer.last_line_index(2) == 0
    assert buffer.line_length(4) == 3


def test_column_and_line_numbers() -> None:
    buffer = make_buffer(cursor=9)

    assert buffer.current_column() == 1
    assert buffer.line_for_index(9) == 2
    assert buffer.column_for_index(5) == 1


def test_searches() -> None:
    buffer = make_buffer()

    assert buffer.index_of("\n", 4) == 7
    assert buffer.index_of("z", 0) is None
    assert buffer.index_of_pred(str.isupper, 0) is None
    assert buffer.index_of_pred(lambda c: c == "d", 4) == 4
    assert buffer.last_index_of_pred(lambda c: c == "d", 4) is None
    assert buffer.last_index_of_pred(lambda c: c == "d", 5) == 4
    assert buffer.dir_index_of(lambda c: c == "\n", 5, Direction.BACKWARD) == 3
    assert buffer.dir_index_of(lambda c: c == "\n", 5, Direction.FORWARD) == 7


def test_chars_walk_lazily_in_both_directions() -> None:
    buffer = make_buffer()

    assert "".join(buffer.chars(4)) == "def\nghi"
    assert "".join(buffer.chars(2, Direction.BACKWARD)) == "cba"
    assert list(buffer.chars(len(buffer))) == []


def test_insert_and_delete_bump_version() -> None:
    buffer = make_buffer()

    assert buffer.insert(3, "!") == 4
    assert buffer.text.startswith("abc!\n")
    assert buffer.delete(4, 3) == "!"
    assert buffer.text == TEXT
    assert buffer.version == 2
    assert buffer.delete(2, 2) == ""
    assert buffer.version == 2


def test_delete_clamps_cursor() -> None:
    buffer = make_buffer(cursor=len(TEXT))

    buffer.delete(0, 4)

    assert buffer.cursor_index == len(buffer)


def test_cursor_is_validated() -> None:
    buffer = make_buffer()

    buffer.cursor_index = len(TEXT)
    with pytest.raises(BufferValidationError) as excinfo:
        buffer.cursor_index = len(TEXT) + 1
    assert excinfo.value.index == len(TEXT) + 1


def test_slice_and_snapshot() -> None:
    buffer = make_buffer(cursor=2)

    assert buffer.slice(6, 4) == "de"
    assert buffer.snapshot() == {
        "name": "scratch",
        "text": TEXT,
        "cursor": 2,
        "version": 0,
    }


def test_validation_helpers() -> None:
    assert ensure_index(3, 3) == 3
    with pytest.raises(BufferValidationError):
        ensure_index(3, 3, allow_end=False)
    assert clamp_index(3, -2) == 0
    assert clamp_index(3, 9) == 3


def test_register_writes_mirror_unnamed() -> None:
    bank = RegisterBank()

    bank.yank_to("a", "hello")

    assert bank.get("a") == RegisterValue("hello")
    assert bank.get('"') == RegisterValue("hello")
    assert bank.get("z") == RegisterValue("")


def test_uppercase_register_appends() -> None:
    bank = RegisterBank()
    bank.yank_to("a", "foo", linewise=True)

    bank.yank_to("A", "bar")

    assert bank.get("a") == RegisterValue("foobar", linewise=True)
    assert bank.names() == ('"', "a")


def test_register_names_are_single_characters() -> None:
    with pytest.raises(ValueError):
        RegisterBank().get("ab")

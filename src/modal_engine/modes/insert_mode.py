"""Insert mode: typed characters go straight into the buffer."""

from __future__ import annotations

from .base_mode import KeyInput, ModeResult
from .editor_state import EditorState
from .states import InsertState


def handle_insert_key(
    state: InsertState, key: KeyInput, editor: EditorState
) -> ModeResult:
    buffer = editor.buffer
    if key.is_escape:
        return ModeResult(consumed=True, switch_to="normal", status="insert_exit")

    if key.is_backspace:
        cursor = buffer.cursor_index
        if cursor == 0:
            return ModeResult(consumed=True, status="noop")
        buffer.delete(cursor - 1, cursor)
        buffer.cursor_index = cursor - 1
        state.inserted = max(0, state.inserted - 1)
        return ModeResult(consumed=True, status="deleted")

    text = "\n" if key.is_enter else key.char
    if text is None:
        return ModeResult(consumed=False, status="ignored")

    buffer.cursor_index = buffer.insert(buffer.cursor_index, text)
    state.inserted += len(text)
    return ModeResult(consumed=True, status="inserted")


__all__ = ["handle_insert_key"]

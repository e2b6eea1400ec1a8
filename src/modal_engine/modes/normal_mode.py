"""Normal mode: accumulate keystrokes until they parse into a command."""

from __future__ import annotations

from modal_engine.command import (
    CommandError,
    Edit,
    IncompleteCommand,
    ModeTag,
    execute,
    parse_command,
    plan_edit,
)

from .base_mode import KeyInput, ModeResult
from .editor_state import EditorState
from .states import NormalState


def handle_normal_key(
    state: NormalState, key: KeyInput, editor: EditorState
) -> ModeResult:
    if key.is_escape:
        state.pending = ""
        return ModeResult(consumed=True, status="cleared")

    char = key.char
    if char is None:
        return ModeResult(consumed=False, status="ignored")

    state.pending += char
    try:
        command = parse_command(state.pending)
    except IncompleteCommand:
        return ModeResult(consumed=True, status="pending", message=state.pending)
    except CommandError:
        state.pending = ""
        raise

    state.pending = ""
    if isinstance(command, Edit):
        editor.bus.emit("operator.plan", plan_edit(command, editor.buffer))

    next_mode = execute(command, editor.buffer)
    name = type(command).__name__
    editor.bus.emit("cursor.moved", editor.buffer.cursor_index)
    if next_mode is None or next_mode is ModeTag.NORMAL:
        return ModeResult(consumed=True, status="command", message=name)
    return ModeResult(
        consumed=True, switch_to=next_mode.value, status="command", message=name
    )


__all__ = ["handle_normal_key"]

"""Command-line mode (``:``) with a small in-line editor."""

from __future__ import annotations

from .base_mode import KeyInput, ModeResult
from .editor_state import EditorState
from .states import CommandState


def handle_command_key(
    state: CommandState, key: KeyInput, editor: EditorState
) -> ModeResult:
    if key.is_escape:
        editor.bus.emit("command.cancel", state.text)
        return ModeResult(consumed=True, switch_to="normal", status="command_cancel")

    if key.is_enter:
        # actions.command imports this package.
        from modal_engine.actions.command import run_line_command

        text = state.text
        editor.bus.emit("command.submit", text)
        return run_line_command(editor, text)

    if key.is_backspace:
        if state.cursor > 0:
            state.text = state.text[: state.cursor - 1] + state.text[state.cursor :]
            state.cursor -= 1
        editor.bus.emit("command.update", state.text)
        return ModeResult(consumed=True, status="command_edit", message=state.text)

    if key.key == "LEFT":
        state.cursor = max(0, state.cursor - 1)
        return ModeResult(consumed=True, status="command_cursor")
    if key.key == "RIGHT":
        state.cursor = min(len(state.text), state.cursor + 1)
        return ModeResult(consumed=True, status="command_cursor")

    char = key.char
    if char is None:
        return ModeResult(consumed=False, status="ignored")
    state.text = state.text[: state.cursor] + char + state.text[state.cursor :]
    state.cursor += 1
    editor.bus.emit("command.update", state.text)
    return ModeResult(consumed=True, status="command_edit", message=state.text)


__all__ = ["handle_command_key"]

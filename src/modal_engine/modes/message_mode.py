"""Message focus: browse posted messages and trigger their numbered actions."""

from __future__ import annotations

from .base_mode import KeyInput, ModeResult
from .editor_state import EditorState
from .states import UserMessageState


def handle_message_key(
    state: UserMessageState, key: KeyInput, editor: EditorState
) -> ModeResult:
    if key.is_escape or not editor.messages:
        return ModeResult(consumed=True, switch_to="normal", status="messages_exit")

    state.selected = min(state.selected, len(editor.messages) - 1)
    char = key.char
    if char == "j":
        state.selected = min(state.selected + 1, len(editor.messages) - 1)
        return ModeResult(consumed=True, status="message_select")
    if char == "k":
        state.selected = max(state.selected - 1, 0)
        return ModeResult(consumed=True, status="message_select")
    if char == "x":
        editor.dismiss(state.selected)
        return _after_removal(state, editor, "message_dismiss")
    if char is not None and char in "123456789":
        if not editor.choose_action(state.selected, int(char) - 1):
            return ModeResult(consumed=False, status="no_action")
        return _after_removal(state, editor, "message_action")
    return ModeResult(consumed=False, status="ignored")


def _after_removal(
    state: UserMessageState, editor: EditorState, status: str
) -> ModeResult:
    if not editor.messages:
        return ModeResult(consumed=True, switch_to="normal", status=status)
    state.selected = min(state.selected, len(editor.messages) - 1)
    return ModeResult(consumed=True, status=status)


__all__ = ["handle_message_key"]

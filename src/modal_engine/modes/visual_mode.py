"""Visual mode: motions extend a selection, operators act on it."""

from __future__ import annotations

from modal_engine.command import (
    DEFAULT_REGISTER,
    Change,
    ChangeMode,
    CommandError,
    EditPlan,
    IncompleteCommand,
    ModeTag,
    Move,
    TextRange,
    execute,
    parse_command,
    plan_edit,
)
from modal_engine.command.parser import OPERATORS

from .base_mode import KeyInput, ModeResult
from .editor_state import EditorState
from .states import VisualState

VISUAL_OPERATORS = frozenset("dcy<>")


def selection(state: VisualState, editor: EditorState) -> TextRange:
    """The selected span, inclusive of the character under the cursor."""

    cursor = editor.buffer.cursor_index
    start, end = sorted((state.anchor, cursor))
    return TextRange(start, min(end + 1, len(editor.buffer)))


def handle_visual_key(
    state: VisualState, key: KeyInput, editor: EditorState
) -> ModeResult:
    if key.is_escape:
        state.pending = ""
        return ModeResult(consumed=True, switch_to="normal", status="visual_exit")

    char = key.char
    if char is None:
        return ModeResult(consumed=False, status="ignored")

    if not state.pending and char in VISUAL_OPERATORS:
        op = OPERATORS[char]
        plan = EditPlan(
            operator=op,
            range=selection(state, editor),
            reversed=editor.buffer.cursor_index < state.anchor,
            register=DEFAULT_REGISTER,
            op_count=1,
            motion_count=1,
        )
        editor.bus.emit("operator.plan", plan)
        target = "insert" if isinstance(op, Change) else "normal"
        return ModeResult(
            consumed=True,
            switch_to=target,
            status="operator",
            message="operator_plan",
        )

    state.pending += char
    try:
        command = parse_command(state.pending)
    except IncompleteCommand:
        return ModeResult(consumed=True, status="pending", message=state.pending)
    except CommandError:
        state.pending = ""
        raise
    state.pending = ""

    if isinstance(command, Move):
        execute(command, editor.buffer)
        editor.bus.emit("visual.selection", selection(state, editor))
        return ModeResult(consumed=True, status="selection")
    if isinstance(command, ChangeMode):
        # ``v`` again leaves visual mode.
        target_mode = command.mode
        if target_mode is ModeTag.VISUAL:
            target_mode = ModeTag.NORMAL
        return ModeResult(consumed=True, switch_to=target_mode.value, status="mode")

    editor.bus.emit("operator.plan", plan_edit(command, editor.buffer))
    next_mode = execute(command, editor.buffer)
    target = next_mode.value if next_mode is not None else "normal"
    return ModeResult(consumed=True, switch_to=target, status="command")


__all__ = ["VISUAL_OPERATORS", "handle_visual_key", "selection"]

from __future__ import annotations

from typing import List, Tuple

from modal_engine.buffer import TextBuffer
from modal_engine.command import (
    Delete,
    EditPlan,
    NewLineAndEnterMode,
    TextRange,
)
from modal_engine.modes import (
    EditorState,
    InsertState,
    KeyInput,
    ModeBus,
    ModeManager,
    ModeResult,
    NormalState,
    UserMessage,
    UserMessageKind,
    VisualState,
)

NAMED = {"ESC", "ENTER", "BACKSPACE", "LEFT", "RIGHT"}


def make_manager(text: str = "one two three", cursor: int = 0) -> ModeManager:
    editor = EditorState(buffer=TextBuffer(text, cursor_index=cursor))
    return ModeManager(editor)


def record(manager: ModeManager, *events: str) -> List[Tuple[str, object]]:
    seen: List[Tuple[str, object]] = []
    for event in events:
        manager.editor.bus.subscribe(
            event, lambda payload, name=event: seen.append((name, payload))
        )
    return seen


def press(manager: ModeManager, *keys: str) -> ModeResult:
    result = ModeResult(consumed=False)
    for key in keys:
        if key in NAMED:
            result = manager.handle_key(KeyInput(key=key))
        else:
            result = manager.handle_key(KeyInput(key=key, text=key))
    return result


def test_pending_keys_accumulate_until_complete() -> None:
    manager = make_manager()

    result = press(manager, "2")
    assert result.status == "pending"
    assert manager.pending == "2"

    result = press(manager, "w")
    assert result.status == "command"
    assert manager.pending == ""
    assert manager.editor.buffer.cursor_index == 8


def test_escape_clears_pending_keys() -> None:
    manager = make_manager()
    press(manager, "d", "2")

    result = press(manager, "ESC")

    assert result.status == "cleared"
    assert manager.pending == ""


def test_operator_publishes_plan() -> None:
    manager = make_manager()
    plans = record(manager, "operator.plan")

    press(manager, "d", "w")

    assert len(plans) == 1
    plan = plans[0][1]
    assert isinstance(plan, EditPlan)
    assert plan.operator == Delete()
    assert plan.range == TextRange(0, 4)
    assert manager.editor.buffer.text == "one two three"


def test_unknown_keys_reset_to_normal_with_message() -> None:
    manager = make_manager()
    press(manager, "2")

    result = press(manager, "Z")

    assert result.status == "error"
    assert manager.pending == ""
    assert isinstance(manager.state, NormalState)
    [message] = manager.editor.messages
    assert message.kind is UserMessageKind.ERROR
    assert "Z" in message.message


def test_unsupported_motion_is_surfaced() -> None:
    manager = make_manager()

    result = press(manager, "d", "d")

    assert result.status == "error"
    assert "not yet supported" in manager.editor.messages[-1].message


def test_control_keys_are_ignored_in_normal_mode() -> None:
    manager = make_manager()

    result = manager.handle_key(KeyInput(key="w", text="w", modifiers=("CTRL",)))

    assert result.consumed is False
    assert manager.editor.buffer.cursor_index == 0


def test_insert_mode_edits_text() -> None:
    manager = make_manager("ab")

    press(manager, "i")
    assert isinstance(manager.state, InsertState)

    press(manager, "x", "ENTER")
    assert manager.editor.buffer.text == "x\nab"
    press(manager, "BACKSPACE")
    assert manager.editor.buffer.text == "xab"
    assert manager.editor.buffer.cursor_index == 1

    press(manager, "ESC")
    assert manager.mode_name == "normal"


def test_backspace_at_buffer_start_is_noop() -> None:
    manager = make_manager("ab")
    press(manager, "i")

    assert press(manager, "BACKSPACE").status == "noop"
    assert manager.editor.buffer.text == "ab"


def test_append_moves_before_inserting() -> None:
    manager = make_manager("ab")

    press(manager, "a", "!")

    assert manager.editor.buffer.text == "a!b"


def test_open_line_publishes_plan_and_enters_insert() -> None:
    manager = make_manager("ab\ncd")
    plans = record(manager, "operator.plan")

    press(manager, "o")

    assert manager.mode_name == "insert"
    plan = plans[0][1]
    assert isinstance(plan, EditPlan)
    assert isinstance(plan.operator, NewLineAndEnterMode)


def test_command_line_editing() -> None:
    manager = make_manager()
    events = record(manager, "command.start", "command.end")

    press(manager, ":", "a", "c", "LEFT", "b")
    assert manager.command_text == "abc"

    press(manager, "BACKSPACE")
    assert manager.command_text == "ac"

    press(manager, "RIGHT", "RIGHT", "RIGHT", "d")
    assert manager.command_text == "acd"

    press(manager, "ESC")
    assert manager.mode_name == "normal"
    assert manager.command_text is None
    assert [name for name, _ in events] == ["command.start", "command.end"]


def test_command_line_submits_to_line_commands() -> None:
    manager = make_manager()
    echoed = record(manager, "command.echo")

    result = press(manager, ":", *"echo hi", "ENTER")

    assert result.status == "command_echo"
    assert echoed == [("command.echo", "hi")]
    assert manager.mode_name == "normal"


def test_unknown_line_command_is_reported() -> None:
    manager = make_manager()

    result = press(manager, ":", "z", "z", "ENTER")

    assert result.status == "error"
    assert manager.mode_name == "normal"
    assert manager.editor.messages[-1].kind is UserMessageKind.ERROR


def test_visual_selection_and_operator() -> None:
    manager = make_manager()
    events = record(manager, "visual.selection", "operator.plan")

    press(manager, "v")
    assert isinstance(manager.state, VisualState)
    assert manager.state.anchor == 0

    press(manager, "w")
    assert events[-1] == ("visual.selection", TextRange(0, 5))

    press(manager, "y")
    name, plan = events[-1]
    assert name == "operator.plan"
    assert isinstance(plan, EditPlan)
    assert plan.range == TextRange(0, 5)
    assert manager.mode_name == "normal"


def test_visual_backward_selection_is_normalized() -> None:
    manager = make_manager(cursor=8)
    plans = record(manager, "operator.plan")

    press(manager, "v", "b", "b", "c")

    plan = plans[-1][1]
    assert isinstance(plan, EditPlan)
    assert plan.range == TextRange(0, 9)
    assert plan.reversed is True
    assert manager.mode_name == "insert"


def test_visual_toggle_and_escape() -> None:
    manager = make_manager()

    press(manager, "v", "v")
    assert manager.mode_name == "normal"

    press(manager, "v", "ESC")
    assert manager.mode_name == "normal"


def test_message_actions_run_callback() -> None:
    manager = make_manager()
    chosen: List[int] = []
    manager.editor.process_usr_msg(
        UserMessage.info("pick", (("a", "b"), lambda index, _: chosen.append(index)))
    )

    assert manager.focus_messages() is True
    assert manager.mode_name == "user_message"

    press(manager, "2")

    assert chosen == [1]
    assert manager.editor.messages == []
    assert manager.mode_name == "normal"


def test_message_navigation_and_dismissal() -> None:
    manager = make_manager()
    manager.editor.process_error_str("first")
    manager.editor.process_error_str("second")
    manager.focus_messages()

    assert press(manager, "9").status == "no_action"
    press(manager, "k", "x")

    assert [m.message for m in manager.editor.messages] == ["second"]
    assert manager.mode_name == "user_message"

    press(manager, "ESC")
    assert manager.mode_name == "normal"


def test_focus_messages_requires_messages() -> None:
    assert make_manager().focus_messages() is False


def test_tick_expires_plain_messages_only() -> None:
    manager = make_manager()
    manager.editor.process_error_str("oops")
    manager.editor.process_usr_msg(
        UserMessage.warning("keep", (("ok",), lambda index, state: None))
    )

    assert manager.tick(1.0) == 0
    assert manager.tick(2.5) == 1
    assert [m.message for m in manager.editor.messages] == ["keep"]


def test_tick_leaves_message_mode_when_empty() -> None:
    manager = make_manager()
    manager.editor.process_error_str("oops")
    manager.focus_messages()

    manager.tick(10.0)

    assert manager.mode_name == "normal"


def test_mode_switch_events() -> None:
    manager = make_manager()
    events = record(manager, "mode.enter", "mode.exit")

    press(manager, "i", "ESC")

    assert events == [
        ("mode.exit", "normal"),
        ("mode.enter", "insert"),
        ("mode.exit", "insert"),
        ("mode.enter", "normal"),
    ]


def test_bus_subscribers_added_during_emit_wait_for_next_event() -> None:
    bus = ModeBus()
    calls: List[str] = []

    def first(payload: object) -> None:
        calls.append("first")
        bus.subscribe("ping", lambda _: calls.append("late"))

    bus.subscribe("ping", first)
    bus.emit("ping")
    assert calls == ["first"]

    bus.emit("ping")
    assert calls == ["first", "first", "late"]


def test_inner_word_is_reported_without_a_plan() -> None:
    manager = make_manager()
    plans = record(manager, "operator.plan")

    result = press(manager, "d", "i", "w")

    assert result.status == "error"
    assert plans == []
    assert "not yet supported" in manager.editor.messages[-1].message

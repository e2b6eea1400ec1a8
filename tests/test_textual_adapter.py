from __future__ import annotations

from typing import List, Sequence

from modal_engine.adapters.textual import TextualUIHooks, TextualVimAdapter
from modal_engine.buffer import TextBuffer
from modal_engine.modes import EditorState, ModeManager, UserMessage


def make_manager(text: str = "abc\ndef") -> ModeManager:
    return ModeManager(EditorState(buffer=TextBuffer(text)))


def test_adapter_updates_buffer_and_status() -> None:
    manager = make_manager()
    updates: List[str] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda buffer: updates.append(buffer.text),
        update_status=lambda status: statuses.append(status),
    )
    adapter = TextualVimAdapter(manager, hooks)
    assert statuses[-1] == "normal / ln 1 col 1"

    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("x", text="x")

    assert updates[-1] == "xabc\ndef"
    assert statuses[-1] == "insert / ln 1 col 2"

    adapter.handle_textual_key("ESC")
    adapter.handle_textual_key("j", text="j")
    assert statuses[-1] == "normal / ln 2 col 2"


def test_status_line_shows_pending_keys() -> None:
    manager = make_manager()
    statuses: List[str] = []
    adapter = TextualVimAdapter(
        manager,
        TextualUIHooks(
            update_buffer=lambda buffer: None, update_status=statuses.append
        ),
    )

    adapter.handle_textual_key("2", text="2")
    adapter.handle_textual_key("d", text="d")

    assert statuses[-1] == "normal / ln 1 col 1 [2d]"


def test_adapter_relays_command_events() -> None:
    manager = make_manager()
    command_lines: List[str] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_buffer=lambda buffer: None,
        show_command=lambda text: command_lines.append(text),
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualVimAdapter(manager, hooks)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("w", text="w")
    adapter.handle_textual_key("q", text="q")
    assert command_lines[-1] == "wq"
    adapter.handle_textual_key("ENTER")

    assert command_lines[-1] == ""
    assert ("command.submit", "wq") in events
    written = next(payload for name, payload in events if name == "command.write")
    assert isinstance(written, dict)
    assert written["force"] is False
    assert any(name == "command.quit" for name, _ in events)


def test_adapter_surfaces_messages() -> None:
    manager = make_manager()
    shown: List[Sequence[UserMessage]] = []
    adapter = TextualVimAdapter(
        manager,
        TextualUIHooks(
            update_buffer=lambda buffer: None, show_messages=shown.append
        ),
    )

    adapter.handle_textual_key("Z", text="Z")

    assert shown[-1][0].message.startswith("unknown command")
    assert adapter.focus_messages() is True
    assert manager.mode_name == "user_message"

    assert adapter.tick(60.0) == 1
    assert shown[-1] == ()
    assert manager.mode_name == "normal"


def test_adapter_logs_key_traffic() -> None:
    manager = make_manager()
    lines: List[str] = []
    adapter = TextualVimAdapter(
        manager, TextualUIHooks(update_buffer=lambda buffer: None, log=lines.append)
    )

    adapter.handle_textual_key("l", text="l")

    assert any(line.startswith("key ->") for line in lines)
    assert any("status='command'" in line for line in lines)

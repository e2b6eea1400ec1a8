"""Minimal Textual adapter that wires ModeManager events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence

from modal_engine.buffer import TextBuffer
from modal_engine.modes import KeyInput, ModeResult, UserMessage
from modal_engine.modes.mode_manager import ModeManager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[TextBuffer], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    show_messages: Callable[[Sequence[UserMessage]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualVimAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    EVENTS = (
        "operator.plan",
        "visual.selection",
        "command.start",
        "command.end",
        "command.submit",
        "command.update",
        "command.write",
        "command.quit",
        "command.edit",
        "command.echo",
        "message.posted",
        "message.dismissed",
        "message.expired",
        "message.action",
    )

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def tick(self, elapsed: float) -> int:
        """Age messages and redraw the message list if any expired."""

        expired = self.manager.tick(elapsed)
        if expired:
            self._log_state("tick ->", expired=expired)
            self._refresh()
        return expired

    def focus_messages(self) -> bool:
        focused = self.manager.focus_messages()
        self._refresh()
        return focused

    def status_line(self) -> str:
        buffer = self.manager.editor.buffer
        cursor = buffer.cursor_index
        line = buffer.line_for_index(cursor) + 1
        column = buffer.column_for_index(cursor) + 1
        status = f"{self.manager.mode_name} / ln {line} col {column}"
        pending = self.manager.pending
        if pending:
            status += f" [{pending}]"
        return status

    def _subscribe_events(self) -> None:
        bus = self.manager.editor.bus
        for event in self.EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name.startswith("command"):
            self._refresh_command_line()
        elif name.startswith("message"):
            self.hooks.show_messages(tuple(self.manager.editor.messages))

    def _refresh(self) -> None:
        self.hooks.update_buffer(self.manager.editor.buffer)
        self.hooks.update_status(self.status_line())
        self._refresh_command_line()
        self.hooks.show_messages(tuple(self.manager.editor.messages))

    def _refresh_command_line(self) -> None:
        self.hooks.show_command(self.manager.command_text or "")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.manager.editor.buffer
        return {
            "mode": self.manager.mode_name,
            "cursor": buffer.cursor_index,
            "pending": self.manager.pending,
            "command": self.manager.command_text or "",
            "buffer": buffer.name,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualVimAdapter", "TextualUIHooks"]

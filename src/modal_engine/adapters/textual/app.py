"""Executable Textual app that hosts the modal engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from modal_engine.buffer import TextBuffer
from modal_engine.modes import EditorState, ModeManager, UserMessage
from modal_engine.runtime import EngineSettings, telemetry

from .controller import TextualUIHooks, TextualVimAdapter

TICK_SECONDS = 0.1
CURSOR_MARK = "\u2588"

# Textual key names mapped to the engine's named keys.
NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "tab": "TAB",
}


def create_default_manager(
    text: str = "", *, settings: EngineSettings | None = None
) -> ModeManager:
    """Build a ModeManager over a fresh buffer holding ``text``."""

    editor = EditorState(
        buffer=TextBuffer(text),
        settings=settings or EngineSettings.from_env(),
    )
    return ModeManager(editor)


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    command_text: str = ""
    messages_text: str = ""


class ModalEngineApp(App[None]):
    """Minimal Textual UI embedding the modal engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#messages {
		height: auto;
		max-height: 6;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+w", "focus_messages", "Messages"),
    ]

    def __init__(self, *, text: str = "", name: str = "default") -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = text
        self._buffer_name = name
        self.manager: ModeManager | None = None
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._messages_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self.logger = telemetry.get_logger("modal_engine.adapters")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._messages_widget = Static("", id="messages", markup=False)
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._messages_widget
        yield self._status_widget
        yield self._command_widget
        yield Footer()

    async def on_mount(self) -> None:
        self.manager = create_default_manager(self._initial_text)
        self.manager.editor.buffer.name = self._buffer_name
        self.manager.editor.bus.subscribe("command.quit", self._handle_quit)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            show_messages=self._show_messages,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualVimAdapter(self.manager, hooks)
        self.set_interval(TICK_SECONDS, self._tick)

    def _tick(self) -> None:
        if self.adapter:
            self.adapter.tick(TICK_SECONDS)

    def action_focus_messages(self) -> None:
        if self.adapter:
            self.adapter.focus_messages()

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, buffer: TextBuffer) -> None:
        text = buffer.text
        cursor = buffer.cursor_index
        rendered = text[:cursor] + CURSOR_MARK + text[cursor:]
        self._state.buffer_text = text
        if self._buffer_widget:
            self._buffer_widget.update(rendered)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            active = self.manager is not None and self.manager.command_text is not None
            self._command_widget.update(f":{command}" if active else "")

    def _show_messages(self, messages: Sequence[UserMessage]) -> None:
        lines = []
        for message in messages:
            line = f"{message.kind.value}: {message.message}"
            if message.labels:
                options = "  ".join(
                    f"{index}) {label}"
                    for index, label in enumerate(message.labels, start=1)
                )
                line = f"{line}  {options}"
            lines.append(line)
        self._state.messages_text = "\n".join(lines)
        if self._messages_widget:
            self._messages_widget.update(self._state.messages_text)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.echo" and isinstance(payload, str):
            self._update_status(payload)

    def _handle_quit(self, payload: object | None) -> None:
        del payload
        self.exit()

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q", "ctrl+w"}:
            return None
        modifiers = []
        if key.startswith("ctrl+"):
            modifiers.append("CTRL")
        if key in NAMED_KEYS:
            return (NAMED_KEYS[key], None, tuple(modifiers))
        if event.character and event.is_printable:
            return (event.character, event.character, tuple(modifiers))
        return (key.upper(), None, tuple(modifiers))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the modal engine Textual demo.")
    parser.add_argument(
        "path",
        nargs="?",
        help="Optional file whose contents seed the buffer",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = ""
    name = "default"
    if args.path:
        path = Path(args.path)
        if path.exists():
            text = path.read_text(encoding="utf-8")
        name = path.name
    app = ModalEngineApp(text=text, name=name)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()

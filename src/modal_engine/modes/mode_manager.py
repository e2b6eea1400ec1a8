"""Mode manager owning the active mode state and dispatching key events."""

from __future__ import annotations

from typing import Optional

from modal_engine.buffer import BufferValidationError
from modal_engine.command import CommandError, MotionError
from modal_engine.runtime import telemetry

from .base_mode import KeyInput, ModeResult
from .command_mode import handle_command_key
from .editor_state import EditorState
from .insert_mode import handle_insert_key
from .message_mode import handle_message_key
from .normal_mode import handle_normal_key
from .states import (
    MODE_NAMES,
    CommandState,
    InsertState,
    ModeState,
    NormalState,
    UserMessageState,
    VisualState,
)
from .visual_mode import handle_visual_key

# Errors that reset the editor to normal mode and surface as a message.
RECOVERABLE_ERRORS = (CommandError, MotionError, BufferValidationError)


class ModeManager:
    """Holds the active mode and routes keys to its handler."""

    def __init__(
        self, editor: EditorState | None = None, *, state: ModeState | None = None
    ) -> None:
        self.editor = editor or EditorState()
        self.state: ModeState = state or NormalState()

    @property
    def mode_name(self) -> str:
        return self.state.name

    @property
    def pending(self) -> str:
        if isinstance(self.state, (NormalState, VisualState)):
            return self.state.pending
        return ""

    @property
    def command_text(self) -> Optional[str]:
        if isinstance(self.state, CommandState):
            return self.state.text
        return None

    def _enter(self, name: str) -> ModeState:
        if name == NormalState.name:
            return NormalState()
        if name == InsertState.name:
            return InsertState()
        if name == CommandState.name:
            return CommandState()
        if name == VisualState.name:
            return VisualState(anchor=self.editor.buffer.cursor_index)
        if name == UserMessageState.name:
            return UserMessageState(selected=max(0, len(self.editor.messages) - 1))
        raise KeyError(f"Unknown mode '{name}'")

    def switch_mode(self, name: str) -> None:
        if name not in MODE_NAMES:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.state
        if previous.name == name:
            return
        self.state = self._enter(name)
        self.editor.bus.emit("mode.exit", previous.name)
        if previous.name == CommandState.name:
            self.editor.bus.emit("command.end", None)
        self.editor.bus.emit("mode.enter", name)
        if name == CommandState.name:
            self.editor.bus.emit("command.start", None)
        telemetry.record_event(
            "mode.switch",
            data={"mode": name, "previous": previous.name},
            logger_name="modal_engine.modes",
        )

    def focus_messages(self) -> bool:
        """Move focus to the message list; ``False`` when there is nothing to show."""

        if not self.editor.messages:
            return False
        self.switch_mode(UserMessageState.name)
        return True

    def handle_key(self, key: KeyInput) -> ModeResult:
        name = self.state.name
        with telemetry.span(
            name=f"mode::{name}",
            component=True,
            metadata={"key": key.key, "mode": name},
        ):
            try:
                result = self._dispatch(key)
            except RECOVERABLE_ERRORS as exc:
                result = self._recover(exc)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

    def _dispatch(self, key: KeyInput) -> ModeResult:
        state = self.state
        if isinstance(state, NormalState):
            return handle_normal_key(state, key, self.editor)
        if isinstance(state, InsertState):
            return handle_insert_key(state, key, self.editor)
        if isinstance(state, CommandState):
            return handle_command_key(state, key, self.editor)
        if isinstance(state, VisualState):
            return handle_visual_key(state, key, self.editor)
        if isinstance(state, UserMessageState):
            return handle_message_key(state, key, self.editor)
        raise TypeError(f"Unknown mode state {state!r}")

    def _recover(self, error: Exception) -> ModeResult:
        telemetry.record_event(
            "mode.recover",
            level="warning",
            data={"mode": self.state.name, "error": type(error).__name__},
            logger_name="modal_engine.modes",
        )
        self.editor.process_error(error)
        if isinstance(self.state, (NormalState, VisualState)):
            self.state.pending = ""
        return ModeResult(
            consumed=True,
            switch_to=NormalState.name,
            status="error",
            message=str(error),
        )

    def tick(self, elapsed: float) -> int:
        """Age posted messages; returns how many expired."""

        expired = self.editor.tick(elapsed)
        if isinstance(self.state, UserMessageState) and not self.editor.messages:
            self.switch_mode(NormalState.name)
        return len(expired)


__all__ = ["ModeManager", "RECOVERABLE_ERRORS"]

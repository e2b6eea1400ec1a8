"""Editor-wide state the modes operate on: buffer, registers and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from modal_engine.buffer import RegisterBank, TextBuffer
from modal_engine.runtime import EngineSettings, telemetry

from .base_mode import ModeBus

ActionCallback = Callable[[int, "EditorState"], None]
UserMessageActions = Tuple[Sequence[str], ActionCallback]


class UserMessageKind(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class UserMessage:
    """A message surfaced to the user, optionally offering numbered actions."""

    kind: UserMessageKind
    message: str
    actions: Optional[UserMessageActions] = None
    ttl: float = 3.0

    @classmethod
    def error(
        cls, message: str, actions: Optional[UserMessageActions] = None
    ) -> "UserMessage":
        return cls(UserMessageKind.ERROR, message, actions)

    @classmethod
    def warning(
        cls, message: str, actions: Optional[UserMessageActions] = None
    ) -> "UserMessage":
        return cls(UserMessageKind.WARNING, message, actions)

    @classmethod
    def info(
        cls, message: str, actions: Optional[UserMessageActions] = None
    ) -> "UserMessage":
        return cls(UserMessageKind.INFO, message, actions)

    @property
    def labels(self) -> Tuple[str, ...]:
        if self.actions is None:
            return ()
        return tuple(self.actions[0])


@dataclass
class EditorState:
    buffer: TextBuffer = field(default_factory=TextBuffer)
    registers: RegisterBank = field(default_factory=RegisterBank)
    bus: ModeBus = field(default_factory=ModeBus)
    settings: EngineSettings = field(default_factory=EngineSettings)
    messages: List[UserMessage] = field(default_factory=list)

    def process_usr_msg(self, message: UserMessage) -> None:
        if message.actions is None:
            message.ttl = self.settings.message_ttl
        self.messages.append(message)
        telemetry.record_event(
            "message.posted",
            level="warning" if message.kind is UserMessageKind.ERROR else "info",
            data={"kind": message.kind.value, "text": message.message},
            logger_name="modal_engine.modes",
        )
        self.bus.emit("message.posted", message)

    def process_error_str(self, text: str) -> None:
        self.process_usr_msg(UserMessage.error(text))

    def process_error(self, error: BaseException) -> None:
        self.process_error_str(str(error) or type(error).__name__)

    def dismiss(self, index: int) -> UserMessage:
        message = self.messages.pop(index)
        self.bus.emit("message.dismissed", message)
        return message

    def choose_action(self, message_index: int, action_index: int) -> bool:
        """Run action ``action_index`` of a message and dismiss it.

        Returns ``False`` when the message offers no such action.
        """

        message = self.messages[message_index]
        if message.actions is None:
            return False
        labels, callback = message.actions
        if not 0 <= action_index < len(labels):
            return False
        self.dismiss(message_index)
        callback(action_index, self)
        return True

    def tick(self, elapsed: float) -> List[UserMessage]:
        """Age messages by ``elapsed`` seconds; drop expired ones without actions."""

        expired: List[UserMessage] = []
        kept: List[UserMessage] = []
        for message in self.messages:
            if message.actions is None:
                message.ttl -= elapsed
                if message.ttl <= 0:
                    expired.append(message)
                    continue
            kept.append(message)
        self.messages = kept
        for message in expired:
            self.bus.emit("message.expired", message)
        return expired


__all__ = [
    "ActionCallback",
    "EditorState",
    "UserMessage",
    "UserMessageActions",
    "UserMessageKind",
]

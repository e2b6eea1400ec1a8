"""Mode states, per-mode key handlers and the manager dispatching between them."""

from .base_mode import KeyInput, ModeBus, ModeResult
from .editor_state import EditorState, UserMessage, UserMessageKind
from .states import (
    CommandState,
    InsertState,
    ModeState,
    NormalState,
    UserMessageState,
    VisualState,
)
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "ModeBus",
    "ModeResult",
    "EditorState",
    "UserMessage",
    "UserMessageKind",
    "ModeState",
    "NormalState",
    "InsertState",
    "CommandState",
    "VisualState",
    "UserMessageState",
    "ModeManager",
]
